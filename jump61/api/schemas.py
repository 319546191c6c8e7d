"""
Pydantic Schemas - Board and decision snapshots for observers.

These models are the contract between the engine and display or logging
layers. They are built from a Board (or its read-only view) and carry
no reference back to it.
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from pydantic import BaseModel, Field

from ..engine_core.square import Side

if TYPE_CHECKING:
    from ..bots.policy import BotDecision
    from ..engine_core.board import Board
    from ..engine_core.constant_board import ConstantBoard


class SideName(str, Enum):
    """Side values as they appear in JSON."""
    RED = "red"
    BLUE = "blue"
    WHITE = "white"

    @classmethod
    def of(cls, side: Side) -> SideName:
        return cls(side.value)


class SquareInfo(BaseModel):
    """One square for display."""
    index: int
    row: int
    col: int
    side: SideName
    spots: int = Field(ge=1)


class BoardSnapshot(BaseModel):
    """Complete board contents at a point in time."""
    size: int = Field(ge=2)
    squares: list[SquareInfo]
    whose_move: SideName
    winner: Optional[SideName] = None
    num_moves: int = 0
    num_pieces: int = 0

    @classmethod
    def from_board(cls, board: Union[Board, ConstantBoard]) -> BoardSnapshot:
        winner = board.winner()
        return cls(
            size=board.size,
            squares=[
                SquareInfo(
                    index=n,
                    row=board.row(n),
                    col=board.col(n),
                    side=SideName.of(sq.side),
                    spots=sq.spots,
                )
                for n, sq in enumerate(board.squares)
            ],
            whose_move=SideName.of(board.whose_move()),
            winner=SideName.of(winner) if winner is not None else None,
            num_moves=board.num_moves,
            num_pieces=board.num_pieces(),
        )


class DecisionInfo(BaseModel):
    """A chosen move, as reported to observers."""
    side: SideName
    index: int
    row: int
    col: int
    move: str = Field(description='"R C" move string')
    score: int = 0
    explanation: str = ""
    nodes: int = 0

    @classmethod
    def from_decision(cls, decision: BotDecision) -> DecisionInfo:
        return cls(
            side=SideName.of(decision.side),
            index=decision.index,
            row=decision.row,
            col=decision.col,
            move=decision.move_string,
            score=decision.score,
            explanation=decision.explanation,
            nodes=decision.nodes,
        )
