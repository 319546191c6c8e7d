"""
Player Policy - Interface for choosing moves.

A PlayerPolicy looks at a board and returns a decision naming the square
to play. Policies never apply the move themselves; the driver does that
once, after the decision is made.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
import random

from ..engine_core.errors import SearchError

if TYPE_CHECKING:
    from ..engine_core.board import Board
    from ..engine_core.square import Side


@dataclass
class BotDecision:
    """
    A move chosen by a policy.

    Contains:
    - The square to play (index and 1-based row/column)
    - Explanation (for UI/debugging)
    - Search details, when a search was run
    """
    side: Side
    index: int
    row: int
    col: int
    explanation: str = ""
    score: int = 0
    evaluated_moves: int = 0
    nodes: int = 0
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_square(cls, board: Board, side: Side, index: int, **kwargs) -> BotDecision:
        """Build a decision for square #INDEX of BOARD."""
        return cls(
            side=side,
            index=index,
            row=board.row(index),
            col=board.col(index),
            **kwargs,
        )

    @property
    def move_string(self) -> str:
        return f"{self.row} {self.col}"


class PlayerPolicy(ABC):
    """
    Abstract base class for move policies.

    Implementations range from trivial baselines to game-tree search.
    """

    def __init__(self, side: Side):
        self.side = side

    @abstractmethod
    def select_move(self, board: Board) -> BotDecision:
        """
        Choose a move for self.side on BOARD.

        Raises SearchError if the game is over or there is no legal move.
        """

    def get_name(self) -> str:
        """Get the policy's name/identifier."""
        return self.__class__.__name__

    def _legal_or_fail(self, board: Board) -> list[int]:
        if board.winner() is not None:
            raise SearchError("Game is already won")
        legal = board.legal_indices(self.side)
        if not legal:
            raise SearchError(f"No legal move for {self.side.value}")
        return legal


class RandomPolicy(PlayerPolicy):
    """
    Random policy - plays a uniformly random legal square.

    Used for:
    - Testing
    - Baseline comparison
    """

    def __init__(self, side: Side, seed: int | None = None):
        super().__init__(side)
        self.rng = random.Random(seed)

    def select_move(self, board: Board) -> BotDecision:
        legal = self._legal_or_fail(board)
        index = self.rng.choice(legal)
        return BotDecision.for_square(
            board, self.side, index,
            explanation="Selected randomly",
            evaluated_moves=len(legal),
        )


class FirstLegalPolicy(PlayerPolicy):
    """First-legal policy - always plays the lowest-numbered legal square."""

    def select_move(self, board: Board) -> BotDecision:
        legal = self._legal_or_fail(board)
        return BotDecision.for_square(
            board, self.side, legal[0],
            explanation="Selected first legal square",
            evaluated_moves=1,
        )
