"""
AI Player - Automated opponent driven by alpha-beta search.

The player is a thin driver: it checks that it is its turn, runs the
search against the live board, and reports the chosen square. The board
comes back unchanged; the caller applies the move.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import logging

from ..engine_core.errors import SearchError
from .evaluator import StaticEvaluator
from .policy import BotDecision, PlayerPolicy
from .search import SearchLimits, search_for_move

if TYPE_CHECKING:
    from ..engine_core.board import Board
    from ..engine_core.square import Side

logger = logging.getLogger(__name__)


class AIPlayer(PlayerPolicy):
    """
    Search-based player.

    Usage:
        ai = AIPlayer(Side.RED, limits=SearchLimits(max_depth=7))
        decision = ai.select_move(board)
        board.add_spot(decision.side, decision.index)
    """

    def __init__(
        self,
        side: Side,
        limits: SearchLimits | None = None,
        evaluator: StaticEvaluator | None = None,
    ):
        super().__init__(side)
        self.limits = limits or SearchLimits()
        self.evaluator = evaluator or StaticEvaluator()

    def select_move(self, board: Board) -> BotDecision:
        to_move = board.whose_move()
        if to_move is not self.side:
            raise SearchError(f"It is {to_move.value}'s move, not {self.side.value}'s")

        result = search_for_move(board, self.side, self.limits, self.evaluator)
        return BotDecision.for_square(
            board, self.side, result.best_move,
            explanation=self._generate_explanation(result.score),
            score=result.score,
            evaluated_moves=len(board.legal_indices(self.side)),
            nodes=result.nodes,
            details={"depth": result.depth, "cutoffs": result.cutoffs},
        )

    def get_move(self, board: Board) -> str:
        """The chosen move as an "R C" string."""
        return self.select_move(board).move_string

    def get_name(self) -> str:
        return f"AI-depth-{self.limits.max_depth}"

    def _generate_explanation(self, score: int) -> str:
        if score != self.evaluator.weights.neutral_value:
            return f"Decisive line within search depth (score {score})"
        return "No decisive line within search depth"
