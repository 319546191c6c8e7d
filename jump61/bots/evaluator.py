"""
Static Evaluator - Scores leaf positions for the game-tree search.

Only decided positions carry signal: a won board scores
win_value * sense * depth, where depth is the search depth still
remaining when the win was reached, so quicker wins weigh more.
Every undecided board scores the same neutral value, which makes the
search a pure look-ahead for wins within its depth bound.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine_core.board import Board


@dataclass(frozen=True)
class EvaluationWeights:
    """Constants for the static evaluator."""
    win_value: int = 100
    neutral_value: int = 1


class StaticEvaluator:
    """
    Evaluates boards for the alpha-beta search.

    SENSE is +1 at maximizing nodes and -1 at minimizing ones.
    """

    def __init__(self, weights: EvaluationWeights | None = None):
        self.weights = weights or EvaluationWeights()

    def evaluate(self, board: Board, sense: int, depth: int) -> int:
        if board.winner() is not None:
            return self.weights.win_value * sense * depth
        return self.weights.neutral_value
