"""
Alpha-Beta Search - Game-tree search over a live Board.

The search explores in place: every trial move is made with add_spot()
and taken back with undo() before the frame returns, so the caller's
board is left exactly as it was. No second mutable board is created.

A single routine serves both players through SENSE (+1 maximizing,
-1 minimizing). Moves are always tried in ascending square order and a
score replaces the running best only when strictly better, so among
equal scores the lowest square number wins.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import logging

from ..engine_core.constant_board import ConstantBoard
from ..engine_core.errors import SearchError
from .evaluator import StaticEvaluator

if TYPE_CHECKING:
    from ..engine_core.board import Board
    from ..engine_core.square import Side

logger = logging.getLogger(__name__)

POS_INF = 1_000_000
NEG_INF = -1_000_000

DEFAULT_DEPTH = 7

_DEFAULT_EVALUATOR = StaticEvaluator()


@dataclass(frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""
    max_depth: int = DEFAULT_DEPTH

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")


@dataclass
class SearchStats:
    """Counters collected while searching."""
    nodes: int = 0
    cutoffs: int = 0


@dataclass(frozen=True)
class SearchResult:
    """Result produced by search_for_move()."""
    best_move: int
    score: int
    depth: int
    nodes: int
    cutoffs: int = 0


def minimax(
    board: Board,
    depth: int,
    sense: int,
    side: Side,
    alpha: int,
    beta: int,
    evaluator: StaticEvaluator | None = None,
    stats: SearchStats | None = None,
) -> int:
    """
    Value of BOARD with SIDE to move, searched DEPTH plies deep.

    The value is maximal (SENSE == 1) or minimal (SENSE == -1) over SIDE's
    moves; once alpha >= beta the remaining moves are skipped because the
    parent cannot use the result.
    """
    evaluator = evaluator or _DEFAULT_EVALUATOR
    if stats is not None:
        stats.nodes += 1
    if depth == 0 or board.winner() is not None:
        return evaluator.evaluate(board, sense, depth)

    best_score = sense * NEG_INF
    for n in board.legal_indices(side):
        board.add_spot(side, n)
        try:
            score = minimax(board, depth - 1, -sense, side.opposite(),
                            alpha, beta, evaluator, stats)
        finally:
            board.undo()
        if sense * (score - best_score) > 0:
            best_score = score
            if sense == 1:
                alpha = max(alpha, best_score)
            else:
                beta = min(beta, best_score)
            if alpha >= beta:
                if stats is not None:
                    stats.cutoffs += 1
                return best_score
    return best_score


def full_minimax(
    board: Board,
    depth: int,
    sense: int,
    side: Side,
    evaluator: StaticEvaluator | None = None,
    stats: SearchStats | None = None,
) -> int:
    """Unpruned minimax over the same tree as minimax()."""
    evaluator = evaluator or _DEFAULT_EVALUATOR
    if stats is not None:
        stats.nodes += 1
    if depth == 0 or board.winner() is not None:
        return evaluator.evaluate(board, sense, depth)

    best_score = sense * NEG_INF
    for n in board.legal_indices(side):
        board.add_spot(side, n)
        try:
            score = full_minimax(board, depth - 1, -sense, side.opposite(),
                                 evaluator, stats)
        finally:
            board.undo()
        if sense * (score - best_score) > 0:
            best_score = score
    return best_score


def _searchable(board: Board | ConstantBoard) -> Board:
    if isinstance(board, ConstantBoard):
        return board.board
    return board


def search_for_move(
    board: Board | ConstantBoard,
    side: Side,
    limits: SearchLimits | None = None,
    evaluator: StaticEvaluator | None = None,
    pruning: bool = True,
) -> SearchResult:
    """
    Pick SIDE's move on BOARD by searching limits.max_depth plies past it.

    Each candidate is scored from the opponent's (minimizing) reply; the
    first candidate with the strictly greatest score is chosen.
    Given a read-only view, the search runs on the board it wraps.
    Raises SearchError if the game is already won or SIDE has no move.
    """
    board = _searchable(board)
    limits = limits or SearchLimits()
    evaluator = evaluator or _DEFAULT_EVALUATOR
    winner = board.winner()
    if winner is not None:
        raise SearchError(f"Game already won by {winner.value}")
    candidates = board.legal_indices(side)
    if not candidates:
        raise SearchError(f"No legal move for {side.value}")

    stats = SearchStats()
    best_score = NEG_INF
    best_move = -1
    with board.quiet():
        for n in candidates:
            board.add_spot(side, n)
            try:
                if pruning:
                    score = minimax(board, limits.max_depth, -1, side.opposite(),
                                    NEG_INF, POS_INF, evaluator, stats)
                else:
                    score = full_minimax(board, limits.max_depth, -1, side.opposite(),
                                         evaluator, stats)
            finally:
                board.undo()
            logger.debug("%s %s scores %d", side.value, board.move_string(n), score)
            if score > best_score:
                best_score = score
                best_move = n

    logger.info(
        "%s chooses %s (score %d, depth %d, %d nodes, %d cutoffs)",
        side.value, board.move_string(best_move), best_score,
        limits.max_depth, stats.nodes, stats.cutoffs,
    )
    return SearchResult(
        best_move=best_move,
        score=best_score,
        depth=limits.max_depth,
        nodes=stats.nodes,
        cutoffs=stats.cutoffs,
    )


def choose_move(board: Board | ConstantBoard, side: Side, depth: int = DEFAULT_DEPTH) -> int:
    """Square number of SIDE's chosen move on BOARD."""
    return search_for_move(board, side, SearchLimits(max_depth=depth)).best_move
