"""
Tests for the alpha-beta search.

Tests:
- Regression line on an empty 4x4 board
- Lowest-square tie-break
- Pruned and unpruned search agree
- The board is left untouched
- Preconditions
"""

import pytest

from ..bots.evaluator import EvaluationWeights, StaticEvaluator
from ..bots.search import (
    NEG_INF,
    POS_INF,
    SearchLimits,
    SearchStats,
    choose_move,
    full_minimax,
    minimax,
    search_for_move,
)
from ..engine_core import Board, SearchError, Side

RED = Side.RED
BLUE = Side.BLUE


def _positions():
    """Small positions with wins inside a shallow horizon."""
    empty2 = Board(2)

    chain = Board(2)
    chain.add_spot(RED, 0)
    chain.add_spot(BLUE, 3)
    chain.add_spot(RED, 0)

    crowded = Board(3)
    for r, c, n, side in [
        (1, 1, 2, RED), (1, 2, 2, RED), (1, 3, 2, BLUE),
        (2, 1, 2, BLUE), (2, 2, 3, RED), (3, 3, 1, BLUE),
    ]:
        crowded.set(r, c, n, side)

    return [empty2, chain, crowded]


class TestRegressionLine:
    """Fixed choices from an empty 4x4 board at the default depth."""

    def test_opening_sequence(self, board4):
        assert choose_move(board4, RED) == 0
        board4.add_spot(RED, 0)

        assert choose_move(board4, BLUE) == 1
        board4.add_spot(BLUE, 1)

        assert choose_move(board4, RED) == 0
        board4.add_spot(RED, 0)

        assert choose_move(board4, BLUE) == 2


class TestTieBreak:
    """Among equal scores the lowest square wins."""

    def test_empty_board_picks_first_square(self, board3):
        result = search_for_move(board3, RED, SearchLimits(max_depth=1))
        assert result.best_move == 0
        assert result.score == 1

    def test_skips_opponent_squares(self, board3):
        board3.add_spot(RED, 0)
        board3.add_spot(BLUE, 4)
        board3.add_spot(RED, 1)
        assert board3.legal_indices(BLUE) == [2, 3, 4, 5, 6, 7, 8]
        assert choose_move(board3, BLUE, depth=1) == 2

    def test_all_equal_scores_choose_lowest(self, board3):
        board3.set(1, 1, 1, BLUE)
        board3.set(1, 2, 1, BLUE)
        board3.set(2, 1, 1, BLUE)
        assert choose_move(board3, RED, depth=2) == 2


class TestPruning:
    """Alpha-beta returns what full minimax returns."""

    @pytest.mark.parametrize("depth", [1, 2, 3, 4])
    @pytest.mark.parametrize("side", [RED, BLUE])
    @pytest.mark.parametrize("sense", [1, -1])
    def test_node_values_agree(self, depth, side, sense):
        for board in _positions():
            if board.winner() is not None or not board.legal_indices(side):
                continue
            pruned = minimax(board, depth, sense, side, NEG_INF, POS_INF)
            full = full_minimax(board, depth, sense, side)
            assert pruned == full

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_root_choice_agrees(self, depth):
        for board in _positions():
            side = board.whose_move()
            limits = SearchLimits(max_depth=depth)
            pruned = search_for_move(board, side, limits)
            full = search_for_move(board, side, limits, pruning=False)
            assert pruned.score == full.score
            assert pruned.best_move == full.best_move
            assert pruned.nodes <= full.nodes

    def test_cutoffs_happen(self, board3):
        stats = SearchStats()
        minimax(board3, 3, -1, BLUE, NEG_INF, POS_INF, stats=stats)
        assert stats.cutoffs > 0


class TestEvaluation:
    """Tests for the static evaluator."""

    def test_undecided_is_neutral(self, board3):
        evaluator = StaticEvaluator()
        assert evaluator.evaluate(board3, 1, 5) == 1
        assert evaluator.evaluate(board3, -1, 5) == 1

    def test_win_scales_with_remaining_depth(self, board2):
        for r in (1, 2):
            for c in (1, 2):
                board2.set(r, c, 1, RED)
        evaluator = StaticEvaluator()
        assert evaluator.evaluate(board2, 1, 3) == 300
        assert evaluator.evaluate(board2, -1, 3) == -300
        assert evaluator.evaluate(board2, 1, 0) == 0

    def test_custom_weights(self, board3):
        evaluator = StaticEvaluator(EvaluationWeights(win_value=10, neutral_value=0))
        assert evaluator.evaluate(board3, 1, 4) == 0

    def test_immediate_win_scored_at_reply(self, board2):
        """
        A win reached by the root move is scored at the minimizing reply,
        so with the reference weights it counts against the mover.
        """
        board2.set(1, 1, 2, RED)
        board2.set(1, 2, 1, BLUE)
        board2.set(2, 1, 2, RED)
        board2.set(2, 2, 1, RED)
        result = search_for_move(board2, RED, SearchLimits(max_depth=2))
        assert result.best_move == 3
        assert result.score == 0
        board2.add_spot(RED, 0)
        assert board2.winner() is RED
        assert minimax(board2, 2, -1, BLUE, NEG_INF, POS_INF) == -200


class TestBoardPreserved:
    """The search explores in place and restores everything."""

    def test_contents_and_history_restored(self, board3):
        board3.add_spot(RED, 0)
        board3.add_spot(BLUE, 4)
        before = board3.squares
        moves = board3.moves

        search_for_move(board3, RED, SearchLimits(max_depth=3))

        assert board3.squares == before
        assert board3.moves == moves
        assert board3.num_moves == 2
        assert not board3.game_over
        board3.undo()
        board3.undo()
        assert board3.num_moves == 0

    def test_no_notifications_while_searching(self, board3):
        seen = []
        board3.set_notifier(seen.append)
        search_for_move(board3, RED, SearchLimits(max_depth=2))
        assert len(seen) == 1


class TestPreconditions:
    """Searching a finished or blocked position fails loudly."""

    def test_won_position(self, board2):
        for r in (1, 2):
            for c in (1, 2):
                board2.set(r, c, 1, BLUE)
        with pytest.raises(SearchError):
            search_for_move(board2, RED)

    def test_no_legal_move(self, board3):
        with pytest.raises(SearchError):
            search_for_move(board3, Side.WHITE)

    def test_negative_depth_rejected(self):
        with pytest.raises(ValueError):
            SearchLimits(max_depth=-1)
