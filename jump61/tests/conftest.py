"""
Pytest fixtures for Jump61 tests.
"""

import pytest

from ..engine_core import Board, Side


@pytest.fixture
def board2() -> Board:
    """Empty 2x2 board: every square is a corner."""
    return Board(2)


@pytest.fixture
def board3() -> Board:
    """Empty 3x3 board."""
    return Board(3)


@pytest.fixture
def board4() -> Board:
    """Empty 4x4 board."""
    return Board(4)


@pytest.fixture
def chain_board(board2: Board) -> Board:
    """
    2x2 board after RED 1 1, BLUE 2 2, RED 1 1.

    The second RED move jumps, leaving:
        1r 2r
        2r 2b
    """
    board2.add_spot(Side.RED, 0)
    board2.add_spot(Side.BLUE, 3)
    board2.add_spot(Side.RED, 0)
    return board2


def check_board(board: Board, *contents):
    """
    Assert BOARD holds exactly CONTENTS.

    CONTENTS is a sequence of (row, col, spots, side) tuples. Every square
    not listed must be WHITE with one spot.
    """
    listed = set()
    for r, c, spots, side in contents:
        sq = board.get_at(r, c)
        assert sq.spots == spots, f"spots at {r} {c}"
        assert sq.side is side, f"side at {r} {c}"
        listed.add(board.sq_num(r, c))
    for n in range(board.num_squares):
        if n in listed:
            continue
        sq = board.get(n)
        assert sq.side is Side.WHITE, f"extra square filled at #{n}"
        assert sq.spots == 1, f"bad white square #{n}"
