"""
Engine Core - Jump61 board state and chain-reaction propagation.

The engine is the runtime that:
1. Holds the board's squares
2. Checks move legality and detects the winner
3. Applies moves, running jumps to completion
4. Records snapshots so moves can be undone
"""

from .square import Side, Square, INITIAL, MAX_SPOTS, square
from .move import Move
from .errors import Jump61Error, IllegalMoveError, UndoHistoryError, SearchError
from .board import Board
from .constant_board import ConstantBoard

__all__ = [
    "Side",
    "Square",
    "INITIAL",
    "MAX_SPOTS",
    "square",
    "Move",
    "Jump61Error",
    "IllegalMoveError",
    "UndoHistoryError",
    "SearchError",
    "Board",
    "ConstantBoard",
]
