"""
ConstantBoard - Read-only view of a Board.

All queries are delegated to the underlying board, so changes to it show
through. Every mutator is accepted and ignored. Hand this to display
layers and other observers that must not disturb the game.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any
import logging

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)

_QUERIES = frozenset({
    "size",
    "num_squares",
    "num_moves",
    "game_over",
    "squares",
    "moves",
    "exists",
    "exists_index",
    "row",
    "col",
    "sq_num",
    "move_string",
    "neighbors",
    "neighbors_at",
    "get",
    "get_at",
    "num_pieces",
    "num_of_side",
    "whose_move",
    "is_legal",
    "is_legal_at",
    "legal_indices",
    "winner",
    "to_display_string",
})


class ConstantBoard:
    """A view of BOARD that does not allow modifications."""

    def __init__(self, board: Board):
        self._board = board

    def __getattr__(self, name: str) -> Any:
        if name in _QUERIES:
            return getattr(self._board, name)
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    @property
    def board(self) -> Board:
        """The board being viewed."""
        return self._board

    def readonly(self) -> ConstantBoard:
        return self

    def copy(self) -> Board:
        """A mutable copy of the viewed position, detached from it."""
        return self._board.copy()

    # Mutators do nothing.

    def _ignored(self, name: str) -> None:
        logger.debug("Ignoring %s() on read-only board", name)

    def add_spot(self, side, n) -> None:
        self._ignored("add_spot")

    def add_spot_at(self, side, r, c) -> None:
        self._ignored("add_spot_at")

    def undo(self) -> None:
        self._ignored("undo")

    def set(self, r, c, num, side) -> None:
        self._ignored("set")

    def clear(self, size) -> None:
        self._ignored("clear")

    def copy_from(self, other) -> None:
        self._ignored("copy_from")

    def set_notifier(self, notify) -> None:
        self._ignored("set_notifier")

    def __str__(self) -> str:
        return str(self._board)

    def __repr__(self) -> str:
        return f"ConstantBoard({self._board!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConstantBoard):
            other = other._board
        return self._board == other

    __hash__ = None  # type: ignore[assignment]
