"""
Square - Contents of one board position.

A square is an immutable (side, spots) pair. Squares are interned by the
square() factory so that equal contents share one instance, which keeps
board snapshots small and comparisons cheap.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """The two players, plus the neutral marker for unowned squares."""
    RED = "red"
    BLUE = "blue"
    WHITE = "white"

    def opposite(self) -> Side:
        """Return the other player. WHITE has no opposite."""
        if self is Side.RED:
            return Side.BLUE
        if self is Side.BLUE:
            return Side.RED
        raise ValueError("WHITE has no opposite side")

    @property
    def is_player(self) -> bool:
        return self is not Side.WHITE

    @property
    def symbol(self) -> str:
        """Single-letter tag used in dumped boards."""
        return {Side.RED: "r", Side.BLUE: "b", Side.WHITE: "-"}[self]


# Spot values above this are never produced by the engine.
MAX_SPOTS = 9


@dataclass(frozen=True)
class Square:
    """
    Contents of one square.

    Do not construct directly; use square() so instances are shared.
    An unowned square always holds exactly one spot.
    """
    side: Side
    spots: int

    @property
    def is_empty(self) -> bool:
        return self.side is Side.WHITE

    def __str__(self) -> str:
        if self.is_empty:
            return "1-"
        return f"{self.spots}{self.side.symbol}"


INITIAL = Square(Side.WHITE, 1)

_ALL_SQUARES: dict[tuple[Side, int], Square] = {}


def square(side: Side, spots: int) -> Square:
    """
    Return the unique Square owned by SIDE holding SPOTS spots.

    A spot count of 0, or WHITE as the side, yields INITIAL.
    """
    if not 0 <= spots <= MAX_SPOTS:
        raise ValueError(f"Spot count out of range: {spots}")
    if spots == 0 or side is Side.WHITE:
        return INITIAL
    key = (side, spots)
    cached = _ALL_SQUARES.get(key)
    if cached is None:
        cached = Square(side, spots)
        _ALL_SQUARES[key] = cached
    return cached
