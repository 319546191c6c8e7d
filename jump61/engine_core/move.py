"""
Move - A single spot placement.

Moves are what players produce and what boards record. A move is a side
plus a linear square index; row/column conversion needs the board size,
so the helpers take it explicitly.
"""

from __future__ import annotations
from dataclasses import dataclass

from .square import Side


@dataclass(frozen=True)
class Move:
    """A spot added by SIDE to square #INDEX (row-major, from 0)."""
    side: Side
    index: int

    @classmethod
    def at(cls, side: Side, row: int, col: int, size: int) -> Move:
        """Factory for a move given 1-based ROW and COL on a SIZE board."""
        if not (1 <= row <= size and 1 <= col <= size):
            raise IndexError(f"No square at row {row}, column {col}")
        return cls(side=side, index=(row - 1) * size + (col - 1))

    def row(self, size: int) -> int:
        return self.index // size + 1

    def col(self, size: int) -> int:
        return self.index % size + 1

    def to_string(self, size: int) -> str:
        """The "R C" form used in transcripts."""
        return f"{self.row(size)} {self.col(size)}"
