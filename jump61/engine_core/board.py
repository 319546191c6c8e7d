"""
Board - Mutable N x N Jump61 board with chain-reaction propagation.

Squares are addressed either by 1-based row and column or by square
number in row-major order: row 1 holds squares 0..N-1, row 2 holds
N..2N-1, and so on.

Design principles:
- Single point of mutation: add_spot() is the only gameplay mutator
- Undoable: every committed move pushes a full snapshot onto the history
- Observable: an optional notifier is called after every state change
- Derived turn order: whose_move() is computed from the spot total
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Iterator
import logging

from .errors import IllegalMoveError, UndoHistoryError
from .move import Move
from .square import INITIAL, Side, Square, square

if TYPE_CHECKING:
    from .constant_board import ConstantBoard

logger = logging.getLogger(__name__)

Notifier = Callable[["Board"], None]


def _nop(board: Board) -> None:
    pass


class Board:
    """
    State of a Jump61 game.

    Usage:
        board = Board(4)
        board.add_spot(Side.RED, 0)
        board.undo()
    """

    def __init__(self, size: int = 4):
        self._notifier: Notifier = _nop
        self._quiet = 0
        self._readonly: ConstantBoard | None = None
        self._reset(size)

    def _reset(self, size: int) -> None:
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}")
        self._size = size
        self._squares: list[Square] = [INITIAL] * (size * size)
        self._adjacent = [self._compute_adjacent(n) for n in range(size * size)]
        self._num_moves = 0
        self._game_over = False
        self._moves: list[Move] = []
        self._history: list[tuple[Square, ...]] = [tuple(self._squares)]

    def _compute_adjacent(self, n: int) -> tuple[int, ...]:
        """Orthogonal neighbors of square #N, in up, right, down, left order."""
        r, c = self.row(n), self.col(n)
        candidates = ((r - 1, c), (r, c + 1), (r + 1, c), (r, c - 1))
        return tuple(self.sq_num(rr, cc) for rr, cc in candidates if self.exists(rr, cc))

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of rows (and of columns)."""
        return self._size

    @property
    def num_squares(self) -> int:
        return self._size * self._size

    def exists(self, r: int, c: int) -> bool:
        """True iff row R, column C denotes a square."""
        return 1 <= r <= self._size and 1 <= c <= self._size

    def exists_index(self, n: int) -> bool:
        return 0 <= n < self.num_squares

    def row(self, n: int) -> int:
        return n // self._size + 1

    def col(self, n: int) -> int:
        return n % self._size + 1

    def sq_num(self, r: int, c: int) -> int:
        """Square number of row R, column C."""
        return (r - 1) * self._size + (c - 1)

    def move_string(self, n: int) -> str:
        return f"{self.row(n)} {self.col(n)}"

    def neighbors(self, n: int) -> int:
        """Number of orthogonal neighbors of square #N (2, 3 or 4)."""
        return len(self._adjacent[n])

    def neighbors_at(self, r: int, c: int) -> int:
        return self.neighbors(self.sq_num(r, c))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def num_moves(self) -> int:
        return self._num_moves

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def squares(self) -> tuple[Square, ...]:
        """Current contents, row-major."""
        return tuple(self._squares)

    @property
    def moves(self) -> list[Move]:
        """Moves played since the history was last cleared."""
        return list(self._moves)

    def get(self, n: int) -> Square:
        return self._squares[n]

    def get_at(self, r: int, c: int) -> Square:
        if not self.exists(r, c):
            raise IndexError(f"No square at row {r}, column {c}")
        return self._squares[self.sq_num(r, c)]

    def num_pieces(self) -> int:
        """Total spots on the board. Unowned squares count their one spot."""
        return sum(s.spots for s in self._squares)

    def num_of_side(self, side: Side) -> int:
        """Number of squares owned by SIDE."""
        return sum(1 for s in self._squares if s.side is side)

    def whose_move(self) -> Side:
        """
        Side to move next, derived from spot parity.

        If the game is won this is the loser.
        """
        return Side.RED if (self.num_pieces() + self._size) % 2 == 0 else Side.BLUE

    def is_legal(self, side: Side, n: int | None = None) -> bool:
        """
        True iff SIDE may add a spot to square #N.

        With N omitted, true iff SIDE may move at all (the game is not over).
        """
        if self._game_over or not side.is_player:
            return False
        if n is None:
            return True
        if not self.exists_index(n):
            return False
        owner = self._squares[n].side
        return owner is side or owner is Side.WHITE

    def is_legal_at(self, side: Side, r: int, c: int) -> bool:
        return self.exists(r, c) and self.is_legal(side, self.sq_num(r, c))

    def legal_indices(self, side: Side) -> list[int]:
        """Square numbers where SIDE may play, ascending."""
        return [n for n in range(self.num_squares) if self.is_legal(side, n)]

    def winner(self) -> Side | None:
        """The side owning every square, or None if there is none."""
        ref = self._squares[0].side
        if ref is Side.WHITE:
            return None
        for s in self._squares:
            if s.side is not ref:
                return None
        return ref

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_spot(self, side: Side, n: int) -> None:
        """
        Add a spot from SIDE to square #N and run the resulting jumps.

        Raises IllegalMoveError (leaving the board untouched) if the move
        is not legal.
        """
        if not self.is_legal(side, n):
            raise IllegalMoveError(self._illegal_reason(side, n))
        self._internal_add_spot(side, n)
        if not self._game_over and self.winner() is not None:
            self._game_over = True
        self._num_moves += 1
        self._moves.append(Move(side=side, index=n))
        self._history.append(tuple(self._squares))
        self._announce()

    def add_spot_at(self, side: Side, r: int, c: int) -> None:
        if not self.exists(r, c):
            raise IllegalMoveError(f"No square at row {r}, column {c}")
        self.add_spot(side, self.sq_num(r, c))

    def _illegal_reason(self, side: Side, n: int) -> str:
        if not side.is_player:
            return "WHITE cannot move"
        if self._game_over:
            return "Game is over - no moves allowed"
        if not self.exists_index(n):
            return f"No square #{n}"
        return f"Square {self.move_string(n)} belongs to {self._squares[n].side.value}"

    def _internal_add_spot(self, side: Side, n: int) -> None:
        spots = self._squares[n].spots + 1
        self._squares[n] = square(side, spots)
        if spots > self.neighbors(n):
            self._jump(n)

    def _spill(self, n: int) -> tuple[Side, list[int]]:
        """Take the overflow off square #N; return its side and the squares to feed."""
        sq = self._squares[n]
        self._squares[n] = square(sq.side, sq.spots - self.neighbors(n))
        return sq.side, list(self._adjacent[n])

    def _jump(self, start: int) -> None:
        """
        Distribute spots from over-full square #START, depth first.

        Each neighbor is taken over, checked for a win, and then given one
        spot, which may overflow it in turn before the next neighbor of the
        current square is visited. A win stops the whole cascade at once,
        so squares not yet reached keep their contents.
        """
        frames = [self._spill(start)]
        while frames:
            side, pending = frames[-1]
            if not pending:
                frames.pop()
                continue
            nbr = pending.pop(0)
            current = self._squares[nbr]
            if current.side is not side:
                self._squares[nbr] = square(side, current.spots)
            if self.winner() is not None:
                self._game_over = True
                return
            spots = self._squares[nbr].spots + 1
            self._squares[nbr] = square(side, spots)
            if spots > self.neighbors(nbr):
                frames.append(self._spill(nbr))

    def undo(self) -> None:
        """
        Take back the last add_spot.

        Only moves made since construction, clear() or copy_from() can be
        undone; undoing past that raises UndoHistoryError.
        """
        if len(self._history) < 2:
            raise UndoHistoryError("No move to undo")
        self._history.pop()
        self._squares = list(self._history[-1])
        self._num_moves -= 1
        if self._moves:
            self._moves.pop()
        self._game_over = False
        self._announce()

    def set(self, r: int, c: int, num: int, side: Side) -> None:
        """
        Overwrite row R, column C with NUM spots of SIDE (WHITE if NUM is 0).

        Administrative: no legality check, no jumps, and not undoable.
        The current snapshot is replaced so later undos return here.
        """
        if not self.exists(r, c):
            raise IndexError(f"No square at row {r}, column {c}")
        if num < 0:
            raise ValueError(f"Spot count must be non-negative, got {num}")
        self._squares[self.sq_num(r, c)] = square(side, num)
        self._history[-1] = tuple(self._squares)
        self._game_over = self.winner() is not None
        self._announce()

    def clear(self, size: int) -> None:
        """Reinitialize to an empty SIZE x SIZE board with no history."""
        logger.debug("Clearing board to %dx%d", size, size)
        self._reset(size)
        self._announce()

    def copy_from(self, other: Board) -> None:
        """Copy OTHER's contents into me. My history restarts at the copy."""
        if other.size != self._size:
            raise ValueError(f"Size mismatch: {other.size} != {self._size}")
        self._squares = list(other.squares)
        self._num_moves = 0
        self._moves = []
        self._history = [tuple(self._squares)]
        self._game_over = self.winner() is not None
        self._announce()

    def copy(self) -> Board:
        """Independent board with my contents and an empty history."""
        board = Board(self._size)
        board.copy_from(self)
        return board

    def readonly(self) -> ConstantBoard:
        """A read-only view that tracks this board."""
        if self._readonly is None:
            from .constant_board import ConstantBoard
            self._readonly = ConstantBoard(self)
        return self._readonly

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------

    def set_notifier(self, notify: Notifier | None) -> None:
        """Call NOTIFY(board) now and after every change of contents."""
        self._notifier = notify or _nop
        self._announce()

    @contextmanager
    def quiet(self) -> Iterator[Board]:
        """Suppress notifications inside the block (used while searching)."""
        self._quiet += 1
        try:
            yield self
        finally:
            self._quiet -= 1

    def _announce(self) -> None:
        if not self._quiet:
            self._notifier(self)

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        rows = []
        for r in range(self._size):
            cells = self._squares[r * self._size:(r + 1) * self._size]
            rows.append("    " + " ".join(str(s) for s in cells))
        return "===\n" + "\n".join(rows) + "\n==="

    def to_display_string(self) -> str:
        """Human-readable rendition with row and column numbers."""
        lines = str(self).split("\n")[1:-1]
        out = [f"{i:2d} {line.strip()}" for i, line in enumerate(lines, start=1)]
        out.append("  " + "".join(f"{c:3d}" for c in range(1, self._size + 1)))
        return "\n".join(out)

    def __repr__(self) -> str:
        return f"Board(size={self._size}, num_moves={self._num_moves})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other.size and self.squares == other.squares

    __hash__ = None  # type: ignore[assignment]
