"""
Board model for English draughts.

Board layout (8 rows x 8 cols, row 0 at the top):

  row 0 | 8 . o . o . o . o      side B men start on rows 0-2
  row 1 | 7 o . o . o . o .
  row 2 | 6 . o . o . o . o
  row 3 | 5 . . . . . . . .
  row 4 | 4 . . . . . . . .
  row 5 | 3 x . x . x . x .      side A men start on rows 5-7
  row 6 | 2 . x . x . x . x
  row 7 | 1 x . x . x . x .
            a b c d e f g h

Squares are (row, col) tuples. Algebraic names use the file letter for the
column and rank = 8 - row, so side A's home ranks are 1-3. Only squares with
(row + col) odd are ever occupied; move generation preserves that.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Iterator, Mapping, Optional
import numpy as np

# Board dimensions
ROWS = 8
COLS = 8
NUM_SQUARES = ROWS * COLS  # 64

Square = tuple[int, int]


class Side(IntEnum):
    """The two players. Side A moves first."""
    A = 0
    B = 1

    @property
    def opponent(self) -> Side:
        return Side(1 - self)


class Cell(IntEnum):
    """Contents of a square. A king is its man value + 2."""
    EMPTY = 0
    A_MAN = 1
    B_MAN = 2
    A_KING = 3
    B_KING = 4


# Row a man must reach to be crowned
PROMOTION_ROW = {Side.A: 0, Side.B: ROWS - 1}

# Forward row direction for men
FORWARD = {Side.A: -1, Side.B: 1}

# Rows filled with men at the start
START_ROWS = {Side.A: (5, 6, 7), Side.B: (0, 1, 2)}

SYMBOLS = {
    Cell.EMPTY: '.',
    Cell.A_MAN: 'x',
    Cell.A_KING: 'X',
    Cell.B_MAN: 'o',
    Cell.B_KING: 'O',
}

FILES = "abcdefgh"


def man_of(side: Side) -> Cell:
    return Cell.A_MAN if side == Side.A else Cell.B_MAN


def king_of(side: Side) -> Cell:
    return Cell.A_KING if side == Side.A else Cell.B_KING


def is_king(cell: int) -> bool:
    return cell in (Cell.A_KING, Cell.B_KING)


def cell_side(cell: int) -> Optional[Side]:
    """Return the owner of a cell, or None for an empty square."""
    if cell in (Cell.A_MAN, Cell.A_KING):
        return Side.A
    if cell in (Cell.B_MAN, Cell.B_KING):
        return Side.B
    return None


def is_valid_sq(row: int, col: int) -> bool:
    """Check if (row, col) is on the board."""
    return 0 <= row < ROWS and 0 <= col < COLS


def is_dark_sq(row: int, col: int) -> bool:
    """Playable squares are the ones with odd (row + col)."""
    return (row + col) % 2 == 1


def sq_to_algebraic(sq: Square) -> str:
    """Convert (row, col) to algebraic notation (e.g., (5, 0) -> 'a3')."""
    row, col = sq
    return FILES[col] + str(ROWS - row)


def algebraic_to_sq(s: str) -> Square:
    """Convert algebraic notation to (row, col)."""
    s = s.strip().lower()
    if len(s) != 2 or s[0] not in FILES or not s[1].isdigit():
        raise ValueError(f"Invalid square: {s!r}")
    col = FILES.index(s[0])
    row = ROWS - int(s[1])
    if not is_valid_sq(row, col):
        raise ValueError(f"Invalid square: {s!r}")
    return row, col


class Board:
    """
    Immutable 8x8 grid of cells.

    The grid is a read-only numpy int8 array. Every change goes through
    with_cells(), which copies, so a board handed to the search or kept by a
    caller can never be modified behind its back.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells=None):
        if cells is None:
            grid = np.zeros((ROWS, COLS), dtype=np.int8)
        else:
            grid = np.array(cells, dtype=np.int8)
        if grid.shape != (ROWS, COLS):
            raise ValueError(f"Board must be {ROWS}x{COLS}, got {grid.shape}")
        grid.flags.writeable = False
        self._cells = grid

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout."""
        grid = np.zeros((ROWS, COLS), dtype=np.int8)
        for side, rows in START_ROWS.items():
            for row in rows:
                for col in range(COLS):
                    if is_dark_sq(row, col):
                        grid[row, col] = man_of(side)
        return cls(grid)

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Cell]) -> Board:
        """Build a position from {(row, col): cell}. Handy for tests."""
        return cls.empty().with_cells(pieces)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the grid."""
        return self._cells

    def __getitem__(self, sq: Square) -> Cell:
        row, col = sq
        if not is_valid_sq(row, col):
            raise IndexError(f"Square off board: {sq}")
        return Cell(int(self._cells[row, col]))

    def with_cells(self, updates: Mapping[Square, Cell]) -> Board:
        """Return a new board with the given squares overwritten."""
        grid = self._cells.copy()
        for (row, col), cell in updates.items():
            if not is_valid_sq(row, col):
                raise IndexError(f"Square off board: {(row, col)}")
            grid[row, col] = cell
        return Board(grid)

    def pieces(self, side: Side) -> Iterator[Square]:
        """Iterate over squares holding side's pieces, row-major."""
        mask = (self._cells == man_of(side)) | (self._cells == king_of(side))
        for row, col in np.argwhere(mask):
            yield int(row), int(col)

    def count(self, cell: Cell) -> int:
        """Number of squares holding exactly this cell value."""
        return int(np.count_nonzero(self._cells == cell))

    def piece_count(self, side: Side) -> int:
        return self.count(man_of(side)) + self.count(king_of(side))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        """Pretty print the board."""
        lines = []
        for row in range(ROWS):
            rank = f"{ROWS - row} |"
            for col in range(COLS):
                rank += " " + SYMBOLS[Cell(int(self._cells[row, col]))]
            lines.append(rank)
        lines.append("   +" + "-" * (COLS * 2))
        lines.append("    " + " ".join(FILES))
        return "\n".join(lines)
