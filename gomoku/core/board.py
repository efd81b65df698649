from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

import numpy as np
from dataclasses import dataclass

MIN_SIZE = 5
WIN_LENGTH = 5


class Cell(IntEnum):
    """Cell contents. BLACK is the human player's stone, WHITE the AI's."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def symbol(self) -> str:
        return {0: ".", 1: "@", 2: "O"}[self.value]

    def opponent(self) -> "Cell":
        if self == Cell.BLACK:
            return Cell.WHITE
        if self == Cell.WHITE:
            return Cell.BLACK
        return Cell.EMPTY


@dataclass(frozen=True, order=True)
class Position:
    """
    Immutable position on the board.
    Coordinates are 0-based: row and col in 0..size-1
    """
    row: int
    col: int

    def __post_init__(self):
        if not isinstance(self.row, int) or not isinstance(self.col, int):
            raise TypeError("Position coordinates must be integers")
        if self.row < 0 or self.col < 0:
            raise ValueError("Position coordinates must be >= 0")

    def __str__(self) -> str:
        """Return human-readable form like H8."""
        col = chr(ord("A") + self.col)
        return f"{col}{self.row + 1}"


class Board:
    """
    Represents the game board state.

    - Uses 0-based Position (row, col).
    - Internally stores a size x size int8 grid of Cell values.
    - Every accessor is bounds-checked and answers None/False for
      positions outside the board instead of raising.
    """

    def __init__(self, size: int = 15) -> None:
        if not isinstance(size, int) or size < MIN_SIZE:
            raise ValueError(f"size must be an integer >= {MIN_SIZE}")
        self._size: int = size
        self._grid: np.ndarray = np.zeros((size, size), dtype=np.int8)
        self._moves: int = 0  # number of placed stones (non-empty)

    @property
    def size(self) -> int:
        return self._size

    @property
    def move_count(self) -> int:
        return self._moves

    def clone_board(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self._size)
        new_board._grid = np.copy(self._grid)
        new_board._moves = self._moves
        return new_board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._size == other._size
            and self._moves == other._moves
            and np.array_equal(self._grid, other._grid)
        )

    __hash__ = None  # mutable

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the grid (int8 Cell values, [row, col])."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    # ---------- Bounds / indexing ----------

    def in_bounds(self, pos: Position) -> bool:
        return pos.row < self._size and pos.col < self._size

    # ---------- Cell access ----------

    def get(self, pos: Position) -> Optional[Cell]:
        if not self.in_bounds(pos):
            return None
        return Cell(self._grid.item(pos.row, pos.col))

    def is_empty(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self._grid.item(pos.row, pos.col) == Cell.EMPTY.value

    def place(self, pos: Position, cell: Cell) -> bool:
        """
        Place a stone at pos.

        Returns:
            True if placed, False if out of bounds, occupied, or cell is EMPTY
            (the board is left unchanged).
        """
        if cell == Cell.EMPTY or not self.is_empty(pos):
            return False
        self._grid[pos.row, pos.col] = int(cell)
        self._moves += 1
        return True

    def force_place(self, pos: Position, cell: Cell) -> None:
        """
        Overwrite pos with cell, occupied or not. Simulation only.

        Setting EMPTY clears the cell; move_count follows the
        empty/occupied transition. Out-of-bounds positions are ignored.
        """
        if not self.in_bounds(pos):
            return
        old = self._grid.item(pos.row, pos.col)
        new = int(cell)
        if old != 0 and new == 0:
            self._moves -= 1
        elif old == 0 and new != 0:
            self._moves += 1
        self._grid[pos.row, pos.col] = new

    def is_full(self) -> bool:
        return self._moves >= self._size * self._size

    # ---------- Iteration / helpers ----------

    def iter_stones(self) -> Iterator[Tuple[Position, Cell]]:
        """Yield all non-empty cells as (Position, Cell), row-major."""
        rows, cols = np.nonzero(self._grid)
        for r, c in zip(rows.tolist(), cols.tolist()):
            yield Position(r, c), Cell(self._grid.item(r, c))

    def empty_positions(self) -> List[Position]:
        """All empty cells, row-major."""
        rows, cols = np.nonzero(self._grid == 0)
        return [Position(r, c) for r, c in zip(rows.tolist(), cols.tolist())]

    def content_hash(self) -> int:
        """Hash of the full grid in (row, col) order. Not collision-proof."""
        return hash(self._grid.tobytes())

    # ---------- Directional scan ----------

    @staticmethod
    def directions() -> Tuple[Tuple[int, int], ...]:
        """4 unique directions (opposites are implied)."""
        return ((0, 1), (1, 0), (1, 1), (1, -1))

    def count_in_direction(self, start: Position, cell: Cell, dr: int, dc: int) -> int:
        """
        Count consecutive `cell` stones from `start` outward in direction (dr,dc),
        excluding the start cell itself.
        """
        target = int(cell)
        grid = self._grid
        size = self._size
        count = 0
        r, c = start.row + dr, start.col + dc
        while 0 <= r < size and 0 <= c < size and grid.item(r, c) == target:
            count += 1
            r += dr
            c += dc
        return count

    def line_length_through(self, pos: Position, cell: Cell, dr: int, dc: int) -> int:
        """
        Total consecutive length of `cell` stones passing through `pos`
        along direction (dr,dc), including pos.
        """
        return (
            1
            + self.count_in_direction(pos, cell, dr, dc)
            + self.count_in_direction(pos, cell, -dr, -dc)
        )

    def check_win(self, pos: Position) -> bool:
        """True if the stone at pos is part of a run of five or more."""
        cell = self.get(pos)
        if cell is None or cell == Cell.EMPTY:
            return False
        return any(
            self.line_length_through(pos, cell, dr, dc) >= WIN_LENGTH
            for dr, dc in self.directions()
        )

    # ---------- Rendering ----------

    def to_ascii(self, show_coords: bool = True) -> str:
        """
        Render board as ASCII.
        Uses Cell.symbol(): EMPTY '.', BLACK '@', WHITE 'O'
        """
        lines: List[str] = []
        if show_coords:
            letters = [chr(ord("A") + i) for i in range(self._size)]
            lines.append("    " + " ".join(letters))
        for r in range(self._size):
            row_syms = [Cell(int(v)).symbol() for v in self._grid[r]]
            if show_coords:
                lines.append(str(r + 1).rjust(3) + " " + " ".join(row_syms))
            else:
                lines.append(" ".join(row_syms))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_ascii()
