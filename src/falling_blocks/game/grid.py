from __future__ import annotations

from typing import Iterable, List

import numpy as np

from .pieces import Piece
from .shapes import Cell


class GameGrid:
    """Discrete 2D grid of locked (and currently falling) cells.

    The grid uses 0 for empty cells and the piece kind values 1..7 for filled
    cells; the values are only used for coloring. Row 0 is the top row.
    """

    def __init__(self, height: int, width: int) -> None:
        self.height = int(height)
        self.width = int(width)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> Cell:
        assert self.is_inside(row, col), f"cell ({row}, {col}) outside {self.height}x{self.width} grid"
        return Cell(int(self.grid[row, col]))

    def set(self, row: int, col: int, cell: Cell) -> None:
        assert self.is_inside(row, col), f"cell ({row}, {col}) outside {self.height}x{self.width} grid"
        self.grid[row, col] = int(cell)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == Cell.EMPTY

    def clear(self) -> None:
        self.grid.fill(Cell.EMPTY)

    def stamp(self, piece: Piece) -> None:
        """Write the piece's occupied cells; rows above the grid are dropped."""
        tag = Cell(int(piece.kind))
        for row, col in piece.cells():
            if row >= 0:
                self.set(row, col, tag)

    def erase(self, piece: Piece) -> None:
        for row, col in piece.cells():
            if row >= 0:
                self.set(row, col, Cell.EMPTY)

    def is_row_complete(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != Cell.EMPTY))

    def completed_rows(self, rows: Iterable[int]) -> List[int]:
        """Complete rows among `rows`, top to bottom. Rows off the grid are skipped."""
        return sorted(r for r in set(rows) if 0 <= r < self.height and self.is_row_complete(r))

    def remove_rows(self, rows: Iterable[int]) -> int:
        """Delete `rows` and drop everything above them down in one pass."""
        rows = sorted(set(rows))
        if not rows:
            return 0
        num = len(rows)
        kept = np.delete(self.grid, rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def count_clean_rows(self, left_col: int, right_col: int) -> int:
        """Number of consecutive empty rows from the top, looking only at columns left_col..right_col."""
        count = 0
        for row in range(self.height):
            if np.any(self.grid[row, left_col:right_col + 1] != Cell.EMPTY):
                break
            count += 1
        return count

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()


def format_grid(grid: np.ndarray) -> str:
    symbols = {int(c): c.name for c in Cell}
    symbols[int(Cell.EMPTY)] = "·"
    return "\n".join("".join(symbols.get(int(cell), "?") for cell in row) for row in grid)


def print_grid(grid: np.ndarray) -> None:
    print(format_grid(grid))
