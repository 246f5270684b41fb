from __future__ import annotations

import numpy as np


WIDTH = 14
HEIGHT = 22  # includes the hidden spawn rows
VISIBLE_HEIGHT = 20
HIDDEN_ROWS = HEIGHT - VISIBLE_HEIGHT


class GameGrid:
    """Row-major playfield matrix.

    The grid uses 0 for empty cells and shape color ids (1..7) for placed cells.
    Row 0 is the top of the hidden spawn buffer.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.cells.fill(0)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    # Callers keep accesses in bounds; the asserts only guard debug runs.
    def cell_at(self, row: int, col: int) -> int:
        assert self.is_inside(row, col), f"cell ({row}, {col}) outside grid"
        return int(self.cells[row, col])

    def set_cell(self, row: int, col: int, value: int) -> None:
        assert self.is_inside(row, col), f"cell ({row}, {col}) outside grid"
        self.cells[row, col] = value

    def is_row_filled(self, row: int) -> bool:
        return bool(np.all(self.cells[row] != 0))

    def is_row_empty(self, row: int) -> bool:
        return not bool(np.any(self.cells[row]))

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.width, self.height)
        new_grid.cells = self.cells.copy()
        return new_grid

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()
