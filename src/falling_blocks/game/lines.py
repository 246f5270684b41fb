from __future__ import annotations

from typing import Tuple

import numpy as np

from .grid import GameGrid


def find_filled_lines(grid: GameGrid) -> Tuple[int, np.ndarray]:
    """Return (count, flags) where flags[row] marks a completely filled row."""
    flags = np.all(grid.cells != 0, axis=1)
    return int(flags.sum()), flags


def clear_lines(grid: GameGrid, flags: np.ndarray) -> None:
    """Drop flagged rows and shift the rows above them down.

    Destination rows are walked bottom to top while a source pointer skips
    flagged rows. Rows left over at the top are zero-filled.
    """
    cells = grid.cells
    src = grid.height - 1
    for dest in range(grid.height - 1, -1, -1):
        while src >= 0 and flags[src]:
            src -= 1
        if src < 0:
            cells[dest].fill(0)
        else:
            if src != dest:
                cells[dest] = cells[src]
            src -= 1
