from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from .grid import GameGrid
from .shapes import NUM_SHAPES, cells_of


@dataclass
class ActivePiece:
    shape_index: int
    offset_row: int = 0
    offset_col: int = 0
    rotation: int = 0  # 0..3

    def moved(self, d_row: int, d_col: int) -> "ActivePiece":
        return replace(self, offset_row=self.offset_row + d_row, offset_col=self.offset_col + d_col)

    def rotated(self, delta: int) -> "ActivePiece":
        return replace(self, rotation=(self.rotation + delta) % 4)

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (grid_row, grid_col, value) for the piece's occupied cells."""
        assert 0 <= self.shape_index < NUM_SHAPES, f"unknown shape {self.shape_index}"
        for row, col, value in cells_of(self.shape_index, self.rotation):
            yield self.offset_row + row, self.offset_col + col, value


def is_valid(piece: ActivePiece, grid: GameGrid) -> bool:
    """True when every occupied cell is inside the grid and on an empty cell."""
    for row, col, _ in piece.cells():
        if not grid.is_inside(row, col):
            return False
        if grid.cell_at(row, col):
            return False
    return True


def merge(piece: ActivePiece, grid: GameGrid) -> None:
    """Copy the piece's cells into the grid.

    Assumes the position was already validated; occupied cells are overwritten.
    """
    for row, col, value in piece.cells():
        grid.set_cell(row, col, value)


def landing_position(piece: ActivePiece, grid: GameGrid) -> ActivePiece:
    """Where the piece would rest if dropped straight down (the ghost outline)."""
    landed = piece
    while True:
        below = landed.moved(1, 0)
        if not is_valid(below, grid):
            return landed
        landed = below
