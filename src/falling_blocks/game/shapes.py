from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple

import numpy as np


class ShapeKind(IntEnum):
    I = 0
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6


@dataclass(frozen=True)
class Shape:
    """Square matrix of color ids; 0 means empty.

    Only rotation 0 is stored. The other three orientations are read through
    `shape_cell_at`.
    """

    kind: ShapeKind
    side: int
    data: np.ndarray


def _shape(kind: ShapeKind, rows: list[list[int]]) -> Shape:
    data = np.array(rows, dtype=np.int8)
    assert data.shape[0] == data.shape[1], "shape matrix must be square"
    data.flags.writeable = False
    return Shape(kind=kind, side=int(data.shape[0]), data=data)


SHAPES: Tuple[Shape, ...] = (
    _shape(ShapeKind.I, [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]]),
    _shape(ShapeKind.O, [[2, 2], [2, 2]]),
    _shape(ShapeKind.T, [[0, 0, 0], [3, 3, 3], [0, 3, 0]]),
    _shape(ShapeKind.S, [[0, 4, 4], [4, 4, 0], [0, 0, 0]]),
    _shape(ShapeKind.Z, [[5, 5, 0], [0, 5, 5], [0, 0, 0]]),
    _shape(ShapeKind.J, [[6, 0, 0], [6, 6, 6], [0, 0, 0]]),
    _shape(ShapeKind.L, [[0, 0, 7], [7, 7, 7], [0, 0, 0]]),
)

NUM_SHAPES = len(SHAPES)
MAX_COLOR_ID = NUM_SHAPES


def shape_cell_at(index: int, row: int, col: int, rotation: int) -> int:
    """Value of cell (row, col) of shape `index` seen at `rotation` quarter turns clockwise.

    The query is mapped back into the stored matrix:
      0: (row, col)
      1: (side - col - 1, row)
      2: (side - row - 1, side - col - 1)
      3: (col, side - row - 1)
    Queries outside the matrix, or for an unknown shape, read as 0.
    """
    assert 0 <= rotation <= 3, f"rotation out of range: {rotation}"
    if not 0 <= index < NUM_SHAPES:
        return 0
    shape = SHAPES[index]
    side = shape.side
    if not (0 <= row < side and 0 <= col < side):
        return 0
    if rotation == 0:
        src_row, src_col = row, col
    elif rotation == 1:
        src_row, src_col = side - col - 1, row
    elif rotation == 2:
        src_row, src_col = side - row - 1, side - col - 1
    elif rotation == 3:
        src_row, src_col = col, side - row - 1
    else:
        return 0
    return int(shape.data[src_row, src_col])


def cells_of(index: int, rotation: int) -> Iterator[Tuple[int, int, int]]:
    """Yield (row, col, value) for every nonzero cell of the rotated shape."""
    side = SHAPES[index].side
    for row in range(side):
        for col in range(side):
            value = shape_cell_at(index, row, col, rotation)
            if value:
                yield row, col, value


def shape_matrix(index: int, rotation: int = 0) -> np.ndarray:
    # Built on every call; orientations are never cached.
    side = SHAPES[index].side
    out = np.zeros((side, side), dtype=np.int8)
    for row, col, value in cells_of(index, rotation):
        out[row, col] = value
    return out
