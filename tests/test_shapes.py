import numpy as np
import pytest

from falling_blocks.game.shapes import SHAPES, ShapeKind, cells_of, shape_cell_at, shape_matrix


def test_catalog_has_seven_four_cell_shapes():
    assert len(SHAPES) == 7
    for index, shape in enumerate(SHAPES):
        assert shape.kind == ShapeKind(index)
        values = shape.data[shape.data != 0]
        assert len(values) == 4
        assert set(values.tolist()) == {index + 1}


def test_side_lengths():
    assert [s.side for s in SHAPES] == [4, 2, 3, 3, 3, 3, 3]


@pytest.mark.parametrize("index", range(7))
@pytest.mark.parametrize("rotation", range(4))
def test_each_rotation_is_a_clockwise_quarter_turn(index, rotation):
    current = shape_matrix(index, rotation)
    following = shape_matrix(index, (rotation + 1) % 4)
    assert np.array_equal(np.rot90(current, -1), following)


@pytest.mark.parametrize("index", range(7))
def test_four_quarter_turns_return_the_stored_matrix(index):
    side = SHAPES[index].side
    for row in range(side):
        for col in range(side):
            stored = int(SHAPES[index].data[row, col])
            r, c = row, col
            for turns in range(1, 5):
                # A clockwise turn carries cell (r, c) to (c, side - 1 - r)
                r, c = c, side - 1 - r
                assert shape_cell_at(index, r, c, turns % 4) == stored
            assert (r, c) == (row, col)


def test_t_shape_cells():
    # 000 / 333 / 030
    assert shape_cell_at(ShapeKind.T, 0, 0, 0) == 0
    assert shape_cell_at(ShapeKind.T, 1, 0, 0) == 3
    assert shape_cell_at(ShapeKind.T, 2, 1, 0) == 3
    # quarter turn clockwise: 030 / 330 / 030
    assert shape_cell_at(ShapeKind.T, 1, 0, 1) == 3
    assert shape_cell_at(ShapeKind.T, 1, 2, 1) == 0
    assert shape_cell_at(ShapeKind.T, 0, 1, 1) == 3


def test_bar_rotation_uses_its_own_side():
    # Vertical bar sits in column 2 of the 4x4 box
    assert [shape_cell_at(ShapeKind.I, r, 2, 1) for r in range(4)] == [1, 1, 1, 1]
    assert [shape_cell_at(ShapeKind.I, 2, c, 2) for c in range(4)] == [1, 1, 1, 1]
    assert [shape_cell_at(ShapeKind.I, r, 1, 3) for r in range(4)] == [1, 1, 1, 1]


def test_out_of_matrix_queries_read_empty():
    assert shape_cell_at(ShapeKind.O, 2, 0, 0) == 0
    assert shape_cell_at(ShapeKind.O, 0, -1, 0) == 0
    assert shape_cell_at(7, 0, 0, 0) == 0
    assert shape_cell_at(-1, 0, 0, 0) == 0


def test_rotation_out_of_range_is_a_contract_violation():
    with pytest.raises(AssertionError):
        shape_cell_at(ShapeKind.T, 0, 0, 4)


def test_cells_of_lists_nonzero_cells():
    assert sorted(cells_of(ShapeKind.O, 3)) == [(0, 0, 2), (0, 1, 2), (1, 0, 2), (1, 1, 2)]


def test_stored_shapes_are_read_only():
    with pytest.raises(ValueError):
        SHAPES[0].data[0, 0] = 9
