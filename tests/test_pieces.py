from __future__ import annotations

import numpy as np
import pytest

from falling_blocks.game import BASE_SHAPES, Piece, TetrominoType, rotate


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_four_rotations_return_original(kind):
    shape = BASE_SHAPES[kind]
    out = shape
    for _ in range(4):
        out = rotate(out)
    assert np.array_equal(out, shape)


def test_rotate_is_clockwise_transpose():
    shape = np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8)
    rows, cols = shape.shape
    out = rotate(shape)
    assert out.shape == (cols, rows)
    for y in range(rows):
        for x in range(cols):
            assert out[x, rows - 1 - y] == shape[y, x]


def test_rotate_does_not_touch_input():
    shape = BASE_SHAPES[TetrominoType.T].copy()
    rotated = rotate(shape)
    rotated[0, 0] = 9
    assert np.array_equal(shape, BASE_SHAPES[TetrominoType.T])


def test_i_piece_rotates_into_third_column():
    vertical = rotate(BASE_SHAPES[TetrominoType.I])
    assert vertical[:, 2].tolist() == [1, 1, 1, 1]
    assert int(vertical.sum()) == 4


def test_every_shape_has_four_cells():
    for shape in BASE_SHAPES.values():
        assert int(np.count_nonzero(shape)) == 4


def test_piece_cells_and_moves():
    piece = Piece(TetrominoType.O, BASE_SHAPES[TetrominoType.O].copy(), x=4, y=-1)
    assert sorted(piece.cells()) == [(4, -1), (4, 0), (5, -1), (5, 0)]
    moved = piece.moved(-1, 2)
    assert (moved.x, moved.y) == (3, 1)
    assert (piece.x, piece.y) == (4, -1)
    assert piece.width == 2
