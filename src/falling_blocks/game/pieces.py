from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def frozen(arr: np.ndarray) -> np.ndarray:
    """Read-only int8 array that owns its data; read-only owners pass through."""
    if arr.flags.writeable or arr.base is not None:
        arr = np.array(arr, dtype=np.int8)
        arr.setflags(write=False)
    return arr


def rotate(shape: Shape) -> Shape:
    """Rotate an occupancy matrix 90 degrees clockwise (R x C -> C x R)."""
    return np.rot90(shape, 1, axes=(1, 0)).copy()


BASE_SHAPES = {
    TetrominoType.I: np.array([[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1], [0, 0, 0]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1], [0, 0, 0]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0], [0, 0, 0]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 1, 0], [1, 1, 1], [0, 0, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1], [0, 0, 0]], dtype=np.int8),
}
for _shape in BASE_SHAPES.values():
    _shape.setflags(write=False)


def base_shape(kind: TetrominoType) -> Shape:
    return BASE_SHAPES[kind].copy()


@dataclass(frozen=True, eq=False)
class Piece:
    """A tetromino placed on the board.

    ``x``/``y`` locate the top-left corner of ``shape`` in grid coordinates;
    ``y`` may be negative while the piece is still above the visible rows.
    """

    kind: TetrominoType
    shape: Shape
    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", frozen(self.shape))

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def with_shape(self, shape: Shape, x: int) -> "Piece":
        return replace(self, shape=shape, x=x)

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    def cells(self) -> List[Tuple[int, int]]:
        ys, xs = np.nonzero(self.shape)
        return [(self.x + int(dx), self.y + int(dy)) for dy, dx in zip(ys, xs)]
