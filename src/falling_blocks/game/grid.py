from __future__ import annotations

from typing import Tuple

import numpy as np

from .pieces import Shape


ROWS = 20
COLS = 10

Grid = np.ndarray


def empty_grid() -> Grid:
    """Fresh ROWS x COLS board.

    The grid uses 0 for empty cells and the ``TetrominoType`` value of the
    piece that filled a cell otherwise. Row 0 is the top row.
    """
    return np.zeros((ROWS, COLS), dtype=np.int8)


def collides(shape: Shape, x: int, y: int, grid: Grid) -> bool:
    rows, cols = grid.shape
    for dy, dx in zip(*np.nonzero(shape)):
        gx = x + int(dx)
        gy = y + int(dy)
        if gx < 0 or gx >= cols:
            return True
        if gy >= rows:
            return True
        # Cells above the board never collide
        if gy < 0:
            continue
        if grid[gy, gx] != 0:
            return True
    return False


def merge(shape: Shape, x: int, y: int, grid: Grid, value: int) -> Grid:
    """Return a copy of ``grid`` with the occupied cells of ``shape`` set to ``value``.

    Cells falling outside the board are skipped.
    """
    out = grid.copy()
    rows, cols = grid.shape
    for dy, dx in zip(*np.nonzero(shape)):
        gx = x + int(dx)
        gy = y + int(dy)
        if 0 <= gy < rows and 0 <= gx < cols:
            out[gy, gx] = value
    return out


def clear_full_rows(grid: Grid) -> Tuple[Grid, int]:
    full_rows = np.where(np.all(grid != 0, axis=1))[0]
    if full_rows.size == 0:
        return grid.copy(), 0
    num = int(full_rows.size)
    # Remove full rows and add empty rows at the top
    kept = np.delete(grid, full_rows, axis=0)
    new_rows = np.zeros((num, grid.shape[1]), dtype=grid.dtype)
    return np.vstack((new_rows, kept)), num


def drop_distance(shape: Shape, x: int, y: int, grid: Grid) -> int:
    """Number of rows the shape can fall before the next shift would collide."""
    if not np.any(shape):
        return 0
    dist = 0
    while not collides(shape, x, y + dist + 1, grid):
        dist += 1
    return dist
