"""Read-only projections of the session used for display."""

from __future__ import annotations

from typing import FrozenSet, Optional, Tuple

from .grid import Grid, drop_distance, merge
from .pieces import Piece


def ghost_cells(active: Optional[Piece], grid: Grid) -> FrozenSet[Tuple[int, int]]:
    """(row, col) cells the active piece would occupy after a hard drop."""
    if active is None:
        return frozenset()
    landed = active.moved(0, drop_distance(active.shape, active.x, active.y, grid))
    rows, cols = grid.shape
    return frozenset(
        (y, x) for x, y in landed.cells() if 0 <= y < rows and 0 <= x < cols
    )


def overlay_board(grid: Grid, active: Optional[Piece]) -> Grid:
    if active is None:
        return grid.copy()
    return merge(active.shape, active.x, active.y, grid, int(active.kind))
