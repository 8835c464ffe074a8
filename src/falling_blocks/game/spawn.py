from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from .grid import COLS, Grid, collides
from .pieces import Piece, TetrominoType, base_shape


SPAWN_Y = -1


@dataclass(frozen=True)
class SpawnResult:
    active: Optional[Piece]
    next_piece: Piece
    game_over: bool


def random_piece(rng: random.Random) -> Piece:
    # Plain uniform draw, repeats allowed
    kind = rng.choice(list(TetrominoType))
    piece = Piece(kind=kind, shape=base_shape(kind), x=0, y=SPAWN_Y)
    return piece.moved(COLS // 2 - math.ceil(piece.width / 2), 0)


def try_spawn(grid: Grid, pending_next: Piece, rng: random.Random) -> SpawnResult:
    """Promote the queued piece to active and roll a new preview.

    When the queued piece already overlaps the stack at its spawn position the
    session is over: nothing becomes active and the queued piece stays queued.
    """
    if collides(pending_next.shape, pending_next.x, pending_next.y, grid):
        return SpawnResult(active=None, next_piece=pending_next, game_over=True)
    return SpawnResult(active=pending_next, next_piece=random_piece(rng), game_over=False)
