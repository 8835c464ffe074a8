"""Shared builders for engine tests."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from falling_blocks.game import GameState, GameStatus, Piece, TetrisGame, TetrominoType, empty_grid
from falling_blocks.game.pieces import base_shape
from falling_blocks.game.spawn import random_piece


class SequenceRng:
    """Stand-in for random.Random that hands out a fixed sequence of piece types."""

    def __init__(self, kinds: Iterable[TetrominoType]) -> None:
        self.kinds = list(kinds)

    def choice(self, seq):
        return self.kinds.pop(0)


def spawn_piece(kind: TetrominoType) -> Piece:
    return random_piece(SequenceRng([kind]))


def make_piece(kind: TetrominoType, x: int, y: int, shape: Optional[np.ndarray] = None) -> Piece:
    return Piece(kind=kind, shape=base_shape(kind) if shape is None else shape, x=x, y=y)


def make_game(
    grid: Optional[np.ndarray] = None,
    active: Optional[Piece] = None,
    next_piece: Optional[Piece] = None,
    status: GameStatus = GameStatus.RUNNING,
    score: int = 0,
    lines: int = 0,
    fall_interval: int = 800,
) -> TetrisGame:
    state = GameState(
        grid=empty_grid() if grid is None else grid,
        active=active,
        next_piece=next_piece if next_piece is not None else spawn_piece(TetrominoType.O),
        score=score,
        lines=lines,
        fall_interval=fall_interval,
        status=status,
    )
    return TetrisGame(state=state)
