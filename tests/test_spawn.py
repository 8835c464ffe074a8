from __future__ import annotations

import random

import numpy as np
import pytest

from falling_blocks.game import TetrominoType, empty_grid, random_piece, try_spawn
from falling_blocks.game.pieces import BASE_SHAPES

from helpers import SequenceRng, spawn_piece


@pytest.mark.parametrize(
    "kind,expected_x",
    [
        (TetrominoType.I, 3),
        (TetrominoType.O, 4),
        (TetrominoType.T, 3),
        (TetrominoType.J, 3),
        (TetrominoType.L, 3),
        (TetrominoType.S, 3),
        (TetrominoType.Z, 3),
    ],
)
def test_random_piece_spawns_centered_above_board(kind, expected_x):
    piece = random_piece(SequenceRng([kind]))
    assert piece.kind is kind
    assert piece.x == expected_x
    assert piece.y == -1
    assert np.array_equal(piece.shape, BASE_SHAPES[kind])


def test_spawned_shape_is_read_only():
    piece = spawn_piece(TetrominoType.L)
    with pytest.raises(ValueError):
        piece.shape[0, 0] = 1
    with pytest.raises(ValueError):
        BASE_SHAPES[TetrominoType.L][0, 0] = 1
    assert BASE_SHAPES[TetrominoType.L][0, 0] == 0


def test_random_piece_draws_every_type():
    rng = random.Random(7)
    seen = {random_piece(rng).kind for _ in range(500)}
    assert seen == set(TetrominoType)


def test_try_spawn_promotes_queued_piece():
    queued = spawn_piece(TetrominoType.T)
    result = try_spawn(empty_grid(), queued, random.Random(0))
    assert not result.game_over
    assert result.active is queued
    assert result.next_piece is not queued
    assert result.next_piece.kind in set(TetrominoType)


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_try_spawn_fails_when_top_rows_are_full(kind):
    grid = empty_grid()
    grid[0:2, :] = int(TetrominoType.Z)
    queued = spawn_piece(kind)
    result = try_spawn(grid, queued, random.Random(0))
    assert result.game_over
    assert result.active is None
    assert result.next_piece is queued
