from __future__ import annotations

from falling_blocks.game import TetrisGame, TetrominoType, empty_grid, rotate
from falling_blocks.game.pieces import base_shape
from falling_blocks.visualization.scheduler import GravityScheduler

from helpers import make_game, make_piece


class FakeTimer:
    def __init__(self) -> None:
        self.calls = []

    def __call__(self, ms: int) -> None:
        self.calls.append(ms)


def test_timer_idle_until_start():
    game = TetrisGame()
    timer = FakeTimer()
    scheduler = GravityScheduler(game, timer)
    scheduler.sync()
    assert timer.calls == []
    game.start()
    scheduler.sync()
    scheduler.sync()
    assert timer.calls == [800]


def test_pause_cancels_and_resume_rearms():
    game = TetrisGame()
    timer = FakeTimer()
    scheduler = GravityScheduler(game, timer)
    game.start()
    scheduler.sync()
    game.pause_toggle()
    scheduler.sync()
    scheduler.sync()
    game.pause_toggle()
    scheduler.sync()
    assert timer.calls == [800, 0, 800]


def test_tick_applies_gravity():
    game = TetrisGame()
    scheduler = GravityScheduler(game, FakeTimer())
    game.start()
    scheduler.sync()
    y = game.active.y
    scheduler.on_tick()
    assert game.active.y == y + 1


def test_rearms_when_interval_changes():
    grid = empty_grid()
    grid[19, :] = int(TetrominoType.T)
    grid[19, 5] = 0
    vertical = make_piece(TetrominoType.I, 3, 16, shape=rotate(base_shape(TetrominoType.I)))
    game = make_game(grid=grid, active=vertical)
    timer = FakeTimer()
    scheduler = GravityScheduler(game, timer)
    scheduler.sync()
    scheduler.on_tick()
    assert game.fall_interval == 790
    assert timer.calls == [800, 790]


def test_game_over_cancels_once():
    grid = empty_grid()
    grid[0:2, 0:9] = int(TetrominoType.Z)
    game = make_game(grid=grid, active=make_piece(TetrominoType.O, 0, 18))
    timer = FakeTimer()
    scheduler = GravityScheduler(game, timer)
    scheduler.sync()
    scheduler.on_tick()
    assert game.game_over
    scheduler.close()
    assert timer.calls == [800, 0]


def test_close_cancels_armed_timer():
    game = TetrisGame()
    timer = FakeTimer()
    scheduler = GravityScheduler(game, timer)
    game.start()
    scheduler.sync()
    scheduler.close()
    scheduler.close()
    assert timer.calls == [800, 0]
