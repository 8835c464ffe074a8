from __future__ import annotations

import pytest

from falling_blocks.game import TetrisGame


@pytest.fixture
def started_game() -> TetrisGame:
    game = TetrisGame()
    game.start()
    return game
