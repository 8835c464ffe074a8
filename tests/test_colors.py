from __future__ import annotations

import falling_blocks.env.tetris_env as tetris_env
from falling_blocks.game import TetrominoType
from falling_blocks.game.colors import FALLBACK_COLOR, PALETTE, color_for_value


def test_every_cell_value_has_a_color():
    assert color_for_value(0) == PALETTE[0]
    for kind in TetrominoType:
        assert color_for_value(int(kind)) == PALETTE[int(kind)]
    assert len({color_for_value(int(kind)) for kind in TetrominoType}) == len(TetrominoType)


def test_unknown_values_use_fallback():
    assert color_for_value(42) == FALLBACK_COLOR
    assert color_for_value(-3) == PALETTE[3]


def test_env_uses_shared_palette():
    assert tetris_env.color_for_value is color_for_value
    assert not hasattr(tetris_env, "pygame")
