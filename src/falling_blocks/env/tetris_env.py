from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import COLS, ROWS, Action, GameConfig, TetrisGame, TetrominoType
from falling_blocks.game.colors import GHOST_COLOR, color_for_value


def _ghost_mask(game: TetrisGame) -> np.ndarray:
    mask = np.zeros((ROWS, COLS), dtype=np.int8)
    for y, x in game.ghost_cells():
        mask[y, x] = 1
    return mask


class FallingBlocksEnv(gym.Env):
    """Single-player falling-block environment.

    Every step issues one engine command (see ``Action``) followed by one
    gravity tick when ``gravity_every`` steps have elapsed. The reward is the
    engine score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 gravity_every: int = 1, max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.game = TetrisGame(config)
        self.render_mode = render_mode
        self.gravity_every = int(gravity_every)
        self.max_episode_steps = int(max_episode_steps)

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=len(TetrominoType), shape=(ROWS, COLS), dtype=np.int8),
                "ghost": spaces.Box(low=0, high=1, shape=(ROWS, COLS), dtype=np.int8),
                "next_piece": spaces.Discrete(len(TetrominoType) + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "board": self.game.overlay_board().astype(np.int8),
            "ghost": _ghost_mask(self.game),
            "next_piece": int(self.game.next_piece.kind),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines": self.game.lines,
            "fall_interval": self.game.fall_interval,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.start()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        before = self.game.score
        self.game.step(Action(int(action)))
        self._steps += 1
        if self.gravity_every > 0 and self._steps % self.gravity_every == 0:
            self.game.soft_drop()

        reward = float(self.game.score - before)
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        board = self.game.overlay_board()
        ghost = self.game.ghost_cells()
        cell = 12
        h, w = board.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                v = int(board[y, x])
                color = GHOST_COLOR if v == 0 and (y, x) in ghost else color_for_value(v)
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
