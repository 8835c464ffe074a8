from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from .grid import Grid, clear_full_rows, collides, drop_distance, empty_grid, merge
from .pieces import Piece, frozen, rotate
from .rules import ScoringRules
from .spawn import random_piece, try_spawn
from .view import ghost_cells, overlay_board


logger = logging.getLogger(__name__)

# Horizontal offsets tried in order when a rotation is blocked
ROTATION_KICKS: Tuple[int, ...] = (0, -1, 1, -2, 2)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    rules: ScoringRules = field(default_factory=ScoringRules)


@dataclass(frozen=True, eq=False)
class GameState:
    grid: Grid
    active: Optional[Piece]
    next_piece: Piece
    score: int = 0
    lines: int = 0
    fall_interval: int = 800
    status: GameStatus = GameStatus.NOT_STARTED

    def __post_init__(self) -> None:
        object.__setattr__(self, "grid", frozen(self.grid))


class TetrisGame:
    """Falling-block session.

    All mutation goes through the command methods. Each command builds a
    complete new ``GameState`` and swaps it in, so readers never observe a
    half-applied transition. Commands that do not apply to the current state
    are silently ignored.
    """

    def __init__(self, config: Optional[GameConfig] = None, state: Optional[GameState] = None) -> None:
        self.config = config or GameConfig()
        self.rules = self.config.rules
        self.rng = random.Random(self.config.random_seed)
        if state is None:
            state = GameState(
                grid=empty_grid(),
                active=None,
                next_piece=random_piece(self.rng),
                fall_interval=self.rules.initial_fall_interval,
            )
        self._state = state

    # ---------- Read surface ----------
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def grid(self) -> Grid:
        return self._state.grid.copy()

    @property
    def active(self) -> Optional[Piece]:
        return self._state.active

    @property
    def next_piece(self) -> Piece:
        return self._state.next_piece

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def lines(self) -> int:
        return self._state.lines

    @property
    def fall_interval(self) -> int:
        return self._state.fall_interval

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def paused(self) -> bool:
        return self._state.status is GameStatus.PAUSED

    @property
    def is_running(self) -> bool:
        return self._state.status is GameStatus.RUNNING

    @property
    def game_over(self) -> bool:
        return self._state.status is GameStatus.GAME_OVER

    def overlay_board(self) -> Grid:
        return overlay_board(self._state.grid, self._state.active)

    def ghost_cells(self) -> FrozenSet[Tuple[int, int]]:
        return ghost_cells(self._state.active, self._state.grid)

    def snapshot(self) -> Dict[str, Any]:
        state = self._state
        return {
            "board": self.overlay_board(),
            "ghost": self.ghost_cells(),
            "next_piece": state.next_piece,
            "score": state.score,
            "lines": state.lines,
            "fall_interval": state.fall_interval,
            "status": state.status,
            "paused": self.paused,
        }

    # ---------- Commands ----------
    def start(self) -> None:
        first = random_piece(self.rng)
        second = random_piece(self.rng)
        self._state = GameState(
            grid=empty_grid(),
            active=first,
            next_piece=second,
            score=0,
            lines=0,
            fall_interval=self.rules.initial_fall_interval,
            status=GameStatus.RUNNING,
        )
        logger.info("Session started (first=%s, next=%s)", first.kind.name, second.kind.name)

    def pause_toggle(self) -> None:
        status = self._state.status
        if status is GameStatus.RUNNING:
            self._state = replace(self._state, status=GameStatus.PAUSED)
        elif status is GameStatus.PAUSED:
            self._state = replace(self._state, status=GameStatus.RUNNING)

    def move(self, dx: int) -> None:
        piece = self._controllable_piece()
        if piece is None or dx not in (-1, 1):
            return
        if not collides(piece.shape, piece.x + dx, piece.y, self._state.grid):
            self._state = replace(self._state, active=piece.moved(dx, 0))

    def rotate(self) -> None:
        piece = self._controllable_piece()
        if piece is None:
            return
        rotated = rotate(piece.shape)
        for offset in ROTATION_KICKS:
            x = piece.x + offset
            if not collides(rotated, x, piece.y, self._state.grid):
                self._state = replace(self._state, active=piece.with_shape(rotated, x))
                return

    def soft_drop(self) -> None:
        piece = self._controllable_piece()
        if piece is None:
            return
        state = self._state
        if not collides(piece.shape, piece.x, piece.y + 1, state.grid):
            self._state = replace(
                state,
                active=piece.moved(0, 1),
                score=state.score + self.rules.soft_drop_points,
            )
        else:
            self._state = self._lock(state, piece, state.score)

    def hard_drop(self) -> None:
        piece = self._controllable_piece()
        if piece is None:
            return
        state = self._state
        dist = drop_distance(piece.shape, piece.x, piece.y, state.grid)
        score = state.score + dist * self.rules.hard_drop_points
        self._state = self._lock(state, piece.moved(0, dist), score)

    def step(self, action: Action) -> None:
        if action == Action.LEFT:
            self.move(-1)
        elif action == Action.RIGHT:
            self.move(1)
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.NONE:
            pass
        else:
            raise ValueError(f"Unknown action: {action!r}")

    # ---------- Internals ----------
    def _controllable_piece(self) -> Optional[Piece]:
        if self._state.status is not GameStatus.RUNNING:
            return None
        return self._state.active

    def _lock(self, state: GameState, piece: Piece, score: int) -> GameState:
        merged = merge(piece.shape, piece.x, piece.y, state.grid, int(piece.kind))
        grid, cleared = clear_full_rows(merged)
        lines = state.lines + cleared
        score += self.rules.score_for_lines(cleared)
        interval = self.rules.next_fall_interval(state.fall_interval, cleared)
        if cleared:
            logger.debug("Cleared %d row(s); lines=%d fall_interval=%d", cleared, lines, interval)

        spawned = try_spawn(grid, state.next_piece, self.rng)
        status = GameStatus.GAME_OVER if spawned.game_over else state.status
        if spawned.game_over:
            logger.info("Game over: score=%d lines=%d", score, lines)
        return GameState(
            grid=grid,
            active=spawned.active,
            next_piece=spawned.next_piece,
            score=score,
            lines=lines,
            fall_interval=interval,
            status=status,
        )
