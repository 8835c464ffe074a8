from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

import pygame

from falling_blocks.game import Action, TetrisGame


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    START_OR_PAUSE = "start_or_pause"
    QUIT = "quit"


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_x: Command.ROTATE,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_RETURN: Command.START_OR_PAUSE,
    pygame.K_KP_ENTER: Command.START_OR_PAUSE,
    pygame.K_ESCAPE: Command.QUIT,
}

COMMAND_TO_ACTION: Dict[Command, Action] = {
    Command.MOVE_LEFT: Action.LEFT,
    Command.MOVE_RIGHT: Action.RIGHT,
    Command.ROTATE: Action.ROTATE,
    Command.SOFT_DROP: Action.SOFT_DROP,
    Command.HARD_DROP: Action.HARD_DROP,
}

# Touch thresholds (pixels / milliseconds)
TAP_MAX_MOVE = 12
TAP_MAX_TIME = 250
SWIPE_MIN_DIST = 40


def classify_gesture(dx: float, dy: float, dt_ms: float) -> Optional[Command]:
    """Tap rotates, a downward swipe hard drops, anything else is ignored."""
    abs_x = abs(dx)
    abs_y = abs(dy)
    if abs_x < TAP_MAX_MOVE and abs_y < TAP_MAX_MOVE and dt_ms <= TAP_MAX_TIME:
        return Command.ROTATE
    if dy > SWIPE_MIN_DIST and abs_y > abs_x:
        return Command.HARD_DROP
    return None


def command_for_click(pos: Tuple[int, int], targets: Iterable[pygame.Rect]) -> Optional[Command]:
    """Clicks on the start / pause button or the status banner start, pause or resume."""
    if any(rect.collidepoint(pos) for rect in targets):
        return Command.START_OR_PAUSE
    return None


def apply_command(game: TetrisGame, command: Command) -> None:
    if command is Command.START_OR_PAUSE:
        # Starts a fresh session unless one is in progress, which it pauses/resumes
        if game.is_running or game.paused:
            game.pause_toggle()
        else:
            game.start()
        return
    action = COMMAND_TO_ACTION.get(command)
    if action is not None:
        game.step(action)
