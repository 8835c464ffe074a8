from __future__ import annotations

import logging
from typing import Callable

from falling_blocks.game import TetrisGame


logger = logging.getLogger(__name__)


class GravityScheduler:
    """Drives gravity by arming a repeating timer at the engine's fall interval.

    ``set_timer(ms)`` arms the timer (replacing any previous one) and
    ``set_timer(0)`` cancels it, matching ``pygame.time.set_timer``. The timer
    runs only while the session is running; it is re-armed whenever the fall
    interval changes and cancelled once when the session pauses or ends.
    """

    def __init__(self, game: TetrisGame, set_timer: Callable[[int], None]) -> None:
        self.game = game
        self._set_timer = set_timer
        self.armed_interval = 0

    def sync(self) -> None:
        wanted = self.game.fall_interval if self.game.is_running else 0
        if wanted == self.armed_interval:
            return
        self._set_timer(wanted)
        if wanted:
            logger.debug("Gravity timer armed at %d ms", wanted)
        else:
            logger.debug("Gravity timer cancelled")
        self.armed_interval = wanted

    def on_tick(self) -> None:
        self.game.soft_drop()
        self.sync()

    def close(self) -> None:
        if self.armed_interval:
            self._set_timer(0)
            self.armed_interval = 0
