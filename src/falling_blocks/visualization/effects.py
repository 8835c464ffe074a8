from __future__ import annotations

import logging
from typing import Optional


logger = logging.getLogger(__name__)

FLASH_EVERY_LINES = 4
FLASH_MS = 1000


class LineFlash:
    """Screen flash every time another ``every`` rows have been cleared.

    Fed with the engine's running line total. A drop in that total means a new
    session started, which resets the counter and any flash in progress.
    Rows beyond a milestone carry over (``total % every``).
    """

    def __init__(self, every: int = FLASH_EVERY_LINES, duration_ms: int = FLASH_MS) -> None:
        self.every = every
        self.duration_ms = duration_ms
        self.lines_since_flash = 0
        self._last_lines = 0
        self._flash_until: Optional[int] = None

    def reset(self) -> None:
        self.lines_since_flash = 0
        self._last_lines = 0
        self._flash_until = None

    def observe(self, lines: int, now_ms: int) -> bool:
        if lines < self._last_lines:
            self.reset()
        gained = lines - self._last_lines
        self._last_lines = lines
        if gained <= 0:
            return False
        total = self.lines_since_flash + gained
        if total < self.every:
            self.lines_since_flash = total
            return False
        self.lines_since_flash = total % self.every
        self._flash_until = now_ms + self.duration_ms
        logger.debug("Line milestone reached at %d lines", lines)
        return True

    def visible(self, now_ms: int) -> bool:
        return self._flash_until is not None and now_ms < self._flash_until
