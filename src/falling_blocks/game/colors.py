from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

GHOST_COLOR: Color = (70, 76, 92)
FALLBACK_COLOR: Color = (200, 200, 200)

PALETTE = {
    0: (17, 24, 39),
    1: (34, 211, 238),  # I
    2: (234, 179, 8),   # O
    3: (168, 85, 247),  # T
    4: (34, 197, 94),   # S
    5: (239, 68, 68),   # Z
    6: (59, 130, 246),  # J
    7: (249, 115, 22),  # L
}


def color_for_value(v: int) -> Color:
    return PALETTE.get(abs(v), FALLBACK_COLOR)
