from __future__ import annotations

from typing import Tuple

EMPTY_COLOR = (20, 20, 26)

PALETTE = {
    1: (6, 182, 212),   # I cyan
    2: (59, 130, 246),  # J blue
    3: (249, 115, 22),  # L orange
    4: (234, 179, 8),   # O yellow
    5: (34, 197, 94),   # S green
    6: (168, 85, 247),  # T purple
    7: (239, 68, 68),   # Z red
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    if v == 0:
        return EMPTY_COLOR
    return PALETTE.get(abs(v), (200, 200, 200))
