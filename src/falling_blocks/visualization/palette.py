from __future__ import annotations

from typing import Tuple

from falling_blocks.game import Cell


PALETTE = {
    Cell.EMPTY: (20, 20, 26),
    Cell.I: (0, 240, 240),
    Cell.J: (0, 0, 240),
    Cell.L: (240, 160, 0),
    Cell.O: (240, 240, 0),
    Cell.S: (0, 240, 0),
    Cell.T: (160, 0, 240),
    Cell.Z: (240, 0, 0),
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    return PALETTE.get(v, (200, 200, 200))
