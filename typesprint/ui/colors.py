"""Terminal colour palette and curses colour-pair setup."""

from __future__ import annotations

import curses
from typing import Tuple


class Palette:
    """Hex colours for the highlighted spans of the target sentence."""

    MATCHED_BG = "#2E8B57"
    ERROR_BG = "#FF6347"
    SPAN_FG = "#FFFFFF"

    # Colour slots redefined when the terminal allows it.
    MATCHED_SLOT = 16
    ERROR_SLOT = 17


class Pair:
    """curses colour-pair ids."""

    MATCHED = 1
    ERROR = 2
    INFO = 3
    HINT = 4


def hex_to_curses(value: str) -> Tuple[int, int, int]:
    """Convert #RRGGBB into curses' 0-1000 RGB scale."""
    value = value.strip()
    if not (value.startswith("#") and len(value) == 7):
        raise ValueError(f"expected #RRGGBB, got {value!r}")
    r, g, b = (int(value[i:i + 2], 16) for i in (1, 3, 5))
    return (r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)


def init_pairs() -> None:
    """Register colour pairs. Falls back to the 8 basic colours."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()

    matched_bg, error_bg = curses.COLOR_GREEN, curses.COLOR_RED
    if curses.can_change_color() and curses.COLORS > Palette.ERROR_SLOT:
        curses.init_color(Palette.MATCHED_SLOT, *hex_to_curses(Palette.MATCHED_BG))
        curses.init_color(Palette.ERROR_SLOT, *hex_to_curses(Palette.ERROR_BG))
        matched_bg, error_bg = Palette.MATCHED_SLOT, Palette.ERROR_SLOT

    curses.init_pair(Pair.MATCHED, curses.COLOR_WHITE, matched_bg)
    curses.init_pair(Pair.ERROR, curses.COLOR_WHITE, error_bg)
    curses.init_pair(Pair.INFO, curses.COLOR_YELLOW, -1)
    curses.init_pair(Pair.HINT, curses.COLOR_CYAN, -1)
