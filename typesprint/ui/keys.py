"""Translate curses key input into session events."""

from __future__ import annotations

import curses
from typing import Callable, Optional, Union

from typesprint.core.session import Character, Erase, Event, Quit, Restart, TimerTick

ESC = "\x1b"
CTRL_C = "\x03"

_QUIT_KEYS = {ESC, CTRL_C, 27, 3}
_ERASE_KEYS = {curses.KEY_BACKSPACE, "\x7f", "\b", 127, 8}
_ENTER_KEYS = {curses.KEY_ENTER, "\n", "\r", 10, 13}

Key = Union[str, int, None]


def translate_key(key: Key, next_target: Callable[[], str]) -> Optional[Event]:
    """Map a key from ``get_wch`` to an event.

    ``None`` means the read timed out and becomes a timer tick. Keys with no
    meaning return ``None`` and are dropped by the caller.
    """
    if key is None:
        return TimerTick()
    if key in _QUIT_KEYS:
        return Quit()
    if key in _ERASE_KEYS:
        return Erase()
    if key in _ENTER_KEYS:
        return Restart(next_target())
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return Character(key)
    return None
