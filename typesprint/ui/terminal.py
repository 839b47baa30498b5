"""curses front end: draws the session and feeds key presses into it."""

from __future__ import annotations

import curses
import logging
from typing import Iterable, Optional, Protocol

from typesprint.core.durations import format_duration
from typesprint.core.errors import PersistenceWriteError
from typesprint.core.sentences import SentenceSource
from typesprint.core.session import (
    Character,
    Effect,
    Event,
    SaveHighscore,
    Session,
    SideEffect,
    TimerTick,
    apply,
)
from typesprint.ui.colors import Pair, init_pairs
from typesprint.ui.keys import Key, translate_key
from typesprint.ui.models import SessionView

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def start(self) -> None: ...
    def stop(self) -> None: ...
    def elapsed(self) -> float: ...
    def is_running(self) -> bool: ...


class Store(Protocol):
    def save(self, seconds: float) -> None: ...


class SessionController:
    """Sole owner of the current session; runs the effects of each transition."""

    def __init__(self, session: Session, clock: Clock, store: Store) -> None:
        self._session = session
        self._clock = clock
        self._store = store
        self._running = True

    @property
    def session(self) -> Session:
        """The current session snapshot."""
        return self._session

    @property
    def running(self) -> bool:
        """False once a quit event was handled."""
        return self._running

    def view(self) -> SessionView:
        """View of the current session at the current clock reading."""
        return SessionView.from_session(self._session, self._clock.elapsed())

    def dispatch(self, event: Event) -> None:
        """Apply one event and carry out its effects."""
        if not self._running:
            return
        transition = apply(self._session, event, self._clock.elapsed())
        self._session = transition.session
        self._run_effects(transition.effects)

        # Record a finished run at the keystroke that finished it instead of
        # waiting for the next tick.
        if isinstance(event, Character) and self._session.is_complete and self._session.timer_running:
            self.dispatch(TimerTick())

    def _run_effects(self, effects: Iterable[SideEffect]) -> None:
        for effect in effects:
            if effect is Effect.START_TIMER:
                self._clock.start()
            elif effect is Effect.STOP_TIMER:
                self._clock.stop()
            elif effect is Effect.QUIT:
                self._running = False
            elif isinstance(effect, SaveHighscore):
                try:
                    self._store.save(effect.seconds)
                except PersistenceWriteError:
                    # Keep playing; the high score still lives in memory.
                    logger.exception("Failed to persist high score")


class TerminalUI:
    """Draws a SessionView with curses and reads keys."""

    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr

    def setup(self, tick_interval_ms: int) -> None:
        """Set up colours, raw key input and the read timeout."""
        init_pairs()
        curses.raw()  # deliver Ctrl+C as a key instead of SIGINT
        try:
            curses.set_escdelay(25)
        except AttributeError:
            pass
        self.stdscr.keypad(True)
        self.stdscr.timeout(tick_interval_ms)
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    def read_key(self) -> Key:
        """Return the next key, or None when the read timed out."""
        try:
            return self.stdscr.get_wch()
        except curses.error:
            return None

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> int:
        """Write text clipped to the screen; returns the next column."""
        maxy, maxx = self.stdscr.getmaxyx()
        if y >= maxy or x >= maxx - 1 or not text:
            return x
        text = text[: maxx - 1 - x]
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass
        return x + len(text)

    def draw(self, view: SessionView) -> None:
        """Redraw the whole screen from ``view``."""
        self.stdscr.erase()

        x = self._put(0, 0, view.matched, curses.color_pair(Pair.MATCHED))
        x = self._put(0, x, view.errored, curses.color_pair(Pair.ERROR))
        x = self._put(0, x, view.cursor_char, curses.A_REVERSE)
        self._put(0, x, view.remaining)

        info = curses.color_pair(Pair.INFO)
        self._put(2, 0, format_duration(view.elapsed), info)
        self._put(3, 0, f"{round(view.wpm)}wpm", info)

        y = 4
        for i, seconds in enumerate(view.history, start=1):
            self._put(y, 0, f"Time {i}: {format_duration(seconds)}")
            y += 1

        y += 1
        best = format_duration(view.highscore) if view.highscore is not None else "-"
        self._put(y, 0, f"Highscore: {best}", curses.A_BOLD)
        y += 1

        hint = curses.color_pair(Pair.HINT)
        if view.is_complete:
            self._put(y, 0, "Press enter to restart.", hint)
            y += 1
        self._put(y, 0, "Press esc to quit.", hint)
        self.stdscr.refresh()


def run_loop(
    stdscr,
    controller: SessionController,
    sentences: SentenceSource,
    tick_interval_ms: int,
    ui: Optional[TerminalUI] = None,
) -> Session:
    """Read keys and redraw until a quit event; returns the last session."""
    ui = ui or TerminalUI(stdscr)
    ui.setup(tick_interval_ms)

    while controller.running:
        ui.draw(controller.view())
        event = translate_key(ui.read_key(), sentences.next_sentence)
        if event is not None:
            controller.dispatch(event)
    return controller.session
