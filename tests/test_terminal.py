"""Tests for typesprint.ui.terminal – SessionController effect handling."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from typesprint.core.errors import PersistenceWriteError
from typesprint.core.highscore import HighscoreStore
from typesprint.core.session import Character, Erase, Quit, Restart, Session, TimerTick
from typesprint.ui.terminal import SessionController


class FakeClock:
    """Stopwatch stand-in whose reading is set by the test."""

    def __init__(self) -> None:
        self.now = 0.0
        self.calls: List[str] = []
        self._running = False

    def start(self) -> None:
        self.calls.append("start")
        self._running = True

    def stop(self) -> None:
        self.calls.append("stop")
        self._running = False

    def is_running(self) -> bool:
        return self._running

    def elapsed(self) -> float:
        return self.now


class FailingStore:
    def save(self, seconds: float) -> None:
        raise PersistenceWriteError("disk full")


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(tmp_path: Path) -> HighscoreStore:
    return HighscoreStore(tmp_path / "highscore.txt")


def _type(controller: SessionController, text: str) -> None:
    for c in text:
        controller.dispatch(Character(c))


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

class TestEffects:
    def test_first_key_starts_clock(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("ab"), clock, store)
        c.dispatch(Character("a"))
        assert clock.calls == ["start"]

    def test_completing_key_records_run_immediately(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("ab"), clock, store)
        _type(c, "a")
        clock.now = 1.5
        _type(c, "b")
        assert clock.calls == ["start", "stop"]
        assert c.session.history == (1.5,)
        assert c.session.highscore == 1.5
        assert store.file_path.read_text(encoding="utf-8") == "1.5s"

    def test_ticks_after_completion_do_not_record_again(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("ab"), clock, store)
        clock.now = 2.0
        _type(c, "ab")
        for _ in range(5):
            c.dispatch(TimerTick())
        assert c.session.history == (2.0,)
        assert clock.calls.count("stop") == 1

    def test_slower_run_does_not_save(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("ab", highscore=1.0), clock, store)
        clock.now = 3.0
        _type(c, "ab")
        assert not store.file_path.exists()
        assert c.session.highscore == 1.0

    def test_error_then_correction(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("ab"), clock, store)
        _type(c, "xb")
        assert c.session.history == ()
        c.dispatch(Erase())
        c.dispatch(Erase())
        clock.now = 4.0
        _type(c, "ab")
        assert c.session.history == (4.0,)

    def test_failed_save_keeps_running(self, clock: FakeClock, caplog: pytest.LogCaptureFixture):
        c = SessionController(Session.new("ab"), clock, FailingStore())
        clock.now = 1.0
        with caplog.at_level("ERROR"):
            _type(c, "ab")
        assert c.running
        assert c.session.highscore == 1.0
        assert "Failed to persist high score" in caplog.text


# ---------------------------------------------------------------------------
# Quit / restart / view
# ---------------------------------------------------------------------------

class TestLifecycle:
    def test_quit_stops_loop(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("ab"), clock, store)
        c.dispatch(Quit())
        assert not c.running

    def test_events_after_quit_ignored(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("ab"), clock, store)
        c.dispatch(Quit())
        c.dispatch(Character("a"))
        assert c.session.position == 0

    def test_restart_after_completion(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("ab"), clock, store)
        clock.now = 2.0
        _type(c, "ab")
        c.dispatch(Restart("cd"))
        assert c.session.target == "cd"
        assert c.session.history == (2.0,)
        assert c.view().elapsed == 0.0

    def test_view_reports_live_wpm(self, clock: FakeClock, store: HighscoreStore):
        c = SessionController(Session.new("cat dog"), clock, store)
        _type(c, "cat")
        clock.now = 60.0
        view = c.view()
        assert view.position == 3
        assert view.wpm == pytest.approx(2.0)
