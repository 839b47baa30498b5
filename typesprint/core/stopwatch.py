from __future__ import annotations

from PySide6.QtCore import QElapsedTimer


class Stopwatch:
    """Elapsed-time clock for a single run.

    Backed by ``QElapsedTimer``, which needs no running Qt event loop. The
    reading is frozen when stopped and reset by the next ``start()``.
    """

    def __init__(self) -> None:
        self._timer = QElapsedTimer()
        self._running = False
        self._frozen_ns = 0

    def start(self) -> None:
        """Start timing from zero."""
        self._frozen_ns = 0
        self._timer.start()
        self._running = True

    def stop(self) -> None:
        """Freeze the current reading."""
        if self._running:
            self._frozen_ns = self._timer.nsecsElapsed()
            self._running = False

    def is_running(self) -> bool:
        """Return True between start() and stop()."""
        return self._running

    def elapsed(self) -> float:
        """Seconds since ``start()``, or the frozen reading after ``stop()``."""
        ns = self._timer.nsecsElapsed() if self._running else self._frozen_ns
        return max(0.0, ns / 1e9)
