"""Read-only view of a session for rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from typesprint.core.scorer import words_per_minute
from typesprint.core.session import Session


@dataclass(frozen=True)
class SessionView:
    target: str
    position: int
    error_mark: Optional[int]
    is_complete: bool
    elapsed: float
    wpm: float
    history: Tuple[float, ...]
    highscore: Optional[float]

    @classmethod
    def from_session(cls, session: Session, elapsed: float) -> "SessionView":
        """Build the view; ``elapsed`` is the current stopwatch reading."""
        # The stopwatch keeps its last reading until the next run starts.
        if not (session.timer_running or session.finalized):
            elapsed = 0.0
        return cls(
            target=session.target,
            position=session.position,
            error_mark=session.error_mark,
            is_complete=session.is_complete,
            elapsed=elapsed,
            wpm=words_per_minute(session.target, elapsed),
            history=session.history,
            highscore=session.highscore,
        )

    @property
    def matched(self) -> str:
        end = self.position if self.error_mark is None else self.error_mark
        return self.target[:end]

    @property
    def errored(self) -> str:
        if self.error_mark is None:
            return ""
        return self.target[self.error_mark:self.position]

    @property
    def cursor_char(self) -> str:
        return self.target[self.position:self.position + 1]

    @property
    def remaining(self) -> str:
        return self.target[self.position + 1:]
