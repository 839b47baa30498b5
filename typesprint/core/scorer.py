from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HighscoreDecision:
    """Outcome of comparing a finished run against the stored best time."""

    highscore: float
    changed: bool


def word_count(target: str) -> int:
    """Number of whitespace-delimited words in ``target``."""
    return len(target.split())


def words_per_minute(target: str, elapsed: float) -> float:
    """Fractional WPM for typing ``target`` in ``elapsed`` seconds.

    Returns 0.0 when no time has elapsed. The value is not rounded; callers
    round for display.
    """
    if elapsed <= 0:
        return 0.0
    return word_count(target) / (elapsed / 60.0)


def evaluate_highscore(elapsed: float, current: Optional[float]) -> HighscoreDecision:
    """A run beats the high score when none is set or it is strictly faster."""
    if current is None or elapsed < current:
        return HighscoreDecision(highscore=elapsed, changed=True)
    return HighscoreDecision(highscore=current, changed=False)
