from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from typesprint.core.durations import format_duration, parse_duration
from typesprint.core.errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "highscore.txt"


class HighscoreStore:
    """Stores the best completion time as a duration string, e.g. ``1.234s``.

    File: ``highscore.txt`` in the working directory unless a path is given.
    A missing file means no high score yet.
    """

    def __init__(self, file_path: Union[str, Path] = DEFAULT_FILENAME) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        """Location of the high-score file."""
        return self._file_path

    def load(self) -> Optional[float]:
        """Return the stored best time in seconds, or None when unset."""
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No high score file at %s", self._file_path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(f"Could not read high score from {self._file_path}: {e}") from e

        seconds = parse_duration(text)
        if seconds <= 0:
            # Zero is what gets written when nothing has been recorded.
            return None
        logger.info("Loaded high score %s from %s", format_duration(seconds), self._file_path)
        return seconds

    def save(self, seconds: float) -> None:
        """Overwrite the stored best time with ``seconds``."""
        try:
            self._file_path.write_text(format_duration(seconds), encoding="utf-8")
        except OSError as e:
            raise PersistenceWriteError(f"Could not save high score to {self._file_path}: {e}") from e
        logger.info("Saved high score %s to %s", format_duration(seconds), self._file_path)
