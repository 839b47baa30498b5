from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional, Sequence, Union

import yaml

DEFAULT_WORD_COUNT = 8


def default_words_path() -> Path:
    """Path of the bundled word list."""
    return Path(__file__).resolve().parent.parent / "data" / "words.yaml"


def load_words(path: Union[str, Path]) -> List[str]:
    """Read a YAML word list: a mapping with a ``words`` list, or a plain list."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("words")
    if not isinstance(raw, list):
        raise ValueError(f"{path.name}: expected a 'words' list")

    words = [str(item).strip() for item in raw if str(item).strip()]
    if not words:
        raise ValueError(f"{path.name}: 'words' is empty")
    # Sentences are single-line and single-spaced; multi-word entries would break both.
    bad = [w for w in words if len(w.split()) != 1]
    if bad:
        raise ValueError(f"{path.name}: entries must be single words, got {bad[0]!r}")
    return words


class SentenceSource:
    """Draws target sentences made of random words."""

    def __init__(
        self,
        words: Sequence[str],
        word_count: int = DEFAULT_WORD_COUNT,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not words:
            raise ValueError("SentenceSource needs at least one word")
        if word_count < 1:
            raise ValueError(f"word_count must be positive, got {word_count}")
        self._words = list(words)
        self._word_count = word_count
        self._rng = rng or random.Random()

    @classmethod
    def from_yaml(cls, path: Union[str, Path], word_count: int = DEFAULT_WORD_COUNT) -> "SentenceSource":
        """Source backed by the word list at ``path``."""
        return cls(load_words(path), word_count=word_count)

    @classmethod
    def default(cls, word_count: int = DEFAULT_WORD_COUNT) -> "SentenceSource":
        """Source backed by the bundled word list."""
        return cls.from_yaml(default_words_path(), word_count=word_count)

    @property
    def word_count(self) -> int:
        """Number of words per sentence."""
        return self._word_count

    def next_sentence(self) -> str:
        """Return ``word_count`` random words joined by single spaces."""
        return " ".join(self._rng.choice(self._words) for _ in range(self._word_count))
