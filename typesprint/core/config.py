from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "typesprint.yaml"


@dataclass(frozen=True)
class AppConfig:
    highscore_file: str = "highscore.txt"
    word_count: int = 8
    tick_interval_ms: int = 50
    words_file: Optional[str] = None
    log_file: str = "typesprint.log"


_TYPES = {
    "highscore_file": str,
    "word_count": int,
    "tick_interval_ms": int,
    "words_file": str,
    "log_file": str,
}


def load_config(path: Union[str, Path] = CONFIG_FILENAME) -> AppConfig:
    """Read overrides from a YAML mapping; a missing file gives the defaults."""
    path = Path(path)
    config = AppConfig()
    if not path.exists():
        return config

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return config
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a mapping of settings")

    known = {f.name for f in fields(AppConfig)}
    overrides = {}
    for key, value in raw.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r in %s", key, path)
            continue
        expected = _TYPES[key]
        if value is None and key == "words_file":
            overrides[key] = None
            continue
        # bool is an int subclass but never a valid count
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ValueError(f"{path.name}: {key!r} must be {expected.__name__}, got {value!r}")
        overrides[key] = value

    config = replace(config, **overrides)
    if config.word_count < 1:
        raise ValueError(f"{path.name}: 'word_count' must be positive")
    if config.tick_interval_ms < 1:
        raise ValueError(f"{path.name}: 'tick_interval_ms' must be positive")
    return config
