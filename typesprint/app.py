"""Application entry point and setup for the typesprint typing test."""

import curses
import logging
import sys
from pathlib import Path
from typing import Optional

from typesprint.core.config import AppConfig, load_config
from typesprint.core.errors import PersistenceError
from typesprint.core.highscore import HighscoreStore
from typesprint.core.sentences import SentenceSource
from typesprint.core.session import Session
from typesprint.core.stopwatch import Stopwatch
from typesprint.ui.terminal import SessionController, run_loop


def configure_logging(log_file: str) -> None:
    """Log to a file; curses owns the terminal while the test runs."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=log_file,
        encoding="utf-8",
    )


def build_sentences(config: AppConfig) -> SentenceSource:
    """Sentence source from the configured word list, or the bundled one."""
    if config.words_file:
        return SentenceSource.from_yaml(Path(config.words_file), word_count=config.word_count)
    return SentenceSource.default(word_count=config.word_count)


def load_highscore(store: HighscoreStore) -> Optional[float]:
    """Load the stored best time; any failure other than a missing file is fatal."""
    try:
        return store.load()
    except PersistenceError as e:
        logging.error("Failed to load high score: %s", e)
        print(f"Could not load high score: {e}", file=sys.stderr)
        sys.exit(1)


def run() -> None:
    """Load config and the high score, then run the typing test until quit."""
    config = load_config()
    configure_logging(config.log_file)

    sentences = build_sentences(config)
    store = HighscoreStore(config.highscore_file)
    highscore = load_highscore(store)

    session = Session.new(sentences.next_sentence(), highscore=highscore)
    controller = SessionController(session, Stopwatch(), store)

    try:
        final = curses.wrapper(run_loop, controller, sentences, config.tick_interval_ms)
    except Exception:
        logging.exception("Unhandled error in typing loop")
        raise
    logging.info("Quit after %d completed run(s)", len(final.history))


if __name__ == "__main__":
    run()
