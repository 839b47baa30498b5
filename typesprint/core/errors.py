"""Error types raised by the high-score persistence layer."""


class PersistenceError(Exception):
    """Base class for failures reading or writing the high-score file."""


class PersistenceReadError(PersistenceError):
    """The high-score file exists but could not be read."""


class PersistenceWriteError(PersistenceError):
    """The high-score file could not be written."""


class MalformedDurationError(PersistenceError, ValueError):
    """A stored duration string could not be parsed."""
