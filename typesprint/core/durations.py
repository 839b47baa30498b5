"""Human-readable duration strings such as ``1.234s`` or ``1m2.5s``.

Durations are plain float seconds everywhere else in the package. Text uses
the compact ``<number><unit>`` notation, so a high-score file written by
another tool in that notation still loads.
"""

from __future__ import annotations

import re

from typesprint.core.errors import MalformedDurationError

_NS_PER_SECOND = 10**9
_NS_PER_MINUTE = 60 * _NS_PER_SECOND
_NS_PER_HOUR = 60 * _NS_PER_MINUTE

_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # micro sign
    "μs": 1e-6,  # greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def _fixed(value: int, scale: int) -> str:
    """Render ``value / scale`` exactly, dropping trailing zeros."""
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    digits = str(frac).rjust(len(str(scale)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"


def format_duration(seconds: float) -> str:
    """Format seconds as e.g. ``0s``, ``850ms``, ``1.234s``, ``1m2.5s``, ``1h0m0s``."""
    ns = int(round(seconds * _NS_PER_SECOND))
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < _NS_PER_SECOND:
        if ns < 1_000:
            return f"{sign}{ns}ns"
        if ns < 1_000_000:
            return f"{sign}{_fixed(ns, 1_000)}µs"
        return f"{sign}{_fixed(ns, 1_000_000)}ms"

    hours, rest = divmod(ns, _NS_PER_HOUR)
    minutes, rest = divmod(rest, _NS_PER_MINUTE)
    secs = _fixed(rest, _NS_PER_SECOND) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}"
    if minutes:
        return f"{sign}{minutes}m{secs}"
    return sign + secs


def parse_duration(text: str) -> float:
    """Parse a duration string into seconds.

    Accepts an optional sign followed by one or more ``<number><unit>``
    components (``h``, ``m``, ``s``, ``ms``, ``us``/``µs``, ``ns``), or a bare
    ``0``. Raises :class:`MalformedDurationError` for anything else.
    """
    s = text.strip()
    sign = 1.0
    if s[:1] in ("+", "-"):
        sign = -1.0 if s[0] == "-" else 1.0
        s = s[1:]
    if not s:
        raise MalformedDurationError(f"invalid duration {text!r}")
    if s == "0":
        return 0.0

    total = 0.0
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        if match is None:
            raise MalformedDurationError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()
    return sign * total
