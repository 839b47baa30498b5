"""Tests for typesprint.core.durations – duration strings."""

from __future__ import annotations

import pytest

from typesprint.core.durations import format_duration, parse_duration
from typesprint.core.errors import MalformedDurationError, PersistenceError


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0.0, "0s"),
            (1.234, "1.234s"),
            (5.0, "5s"),
            (0.85, "850ms"),
            (0.0015, "1.5ms"),
            (0.000002, "2µs"),
            (62.5, "1m2.5s"),
            (120.0, "2m0s"),
            (3600.0, "1h0m0s"),
            (3725.25, "1h2m5.25s"),
            (-1.5, "-1.5s"),
        ],
    )
    def test_format(self, seconds: float, expected: str):
        assert format_duration(seconds) == expected

    def test_nanoseconds(self):
        assert format_duration(5e-9) == "5ns"


class TestParseDuration:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.234s", 1.234),
            ("850ms", 0.85),
            ("1m2.5s", 62.5),
            ("1h0m0s", 3600.0),
            ("0", 0.0),
            ("0s", 0.0),
            ("1500us", 0.0015),
            ("1500µs", 0.0015),
            ("250ns", 2.5e-7),
            ("-2s", -2.0),
            ("+2s", 2.0),
            (".5s", 0.5),
            ("  3s\n", 3.0),
        ],
    )
    def test_parse(self, text: str, expected: float):
        assert parse_duration(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "-", "abc", "12", "1.2", "1x", "s", "1s2", "1 s"])
    def test_malformed(self, text: str):
        with pytest.raises(MalformedDurationError):
            parse_duration(text)

    def test_error_is_value_and_persistence_error(self):
        with pytest.raises(ValueError):
            parse_duration("nope")
        with pytest.raises(PersistenceError):
            parse_duration("nope")

    @pytest.mark.parametrize("seconds", [0.85, 1.234, 62.5, 3725.25])
    def test_reads_back_formatted_value(self, seconds: float):
        assert parse_duration(format_duration(seconds)) == pytest.approx(seconds)
