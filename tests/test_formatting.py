import re

import pytest

from pausecounter.core.formatting import HighlightColor, WarnThresholds, format_elapsed, highlight_color


def test_format_examples() -> None:
    assert format_elapsed(125, False) == "02:05"
    assert format_elapsed(3725, False) == "01:02:05"
    assert format_elapsed(5, True) == "00:00:05"


def test_format_pattern_switches_at_one_hour() -> None:
    short = re.compile(r"^\d{2}:\d{2}$")
    long = re.compile(r"^\d{2,}:\d{2}:\d{2}$")
    for seconds in (0, 1, 59, 60, 599, 3599):
        assert short.match(format_elapsed(seconds))
    for seconds in (3600, 3601, 86399, 360000):
        assert long.match(format_elapsed(seconds))


def test_format_parses_back_to_same_minute() -> None:
    for seconds in (0, 61, 754, 3599, 3600, 7322, 45296):
        parts = [int(p) for p in format_elapsed(seconds).split(":")]
        if len(parts) == 2:
            parts.insert(0, 0)
        hours, minutes, secs = parts
        assert hours * 3600 + minutes * 60 + secs == seconds


def test_format_truncates_fractions_and_clamps_negative() -> None:
    assert format_elapsed(59.9) == "00:59"
    assert format_elapsed(-3) == "00:00"


def test_hours_are_not_wrapped_at_a_day() -> None:
    assert format_elapsed(100 * 3600) == "100:00:00"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, HighlightColor.GREEN),
        (2699, HighlightColor.GREEN),
        (2700, HighlightColor.GREEN),
        (2701, HighlightColor.YELLOW),
        (3600, HighlightColor.YELLOW),
        (3601, HighlightColor.RED),
        (100000, HighlightColor.RED),
    ],
)
def test_threshold_boundaries(seconds: int, expected: HighlightColor) -> None:
    thresholds = WarnThresholds(warn_after=2700, danger_after=3600)
    assert highlight_color(seconds, thresholds) == expected


def test_disabled_thresholds_are_always_neutral() -> None:
    thresholds = WarnThresholds(warn_after=0, danger_after=0)
    for seconds in (0, 1, 2700, 3601, 10**6):
        assert highlight_color(seconds, thresholds) == HighlightColor.NEUTRAL


def test_only_danger_threshold_set() -> None:
    thresholds = WarnThresholds(warn_after=0, danger_after=60)
    assert highlight_color(0, thresholds) == HighlightColor.GREEN
    assert highlight_color(1, thresholds) == HighlightColor.YELLOW
    assert highlight_color(61, thresholds) == HighlightColor.RED


def test_thresholds_from_minutes() -> None:
    thresholds = WarnThresholds.from_minutes(45, 60)
    assert thresholds == WarnThresholds(warn_after=2700, danger_after=3600)
    assert HighlightColor.RED.value == "#ff0000"
