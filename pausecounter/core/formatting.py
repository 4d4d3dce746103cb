from __future__ import annotations

"""Elapsed-time formatting and threshold coloring."""

from dataclasses import dataclass
from enum import Enum


class HighlightColor(str, Enum):
    NEUTRAL = "#000000"
    GREEN = "#00ff00"
    YELLOW = "#ffff00"
    RED = "#ff0000"


@dataclass(frozen=True)
class WarnThresholds:
    warn_after: int = 45 * 60
    danger_after: int = 60 * 60

    @classmethod
    def from_minutes(cls, warn_minutes: int, danger_minutes: int) -> WarnThresholds:
        return cls(warn_after=warn_minutes * 60, danger_after=danger_minutes * 60)

    @property
    def enabled(self) -> bool:
        return not (self.warn_after == 0 and self.danger_after == 0)


def format_elapsed(seconds: float, force_hours: bool = False) -> str:
    """Render seconds as `MM:SS`, or `HH:MM:SS` once an hour has passed or when forced."""
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours != 0 or force_hours:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def highlight_color(seconds: float, thresholds: WarnThresholds) -> HighlightColor:
    if not thresholds.enabled:
        return HighlightColor.NEUTRAL
    if seconds > thresholds.danger_after:
        return HighlightColor.RED
    if seconds > thresholds.warn_after:
        return HighlightColor.YELLOW
    return HighlightColor.GREEN
