from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """A closed interval of work or break, in whole seconds since epoch."""

    is_pause: bool
    start: int
    end: int

    def __post_init__(self) -> None:
        # A wall clock moved backwards yields an empty interval, never a negative one.
        if self.end < self.start:
            object.__setattr__(self, "end", self.start)

    @property
    def duration_seconds(self) -> int:
        return self.end - self.start

    @property
    def kind(self) -> str:
        return "pause" if self.is_pause else "active"
