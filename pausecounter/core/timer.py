from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum

from pausecounter.core.formatting import HighlightColor, WarnThresholds, format_elapsed, highlight_color
from pausecounter.core.session import Session
from pausecounter.data.session_log import NullSessionStore, SessionStore


logger = logging.getLogger(__name__)

PAUSED_TEXT = "PAUSED"
RUNNING_TICK_MS = 500
PAUSED_TICK_MS = 2000


class TimerState(str, Enum):
    PAUSED = "paused"
    RUNNING = "running"


@dataclass(frozen=True)
class TimerSnapshot:
    display_text: str
    color: HighlightColor
    pause_count: int
    paused: bool
    elapsed_seconds: int

    def as_render_tuple(self) -> tuple[str, HighlightColor, int]:
        return self.display_text, self.color, self.pause_count


class StopwatchTimer:
    """Wall-clock stopwatch toggled between running and paused, detached from UI framework."""

    def __init__(
        self,
        thresholds: WarnThresholds | None = None,
        store: SessionStore | None = None,
        start_unpaused: bool = False,
        now: float | None = None,
    ) -> None:
        if now is None:
            now = time.time()
        self._thresholds = thresholds if thresholds is not None else WarnThresholds()
        self._store = store if store is not None else NullSessionStore()
        self._paused = not start_unpaused
        self._anchor = int(now)
        self._sessions: list[Session] = []

    @property
    def state(self) -> TimerState:
        return TimerState.PAUSED if self._paused else TimerState.RUNNING

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def anchor(self) -> int:
        return self._anchor

    @property
    def thresholds(self) -> WarnThresholds:
        return self._thresholds

    @property
    def sessions(self) -> tuple[Session, ...]:
        return tuple(self._sessions)

    @property
    def tick_interval_ms(self) -> int:
        return PAUSED_TICK_MS if self._paused else RUNNING_TICK_MS

    def toggle(self, now: float | None = None) -> Session:
        if now is None:
            now = time.time()
        now_s = int(now)

        session = Session(is_pause=self._paused, start=self._anchor, end=now_s)
        self._sessions.append(session)
        # Only a fresh run restarts from zero; a break keeps the run's anchor.
        if self._paused:
            self._anchor = now_s
        self._paused = not self._paused
        logger.debug("Closed %s interval of %ss, now %s", session.kind, session.duration_seconds, self.state.value)

        try:
            self._store.save(self.sessions)
        except Exception:
            logger.exception("Failed to store sessions")
        return session

    def elapsed_seconds(self, now: float | None = None) -> int:
        if self._paused:
            return 0
        if now is None:
            now = time.time()
        return max(0, int(now) - self._anchor)

    def pause_count(self) -> int:
        """Breaks taken so far; the idle wait before the first run is not a break."""
        count = 0
        worked = False
        for session in self._sessions:
            if not session.is_pause:
                worked = True
            elif worked:
                count += 1
        return count

    def tick(self, now: float | None = None) -> TimerSnapshot:
        if self._paused:
            return TimerSnapshot(
                display_text=PAUSED_TEXT,
                color=HighlightColor.NEUTRAL,
                pause_count=self.pause_count(),
                paused=True,
                elapsed_seconds=0,
            )

        elapsed = self.elapsed_seconds(now)
        return TimerSnapshot(
            display_text=format_elapsed(elapsed),
            color=highlight_color(elapsed, self._thresholds),
            pause_count=self.pause_count(),
            paused=False,
            elapsed_seconds=elapsed,
        )
