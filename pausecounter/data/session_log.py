from __future__ import annotations

"""Persistence of the session history as a plain-text log."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable

from pausecounter.core.config import AppConfig, config_dir
from pausecounter.core.formatting import format_elapsed
from pausecounter.core.session import Session


LOG_FILE_NAME = "pause_counter.log"


def default_log_path() -> Path:
    return config_dir() / LOG_FILE_NAME


def format_session_log(sessions: Iterable[Session]) -> str:
    """One `HH:MM:SS active|pause` line per session, in insertion order."""
    return "\n".join(
        f"{format_elapsed(session.duration_seconds, force_hours=True)} {session.kind}"
        for session in sessions
    )


class SessionStore(ABC):
    @abstractmethod
    def save(self, sessions: tuple[Session, ...]) -> None:
        """Persist the full history. May raise `OSError`."""


class NullSessionStore(SessionStore):
    def save(self, sessions: tuple[Session, ...]) -> None:
        pass


class SessionLogStore(SessionStore):
    """Overwrites a text file with the whole history on every save."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_log_path()

    def save(self, sessions: tuple[Session, ...]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(format_session_log(sessions), encoding="utf-8")


def build_session_store(config: AppConfig, path: str | Path | None = None) -> SessionStore:
    if config.store_last_session:
        return SessionLogStore(path)
    return NullSessionStore()
