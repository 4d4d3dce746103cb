from __future__ import annotations

"""Loading of the widget configuration from a JSON file in the user config directory."""

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from pausecounter.core.formatting import WarnThresholds


logger = logging.getLogger(__name__)

APP_DIR_NAME = "pause_counter"
CONFIG_FILE_NAME = "pause_counter.json"


class ConfigError(Exception):
    """Raised when the config file exists but cannot be used."""


@dataclass
class AppConfig:
    warn_after_minutes: int = 45
    danger_after_minutes: int = 60
    window_size: list[float] = field(default_factory=lambda: [150.0, 80.0])
    window_position: list[float] = field(default_factory=lambda: [40.0, 40.0])
    always_on_top: bool = False
    start_unpaused: bool = False
    store_last_session: bool = True

    def thresholds(self) -> WarnThresholds:
        return WarnThresholds.from_minutes(self.warn_after_minutes, self.danger_after_minutes)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict[str, Any], source: str = "<config>") -> AppConfig:
        values: dict[str, Any] = {}
        known = {f.name for f in fields(cls)}
        for key, value in raw.items():
            if key not in known:
                logger.warning("Ignoring unknown config key %r in %s", key, source)
                continue
            values[key] = _validate_field(key, value, source)
        return cls(**values)


def _validate_field(key: str, value: Any, source: str) -> Any:
    if key in {"warn_after_minutes", "danger_after_minutes"}:
        # bool is an int subclass; `true` is not a minute count
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"{source}: {key} must be a non-negative integer, got {value!r}")
        return value
    if key in {"window_size", "window_position"}:
        if (
            not isinstance(value, list)
            or len(value) != 2
            or any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in value)
        ):
            raise ConfigError(f"{source}: {key} must be a list of two numbers, got {value!r}")
        return [float(v) for v in value]
    if not isinstance(value, bool):
        raise ConfigError(f"{source}: {key} must be true or false, got {value!r}")
    return value


def config_dir() -> Path:
    """Per-user configuration directory for the app; not created here."""
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", Path.home()))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / APP_DIR_NAME


def default_config_path() -> Path:
    return config_dir() / CONFIG_FILE_NAME


def write_config(config: AppConfig, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")


def load_config(path: str | Path | None = None) -> AppConfig:
    """Read the config, creating it with defaults on first launch.

    Missing keys fall back to defaults. Unreadable files, invalid JSON and
    values of the wrong type raise `ConfigError`.
    """
    path = Path(path) if path is not None else default_config_path()

    if not path.exists():
        config = AppConfig()
        try:
            write_config(config, path)
        except OSError as exc:
            raise ConfigError(f"Failed to create default config at {path}: {exc}") from exc
        logger.info("Created default config at %s", path)
        return config

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read config {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse config {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a JSON object at top level")

    config = AppConfig.from_dict(raw, source=str(path))
    logger.info("Loaded config from %s", path)
    return config
