from __future__ import annotations

"""Loading of window icons from `assets/` with an in-memory cache."""

from pathlib import Path

from PyQt6.QtGui import QIcon, QPixmap


ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"
WINDOW_ICON = "icon.png"
_ICON_CACHE: dict[str, QIcon | None] = {}


def get_asset_path(relative: str) -> Path:
    return ASSETS_DIR / relative


def _read_icon(path: Path) -> QIcon | None:
    if not path.is_file():
        return None
    pixmap = QPixmap(str(path))
    return None if pixmap.isNull() else QIcon(pixmap)


def load_icon(relative: str = WINDOW_ICON) -> QIcon | None:
    """Return a cached `QIcon`, or `None` when the file is missing or not an image."""
    if relative not in _ICON_CACHE:
        _ICON_CACHE[relative] = _read_icon(get_asset_path(relative))
    return _ICON_CACHE[relative]
