import pytest

pytest.importorskip("PyQt6.QtGui")

from pausecounter.core import assets  # noqa: E402


def test_missing_icon_is_none_and_cached(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(assets, "ASSETS_DIR", tmp_path)
    monkeypatch.setattr(assets, "_ICON_CACHE", {})

    assert assets.load_icon("missing.png") is None
    assert assets._ICON_CACHE == {"missing.png": None}  # noqa: SLF001 - tests may inspect the cache


def test_cached_entry_is_reused(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(assets, "ASSETS_DIR", tmp_path)
    monkeypatch.setattr(assets, "_ICON_CACHE", {"icon.png": None})
    (tmp_path / "icon.png").write_bytes(b"not read again")

    assert assets.load_icon() is None
