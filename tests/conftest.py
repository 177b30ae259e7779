from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from pyreader.services.file_service import DocumentLoader  # noqa: E402
from pyreader.services.reader_state import ReaderState  # noqa: E402
from pyreader.services.settings_service import SettingsService  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


class MemoryStore:
    """In-memory settings store that records every write."""

    def __init__(self, initial: dict | None = None) -> None:
        self.data: dict[str, object] = dict(initial or {})
        self.writes: list[tuple[str, object]] = []

    def get_int(self, key: str) -> int | None:
        v = self.data.get(key)
        return v if isinstance(v, int) else None

    def set_int(self, key: str, value: int) -> None:
        self.data[key] = int(value)
        self.writes.append((key, int(value)))

    def get_string(self, key: str) -> str | None:
        v = self.data.get(key)
        return v if isinstance(v, str) else None

    def set_string(self, key: str, value: str) -> None:
        self.data[key] = value
        self.writes.append((key, value))


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def loader() -> DocumentLoader:
    return DocumentLoader()


@pytest.fixture()
def state(memory_store: MemoryStore) -> ReaderState:
    return ReaderState(memory_store)


@pytest.fixture()
def text_file(tmp_path: Path):
    """Factory writing a UTF-8 file with `n` numbered lines."""

    def _make(n: int, name: str = "book.txt") -> Path:
        p = tmp_path / name
        p.write_text("".join(f"line {i + 1}\n" for i in range(n)), encoding="utf-8")
        return p

    return _make
