from __future__ import annotations

from urllib.parse import quote

from PyQt6.QtCore import QSettings

from pyreader.domain.interfaces import ISettingsStore
from pyreader.domain.models import ThemeMode
from pyreader.utils.constants import SETTINGS_THEME_MODE


class SettingsService(ISettingsStore):
    """
    QSettings-backed key/value store for reading positions and the theme.

    Keys are percent-encoded before they reach QSettings: document identities
    are URIs, and a raw "/" would be read as a settings group separator.
    """

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    @staticmethod
    def _key(key: str) -> str:
        return quote(key, safe="")

    def get_int(self, key: str) -> int | None:
        value = self._s.value(self._key(key))
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    def set_int(self, key: str, value: int) -> None:
        self._s.setValue(self._key(key), int(value))
        self._s.sync()

    def get_string(self, key: str) -> str | None:
        value = self._s.value(self._key(key))
        return value if isinstance(value, str) else None

    def set_string(self, key: str, value: str) -> None:
        self._s.setValue(self._key(key), str(value))
        self._s.sync()

    # ---- typed helpers ----

    def get_theme(self) -> ThemeMode:
        return ThemeMode.from_name(self.get_string(SETTINGS_THEME_MODE))

    def set_theme(self, mode: ThemeMode) -> None:
        self.set_string(SETTINGS_THEME_MODE, mode.name)
