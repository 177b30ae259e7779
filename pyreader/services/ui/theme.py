from __future__ import annotations

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from pyreader.domain.models import ThemeMode

THEME_ICONS = {
    ThemeMode.SYSTEM: "🌓",
    ThemeMode.LIGHT: "☀️",
    ThemeMode.DARK: "🌙",
}


def light_palette() -> QPalette:
    p = QPalette()
    p.setColor(QPalette.ColorRole.Window, QColor("#f5f5f5"))
    p.setColor(QPalette.ColorRole.WindowText, QColor("#111111"))
    p.setColor(QPalette.ColorRole.Base, QColor("#ffffff"))
    p.setColor(QPalette.ColorRole.AlternateBase, QColor("#f0f0f0"))
    p.setColor(QPalette.ColorRole.Text, QColor("#111111"))
    p.setColor(QPalette.ColorRole.Button, QColor("#e8e8e8"))
    p.setColor(QPalette.ColorRole.ButtonText, QColor("#111111"))
    p.setColor(QPalette.ColorRole.Highlight, QColor("#0b6bfd"))
    p.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
    return p


def dark_palette() -> QPalette:
    p = QPalette()
    p.setColor(QPalette.ColorRole.Window, QColor("#0f1115"))
    p.setColor(QPalette.ColorRole.WindowText, QColor("#e7e9ee"))
    p.setColor(QPalette.ColorRole.Base, QColor("#1a1d24"))
    p.setColor(QPalette.ColorRole.AlternateBase, QColor("#2a2f3a"))
    p.setColor(QPalette.ColorRole.Text, QColor("#e7e9ee"))
    p.setColor(QPalette.ColorRole.Button, QColor("#2a2f3a"))
    p.setColor(QPalette.ColorRole.ButtonText, QColor("#e7e9ee"))
    p.setColor(QPalette.ColorRole.Highlight, QColor("#7aa2ff"))
    p.setColor(QPalette.ColorRole.HighlightedText, QColor("#0f1115"))
    return p


class ThemeApplier:
    """Switches the application palette; SYSTEM restores the palette found at startup."""

    def __init__(self, app: QApplication | None = None) -> None:
        self._app = app or QApplication.instance()
        self._system = QPalette(self._app.palette()) if self._app is not None else QPalette()
        self._mode: ThemeMode | None = None

    @property
    def mode(self) -> ThemeMode | None:
        return self._mode

    def palette_for(self, mode: ThemeMode) -> QPalette:
        if mode is ThemeMode.LIGHT:
            return light_palette()
        if mode is ThemeMode.DARK:
            return dark_palette()
        return QPalette(self._system)

    def apply(self, mode: ThemeMode) -> None:
        if mode is self._mode:
            return
        self._mode = mode
        if self._app is not None:
            self._app.setPalette(self.palette_for(mode))
