"""Concrete service implementations: settings, document loading, reader state."""

from .file_service import DocumentLoader
from .reader_state import ReaderState
from .settings_service import SettingsService

__all__ = ["DocumentLoader", "ReaderState", "SettingsService"]
