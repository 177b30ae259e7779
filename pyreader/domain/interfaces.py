from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .models import Document


class ISettingsStore(Protocol):
    """String-keyed persistent map that survives restarts."""

    def get_int(self, key: str) -> int | None: ...
    def set_int(self, key: str, value: int) -> None: ...
    def get_string(self, key: str) -> str | None: ...
    def set_string(self, key: str, value: str) -> None: ...


class IDocumentLoader(Protocol):
    """Read a text file into a Document. Raises LoadError on failure."""

    def load(self, path: Path) -> Document: ...
    def error_document(self, error: Exception) -> Document: ...


class IConfigService(Protocol):
    """Read-only application configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def get_float(
        self, section: str, key: str, default: float | None = None
    ) -> float | None: ...
