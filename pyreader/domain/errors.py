from __future__ import annotations

from pathlib import Path


class ReaderError(Exception):
    """Base class for reader domain errors."""


class LoadError(ReaderError):
    """A document could not be read or decoded."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class JumpInputError(ReaderError, ValueError):
    """Jump dialog input is not a line number of the current document."""
