from __future__ import annotations

from .dialogs import IFileDialogService

__all__ = [
    "IFileDialogService",
]
