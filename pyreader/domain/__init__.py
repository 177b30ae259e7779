"""Domain layer: interfaces, errors, models and pure state transitions."""

from .errors import JumpInputError, LoadError, ReaderError
from .interfaces import IConfigService, IDocumentLoader, ISettingsStore
from .models import DialogState, Document, ReaderSnapshot, ThemeMode

__all__ = [
    "ISettingsStore",
    "IDocumentLoader",
    "IConfigService",
    "ReaderError",
    "LoadError",
    "JumpInputError",
    "DialogState",
    "Document",
    "ReaderSnapshot",
    "ThemeMode",
]
