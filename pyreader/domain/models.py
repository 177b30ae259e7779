from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pyreader.utils.constants import FONT_SIZE_DEFAULT, PLACEHOLDER_TEXT


class ThemeMode(Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_name(cls, name: str | None) -> ThemeMode:
        """Parse a persisted member name; unknown or missing names mean SYSTEM."""
        if not name:
            return cls.SYSTEM
        try:
            return cls[name.strip().upper()]
        except KeyError:
            return cls.SYSTEM

    def next(self) -> ThemeMode:
        order = (ThemeMode.SYSTEM, ThemeMode.LIGHT, ThemeMode.DARK)
        return order[(order.index(self) + 1) % len(order)]


@dataclass(frozen=True)
class Document:
    """
    Loaded text as an ordered, immutable sequence of lines.

    `key` is the document identity used for reading positions (the file URI).
    Documents without a key (placeholder, load errors) never persist positions.
    """

    key: str | None
    lines: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def last_index(self) -> int:
        return max(0, len(self.lines) - 1)

    @classmethod
    def placeholder(cls, text: str = PLACEHOLDER_TEXT) -> Document:
        return cls(key=None, lines=(text,))


@dataclass(frozen=True)
class DialogState:
    visible: bool = False
    input_text: str = ""


@dataclass(frozen=True)
class ReaderSnapshot:
    document: Document = field(default_factory=Document.placeholder)
    cursor: int = 0
    font_size: float = FONT_SIZE_DEFAULT
    theme: ThemeMode = ThemeMode.SYSTEM
    dialog: DialogState = field(default_factory=DialogState)

    @property
    def line_count(self) -> int:
        return len(self.document)

    @property
    def position_label(self) -> str:
        return f"{self.cursor + 1} / {self.line_count}"
