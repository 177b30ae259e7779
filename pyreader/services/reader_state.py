from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from pyreader.domain import transitions
from pyreader.domain.errors import JumpInputError
from pyreader.domain.interfaces import ISettingsStore
from pyreader.domain.models import Document, ReaderSnapshot, ThemeMode
from pyreader.utils.constants import FONT_SIZE_DEFAULT, SETTINGS_THEME_MODE

logger = logging.getLogger(__name__)


class ReaderState(QObject):
    """
    Observable holder of the reader snapshot.

    Applies the pure transitions from `pyreader.domain.transitions` and owns
    the persistence side effects: one position write per user-driven cursor
    change, one theme write per theme change. Restoring a position on load
    never writes.
    """

    state_changed = pyqtSignal(object)  # ReaderSnapshot

    def __init__(
        self,
        store: ISettingsStore,
        *,
        font_size: float = FONT_SIZE_DEFAULT,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._snapshot = ReaderSnapshot(
            document=Document.placeholder(),
            font_size=transitions.clamp_font_size(font_size),
            theme=ThemeMode.from_name(store.get_string(SETTINGS_THEME_MODE)),
        )

    @property
    def snapshot(self) -> ReaderSnapshot:
        return self._snapshot

    @property
    def cursor(self) -> int:
        return self._snapshot.cursor

    @property
    def document(self) -> Document:
        return self._snapshot.document

    def _apply(self, new: ReaderSnapshot) -> bool:
        if new == self._snapshot:
            return False
        self._snapshot = new
        self.state_changed.emit(new)
        return True

    def _persist_position(self) -> None:
        key = self._snapshot.document.key
        if key is None:
            return
        self._store.set_int(key, self._snapshot.cursor)

    # ----------------------------- document -----------------------------

    def open_document(self, document: Document) -> None:
        restored = self._store.get_int(document.key) if document.key is not None else None
        new = transitions.open_document(self._snapshot, document, restored)
        logger.debug("Opened %s at line %d (stored %s)", document.key, new.cursor, restored)
        self._snapshot = new
        # Always notify: re-opening an identical document must still re-render.
        self.state_changed.emit(new)

    def open_failed(self, error_document: Document) -> None:
        self._snapshot = transitions.open_document(self._snapshot, error_document, None)
        self.state_changed.emit(self._snapshot)

    # ----------------------------- navigation -----------------------------

    def move_to(self, index: int) -> bool:
        """Move the cursor; returns True when it actually moved (and was persisted)."""
        if not self._apply(transitions.move_to(self._snapshot, index)):
            return False
        self._persist_position()
        return True

    def step_forward(self) -> bool:
        return self.move_to(self._snapshot.cursor + 1)

    def step_backward(self) -> bool:
        return self.move_to(self._snapshot.cursor - 1)

    # ----------------------------- appearance -----------------------------

    def set_theme(self, mode: ThemeMode) -> None:
        self._apply(transitions.set_theme(self._snapshot, mode))
        self._store.set_string(SETTINGS_THEME_MODE, mode.name)

    def cycle_theme(self) -> ThemeMode:
        mode = self._snapshot.theme.next()
        self.set_theme(mode)
        return mode

    def set_font_size(self, value: float) -> None:
        self._apply(transitions.set_font_size(self._snapshot, value))

    # ----------------------------- jump dialog -----------------------------

    def open_jump_dialog(self) -> None:
        self._apply(transitions.open_dialog(self._snapshot))

    def close_jump_dialog(self) -> None:
        self._apply(transitions.close_dialog(self._snapshot))

    def set_jump_input(self, text: str) -> None:
        self._apply(transitions.set_dialog_input(self._snapshot, text))

    def request_jump(self, text: str | None = None) -> bool:
        """
        Jump to a 1-based line number (defaults to the dialog's input text).
        Invalid input changes nothing and leaves the dialog open.
        """
        if text is None:
            text = self._snapshot.dialog.input_text
        try:
            new = transitions.request_jump(self._snapshot, text)
        except JumpInputError as e:
            logger.debug("Jump rejected: %s", e)
            return False
        moved = new.cursor != self._snapshot.cursor
        self._apply(new)
        if moved:
            self._persist_position()
        return True
