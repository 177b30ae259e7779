from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from pyreader.domain.errors import LoadError
from pyreader.domain.interfaces import IDocumentLoader
from pyreader.domain.models import ThemeMode
from pyreader.services import scroll_mapper
from pyreader.services.reader_state import ReaderState
from pyreader.services.scroll_mapper import TapZone
from pyreader.services.ui.ports.dialogs import IFileDialogService
from pyreader.utils.constants import OPEN_FILTER

logger = logging.getLogger(__name__)


@runtime_checkable
class IReaderView(Protocol):
    """Passive view surface (implemented by the Qt MainWindow)."""

    def scroll_to_line(self, row: int, *, animated: bool) -> None: ...
    def show_status(self, text: str, msec: int = 3000) -> None: ...


class ReaderPresenter:
    """
    Turns view intents into ReaderState transitions and tells the view how
    to scroll afterwards: animated for taps, buttons and jumps, immediate
    for scrollbar drags and document restores.
    """

    def __init__(
        self,
        view: IReaderView,
        state: ReaderState,
        loader: IDocumentLoader,
        dialogs: IFileDialogService,
    ) -> None:
        self.view = view
        self.state = state
        self.loader = loader
        self.dialogs = dialogs
        self._last_dir: str | None = None

    # ---------- documents ----------
    def open_via_dialog(self) -> bool:
        path = self.dialogs.get_open_file(self.view, "Open Text File", self._last_dir, OPEN_FILTER)
        if path is None:
            return False
        return self.open_path(path)

    def open_path(self, path: Path) -> bool:
        path = Path(path)
        self._last_dir = str(path.parent)
        try:
            document = self.loader.load(path)
        except LoadError as e:
            logger.warning("Failed to open %s: %s", path, e.message)
            self.state.open_failed(self.loader.error_document(e))
            self.view.scroll_to_line(0, animated=False)
            return False
        self.state.open_document(document)
        self._reveal_cursor(animated=False)
        self.view.show_status(f"Opened: {path}", 3000)
        return True

    # ---------- navigation ----------
    def _reveal_cursor(self, *, animated: bool) -> None:
        self.view.scroll_to_line(scroll_mapper.scroll_anchor(self.state.cursor), animated=animated)

    def step_forward(self) -> None:
        if self.state.step_forward():
            self._reveal_cursor(animated=True)

    def step_backward(self) -> None:
        if self.state.step_backward():
            self._reveal_cursor(animated=True)

    def move_to(self, index: int, *, animated: bool = True) -> None:
        self.state.move_to(index)
        self._reveal_cursor(animated=animated)

    def tap(self, zone: TapZone, row: int | None = None) -> None:
        """Tap on the text area: top zone goes back, bottom zone forward, middle selects."""
        if zone is TapZone.PREVIOUS:
            self.step_backward()
        elif zone is TapZone.NEXT:
            self.step_forward()
        elif row is not None and row >= 0:
            # The tapped line is already on screen; no scroll.
            self.state.move_to(row)

    def drag_scrollbar(self, index: int) -> None:
        self.move_to(index, animated=False)

    def tap_scrollbar(self, index: int) -> None:
        self.move_to(index, animated=True)

    # ---------- appearance ----------
    def cycle_theme(self) -> ThemeMode:
        return self.state.cycle_theme()

    def set_theme(self, mode: ThemeMode) -> None:
        self.state.set_theme(mode)

    def set_font_size(self, value: float) -> None:
        self.state.set_font_size(value)

    def change_font_size(self, delta: float) -> None:
        self.state.set_font_size(self.state.snapshot.font_size + delta)

    # ---------- jump dialog ----------
    def open_jump_dialog(self) -> None:
        self.state.open_jump_dialog()

    def close_jump_dialog(self) -> None:
        self.state.close_jump_dialog()

    def set_jump_input(self, text: str) -> None:
        self.state.set_jump_input(text)

    def request_jump(self, text: str | None = None) -> bool:
        if text is not None:
            self.state.set_jump_input(text)
        if not self.state.request_jump():
            return False
        self._reveal_cursor(animated=True)
        return True
