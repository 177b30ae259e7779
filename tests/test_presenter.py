from __future__ import annotations

from pathlib import Path

import pytest

from pyreader.domain.models import ThemeMode
from pyreader.services.reader_state import ReaderState
from pyreader.services.scroll_mapper import TapZone
from pyreader.services.ui.presenters import IReaderView, ReaderPresenter


class FakeView:
    def __init__(self) -> None:
        self.scrolls: list[tuple[int, bool]] = []
        self.statuses: list[str] = []

    def scroll_to_line(self, row: int, *, animated: bool) -> None:
        self.scrolls.append((row, animated))

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statuses.append(text)


class FakeDialogs:
    def __init__(self, result: Path | None) -> None:
        self.result = result
        self.calls: list[tuple] = []

    def get_open_file(self, parent, caption, start_dir, filter_str):
        self.calls.append((caption, start_dir, filter_str))
        return self.result


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


def make(view, state, loader, picked: Path | None = None) -> ReaderPresenter:
    return ReaderPresenter(view=view, state=state, loader=loader, dialogs=FakeDialogs(picked))


def test_fake_view_satisfies_protocol(view):
    assert isinstance(view, IReaderView)


def test_cancelled_picker_changes_nothing(view, state: ReaderState, loader):
    p = make(view, state, loader, picked=None)
    before = state.snapshot
    assert p.open_via_dialog() is False
    assert state.snapshot == before
    assert view.scrolls == []
    assert p.dialogs.calls[0][2] == "Text (*.txt);;All files (*)"


def test_open_via_dialog_loads_and_restores(view, state, loader, memory_store, text_file):
    book = text_file(40)
    memory_store.data[book.resolve().as_uri()] = 20
    p = make(view, state, loader, picked=book)

    assert p.open_via_dialog() is True
    assert len(state.document) == 40
    assert state.cursor == 20
    # restored position is revealed without animation, three lines of context
    assert view.scrolls == [(17, False)]
    assert memory_store.writes == []
    assert view.statuses and str(book) in view.statuses[-1]


def test_failed_open_shows_diagnostic_document(tmp_path, view, state, loader, memory_store):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfe\x00bad")
    p = make(view, state, loader)

    assert p.open_path(bad) is False
    assert len(state.document.lines) == 1
    assert state.document.lines[0].startswith("Error: ")
    assert state.document.key is None
    assert state.cursor == 0
    assert view.scrolls == [(0, False)]
    assert memory_store.writes == []


def test_steps_animate_only_when_moved(view, state, loader, text_file):
    p = make(view, state, loader)
    p.open_path(text_file(10))
    view.scrolls.clear()

    p.step_backward()  # boundary
    assert view.scrolls == []
    for _ in range(5):
        p.step_forward()
    assert state.cursor == 5
    assert view.scrolls[-1] == (2, True)


def test_scrollbar_drag_jumps_and_tap_animates(view, state, loader, text_file):
    p = make(view, state, loader)
    p.open_path(text_file(100))
    view.scrolls.clear()

    p.drag_scrollbar(50)
    p.drag_scrollbar(60)
    assert state.cursor == 60
    assert view.scrolls == [(47, False), (57, False)]

    p.tap_scrollbar(10)
    assert state.cursor == 10
    assert view.scrolls[-1] == (7, True)


def test_tap_zones(view, state, loader, text_file):
    p = make(view, state, loader)
    p.open_path(text_file(10))
    p.tap(TapZone.NEXT)
    p.tap(TapZone.NEXT)
    assert state.cursor == 2
    p.tap(TapZone.PREVIOUS)
    assert state.cursor == 1
    view.scrolls.clear()
    p.tap(TapZone.LINE, 6)
    assert state.cursor == 6
    assert view.scrolls == []
    p.tap(TapZone.LINE, -1)  # tap below the last line
    assert state.cursor == 6


def test_jump_flow(view, state, loader, text_file):
    p = make(view, state, loader)
    p.open_path(text_file(30))
    p.open_jump_dialog()
    assert state.snapshot.dialog.visible

    assert p.request_jump("31") is False
    assert state.snapshot.dialog.visible
    assert state.snapshot.dialog.input_text == "31"

    assert p.request_jump("12") is True
    assert state.cursor == 11
    assert not state.snapshot.dialog.visible
    assert view.scrolls[-1] == (8, True)


def test_theme_and_font(view, state, loader):
    p = make(view, state, loader)
    assert p.cycle_theme() is ThemeMode.LIGHT
    p.set_theme(ThemeMode.DARK)
    assert state.snapshot.theme is ThemeMode.DARK
    p.set_font_size(20)
    p.change_font_size(1)
    assert state.snapshot.font_size == 21
    p.change_font_size(100)
    assert state.snapshot.font_size == 35
