from __future__ import annotations

import random
from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings

from pyreader.domain.models import Document, ThemeMode
from pyreader.services.file_service import DocumentLoader
from pyreader.services.reader_state import ReaderState
from pyreader.services.settings_service import SettingsService
from pyreader.utils.constants import SETTINGS_THEME_MODE

KEY = "file:///books/a.txt"


def _doc(n: int, key: str | None = KEY) -> Document:
    return Document(key=key, lines=tuple(f"line {i}" for i in range(n)))


@pytest.mark.parametrize("n", [0, 1, 2, 7, 50])
def test_cursor_stays_in_range_for_any_move_sequence(state: ReaderState, n: int):
    rnd = random.Random(n)
    state.open_document(_doc(n))
    for _ in range(300):
        op = rnd.choice(("fwd", "back", "move"))
        if op == "fwd":
            state.step_forward()
        elif op == "back":
            state.step_backward()
        else:
            state.move_to(rnd.randint(-10, n + 10))
        assert 0 <= state.cursor <= max(0, n - 1)


def test_step_boundaries_are_noops(state: ReaderState, memory_store):
    state.open_document(_doc(3))
    assert state.step_backward() is False
    assert state.cursor == 0
    state.move_to(2)
    writes = len(memory_store.writes)
    assert state.step_forward() is False
    assert state.cursor == 2
    assert len(memory_store.writes) == writes


def test_each_cursor_move_writes_exactly_once(state: ReaderState, memory_store):
    state.open_document(_doc(10))
    assert memory_store.writes == []  # restoring never writes
    state.step_forward()
    state.move_to(5)
    state.step_backward()
    assert memory_store.writes == [(KEY, 1), (KEY, 5), (KEY, 4)]


def test_restore_position_and_clamp_shorter_document(memory_store):
    memory_store.data[KEY] = 42
    state = ReaderState(memory_store)
    state.open_document(_doc(100))
    assert state.cursor == 42
    state.open_document(_doc(10))
    assert state.cursor == 9
    assert memory_store.writes == []


def test_open_unknown_document_starts_at_zero(state: ReaderState):
    state.open_document(_doc(5, key="file:///other.txt"))
    assert state.cursor == 0


def test_document_without_key_never_persists(state: ReaderState, memory_store):
    state.open_document(_doc(5, key=None))
    state.move_to(3)
    assert state.cursor == 3
    assert memory_store.writes == []


def test_move_on_empty_document_is_noop(state: ReaderState, memory_store):
    state.open_document(_doc(0))
    assert state.move_to(3) is False
    assert state.cursor == 0
    assert memory_store.writes == []


def test_state_changed_emitted_with_snapshot(state: ReaderState):
    seen = []
    state.state_changed.connect(seen.append)
    state.open_document(_doc(4))
    state.step_forward()
    state.step_backward()
    state.step_backward()  # boundary: no emission
    assert [s.cursor for s in seen] == [0, 1, 0]


def test_font_size_clamped_and_not_persisted(state: ReaderState, memory_store):
    state.set_font_size(100)
    assert state.snapshot.font_size == 35
    state.set_font_size(1)
    assert state.snapshot.font_size == 12
    assert memory_store.writes == []


def test_initial_font_size_is_clamped(memory_store):
    assert ReaderState(memory_store, font_size=3).snapshot.font_size == 12


def test_theme_is_persisted_immediately(state: ReaderState, memory_store):
    state.set_theme(ThemeMode.DARK)
    assert state.snapshot.theme is ThemeMode.DARK
    assert memory_store.writes == [(SETTINGS_THEME_MODE, "DARK")]


def test_cycle_theme(state: ReaderState):
    assert state.cycle_theme() is ThemeMode.LIGHT
    assert state.cycle_theme() is ThemeMode.DARK
    assert state.cycle_theme() is ThemeMode.SYSTEM


def test_theme_survives_restart(tmp_path: Path):
    path = str(tmp_path / "reader.ini")
    first = ReaderState(SettingsService(QSettings(path, QSettings.Format.IniFormat)))
    first.set_theme(ThemeMode.DARK)

    restarted = ReaderState(SettingsService(QSettings(path, QSettings.Format.IniFormat)))
    assert restarted.snapshot.theme is ThemeMode.DARK


def test_position_survives_restart(tmp_path: Path, text_file):
    path = str(tmp_path / "reader.ini")
    book = text_file(20)
    loader = DocumentLoader()

    first = ReaderState(SettingsService(QSettings(path, QSettings.Format.IniFormat)))
    first.open_document(loader.load(book))
    first.move_to(12)

    restarted = ReaderState(SettingsService(QSettings(path, QSettings.Format.IniFormat)))
    restarted.open_document(loader.load(book))
    assert restarted.cursor == 12


# ------------------------------
# Jump dialog
# ------------------------------


@pytest.mark.parametrize("text", ["0", "abc", "4", "", "-2"])
def test_invalid_jump_leaves_everything_unchanged(state: ReaderState, memory_store, text):
    state.open_document(_doc(3))
    state.move_to(1)
    state.open_jump_dialog()
    state.set_jump_input(text)
    before = state.snapshot
    writes = list(memory_store.writes)

    assert state.request_jump() is False
    assert state.snapshot == before
    assert state.snapshot.dialog.visible is True
    assert memory_store.writes == writes


def test_jump_to_first_line_closes_dialog(state: ReaderState, memory_store):
    state.open_document(_doc(3))
    state.move_to(2)
    state.open_jump_dialog()
    assert state.request_jump("1") is True
    assert state.cursor == 0
    assert state.snapshot.dialog.visible is False
    assert memory_store.writes[-1] == (KEY, 0)


def test_jump_uses_dialog_input_by_default(state: ReaderState):
    state.open_document(_doc(30))
    state.open_jump_dialog()
    state.set_jump_input("25")
    assert state.request_jump() is True
    assert state.cursor == 24


def test_jump_to_current_line_does_not_write(state: ReaderState, memory_store):
    state.open_document(_doc(5))
    state.open_jump_dialog()
    assert state.request_jump("1") is True
    assert state.snapshot.dialog.visible is False
    assert memory_store.writes == []


def test_dialog_open_and_close_reset_input(state: ReaderState):
    state.open_jump_dialog()
    state.set_jump_input("9")
    state.close_jump_dialog()
    assert state.snapshot.dialog.visible is False
    assert state.snapshot.dialog.input_text == ""
    state.open_jump_dialog()
    assert state.snapshot.dialog.input_text == ""


# ------------------------------
# Load failures
# ------------------------------


def test_decode_failure_yields_single_diagnostic_line(tmp_path: Path, state: ReaderState, loader):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"ok\n\xff\xfe\xfa broken\n")
    state.open_document(_doc(10))
    state.move_to(5)

    with pytest.raises(Exception) as exc:
        loader.load(bad)
    state.open_failed(loader.error_document(exc.value))

    assert len(state.document.lines) == 1
    assert state.document.lines[0].strip() != ""
    assert state.cursor == 0
