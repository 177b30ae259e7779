"""
Pure reader state transitions.

Every function takes a ReaderSnapshot and returns a new one; none of them
touch persistence. ReaderState applies them and performs the side effects.
"""

from __future__ import annotations

import re
from dataclasses import replace

from pyreader.utils.constants import FONT_SIZE_MAX, FONT_SIZE_MIN

from .errors import JumpInputError
from .models import DialogState, Document, ReaderSnapshot, ThemeMode

_LINE_NUMBER_RE = re.compile(r"\s*([+-]?\d+)\s*")


def clamp_cursor(index: int, line_count: int) -> int:
    if line_count <= 0:
        return 0
    return max(0, min(int(index), line_count - 1))


def clamp_font_size(value: float) -> float:
    return max(FONT_SIZE_MIN, min(float(value), FONT_SIZE_MAX))


def open_document(
    state: ReaderSnapshot, document: Document, restored: int | None = None
) -> ReaderSnapshot:
    """Replace the document; the cursor comes from `restored` (clamped) or 0."""
    cursor = clamp_cursor(restored if restored is not None else 0, len(document))
    return replace(state, document=document, cursor=cursor)


def move_to(state: ReaderSnapshot, index: int) -> ReaderSnapshot:
    if state.line_count == 0:
        return state
    cursor = clamp_cursor(index, state.line_count)
    if cursor == state.cursor:
        return state
    return replace(state, cursor=cursor)


def step_forward(state: ReaderSnapshot) -> ReaderSnapshot:
    return move_to(state, state.cursor + 1)


def step_backward(state: ReaderSnapshot) -> ReaderSnapshot:
    return move_to(state, state.cursor - 1)


def set_theme(state: ReaderSnapshot, mode: ThemeMode) -> ReaderSnapshot:
    return state if state.theme is mode else replace(state, theme=mode)


def set_font_size(state: ReaderSnapshot, value: float) -> ReaderSnapshot:
    size = clamp_font_size(value)
    return state if size == state.font_size else replace(state, font_size=size)


def open_dialog(state: ReaderSnapshot) -> ReaderSnapshot:
    return replace(state, dialog=DialogState(visible=True, input_text=""))


def close_dialog(state: ReaderSnapshot) -> ReaderSnapshot:
    return replace(state, dialog=DialogState(visible=False, input_text=""))


def set_dialog_input(state: ReaderSnapshot, text: str) -> ReaderSnapshot:
    if state.dialog.input_text == text:
        return state
    return replace(state, dialog=replace(state.dialog, input_text=text))


def parse_line_number(text: str, line_count: int) -> int:
    """
    Parse a 1-based line number and return the 0-based line index.

    Raises JumpInputError when the text is not an integer or is outside
    [1, line_count].
    """
    m = _LINE_NUMBER_RE.fullmatch(text or "")
    if not m:
        raise JumpInputError(f"Not a line number: {text!r}")
    number = int(m.group(1))
    if not 1 <= number <= line_count:
        raise JumpInputError(f"Line {number} is outside 1..{line_count}")
    return number - 1


def request_jump(state: ReaderSnapshot, text: str) -> ReaderSnapshot:
    """Move to the requested line and close the dialog, or raise JumpInputError."""
    index = parse_line_number(text, state.line_count)
    return close_dialog(move_to(state, index))
