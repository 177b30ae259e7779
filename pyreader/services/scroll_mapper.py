"""
Pure geometry for the reader scrollbar.

Maps pointer positions to line indices and the list's scroll state back to a
handle offset. No Qt types here; the widgets feed plain numbers in.
"""

from __future__ import annotations

import math
from enum import Enum

from pyreader.utils.constants import SCROLL_CONTEXT_LINES

# Fraction of the text area at the top/bottom that acts as a previous/next zone
TAP_ZONE_FRACTION = 0.25


class TapZone(Enum):
    PREVIOUS = "previous"
    LINE = "line"
    NEXT = "next"


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def relative_y(pointer_y: float, viewport_height: float) -> float:
    if viewport_height <= 0:
        return 0.0
    return _clamp(pointer_y / viewport_height, 0.0, 1.0)


def position_to_index(relative_y: float, line_count: int) -> int:
    if line_count <= 0:
        return 0
    rel = _clamp(relative_y, 0.0, 1.0)
    return int(_clamp(math.floor(rel * line_count), 0, line_count - 1))


def index_to_handle_offset(
    first_visible_index: int,
    first_visible_item_pixel_offset: float,
    approx_item_pixel_height: float,
    line_count: int,
    viewport_pixel_height: float,
    handle_pixel_height: float,
) -> float:
    if line_count <= 0 or approx_item_pixel_height <= 0:
        return 0.0
    track = max(0.0, viewport_pixel_height - handle_pixel_height)
    fraction = (
        first_visible_index + first_visible_item_pixel_offset / approx_item_pixel_height
    ) / line_count
    return _clamp(fraction * track, 0.0, track)


def handle_height(
    viewport_pixel_height: float,
    visible_count: int,
    line_count: int,
    min_height: float = 24.0,
) -> float:
    """Handle length proportional to the visible share of the document."""
    if viewport_pixel_height <= 0:
        return 0.0
    if line_count <= 0:
        return viewport_pixel_height
    ratio = _clamp(visible_count / line_count, 0.0, 1.0)
    return _clamp(viewport_pixel_height * ratio, min(min_height, viewport_pixel_height), viewport_pixel_height)


def scroll_anchor(cursor: int, context: int = SCROLL_CONTEXT_LINES) -> int:
    """Row to bring to the top so `context` lines stay visible above the cursor."""
    return max(cursor - context, 0)


def classify_tap(relative_y: float) -> TapZone:
    rel = _clamp(relative_y, 0.0, 1.0)
    if rel < TAP_ZONE_FRACTION:
        return TapZone.PREVIOUS
    if rel > 1.0 - TAP_ZONE_FRACTION:
        return TapZone.NEXT
    return TapZone.LINE
