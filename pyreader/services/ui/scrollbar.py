from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QPainter
from PyQt6.QtWidgets import QApplication, QWidget

from pyreader.services import scroll_mapper


class ReaderScrollBar(QWidget):
    """
    Slim scrollbar drawn beside the line list.

    Every pointer move while pressed emits `dragged(index)`; a press and
    release without movement emits `tapped(index)`. The handle geometry is
    pushed in from outside via `set_handle()`.
    """

    dragged = pyqtSignal(int)
    tapped = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedWidth(14)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._line_count = 0
        self._handle_offset = 0.0
        self._handle_height = 0.0
        self._press_y: float | None = None
        self._dragging = False

    # ---------- state ----------
    @property
    def line_count(self) -> int:
        return self._line_count

    def set_line_count(self, count: int) -> None:
        self._line_count = max(0, int(count))
        self.update()

    @property
    def handle_offset(self) -> float:
        return self._handle_offset

    @property
    def handle_height(self) -> float:
        return self._handle_height

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    def set_handle(self, offset: float, height: float) -> None:
        if (offset, height) == (self._handle_offset, self._handle_height):
            return
        self._handle_offset = offset
        self._handle_height = height
        self.update()

    def index_at(self, y: float) -> int:
        return scroll_mapper.position_to_index(
            scroll_mapper.relative_y(y, self.height()), self._line_count
        )

    # ---------- mouse ----------
    def mousePressEvent(self, e):
        if e.button() != Qt.MouseButton.LeftButton or self._line_count == 0:
            super().mousePressEvent(e)
            return
        self._press_y = e.position().y()
        self._dragging = False
        e.accept()

    def mouseMoveEvent(self, e):
        if self._press_y is None:
            super().mouseMoveEvent(e)
            return
        y = e.position().y()
        if not self._dragging and abs(y - self._press_y) < QApplication.startDragDistance():
            return
        self._dragging = True
        self.dragged.emit(self.index_at(y))
        e.accept()

    def mouseReleaseEvent(self, e):
        if self._press_y is None:
            super().mouseReleaseEvent(e)
            return
        if not self._dragging:
            self.tapped.emit(self.index_at(e.position().y()))
        self._press_y = None
        self._dragging = False
        e.accept()

    # ---------- painting ----------
    def paintEvent(self, _e):
        if self._line_count == 0 or self._handle_height <= 0:
            return
        color = QColor(self.palette().highlight().color())
        color.setAlphaF(0.8 if self._dragging else 0.5)
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(color)
        w = self.width()
        p.drawRoundedRect(QRectF(w - 8, self._handle_offset, 5, self._handle_height), 2.5, 2.5)
        p.end()
