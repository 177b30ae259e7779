from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import QAbstractListModel, QModelIndex, Qt
from PyQt6.QtGui import QBrush, QColor


class LinesModel(QAbstractListModel):
    """Read-only list model over the document lines with one highlighted row."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._lines: Sequence[str] = ()
        self._current = 0
        self._highlight = QBrush(QColor(100, 149, 237, 80))

    @property
    def current(self) -> int:
        return self._current

    def set_lines(self, lines: Sequence[str]) -> None:
        self.beginResetModel()
        self._lines = lines
        self._current = 0
        self.endResetModel()

    def set_current(self, row: int) -> None:
        if row == self._current:
            return
        old, self._current = self._current, row
        for r in (old, row):
            if 0 <= r < len(self._lines):
                idx = self.index(r, 0)
                self.dataChanged.emit(idx, idx, [Qt.ItemDataRole.BackgroundRole])

    def set_highlight(self, color: QColor) -> None:
        self._highlight = QBrush(color)
        if 0 <= self._current < len(self._lines):
            idx = self.index(self._current, 0)
            self.dataChanged.emit(idx, idx, [Qt.ItemDataRole.BackgroundRole])

    # ---- QAbstractListModel ----

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._lines)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or not 0 <= index.row() < len(self._lines):
            return None
        if role == Qt.ItemDataRole.DisplayRole:
            return self._lines[index.row()]
        if role == Qt.ItemDataRole.BackgroundRole and index.row() == self._current:
            return self._highlight
        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled
