from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)


class JumpDialog(QDialog):
    """
    Go-to-line dialog. It only reports intents; whether it closes is decided
    by the reader state (invalid numbers keep it open, without a message).
    """

    jump_requested = pyqtSignal(str)
    input_changed = pyqtSignal(str)
    cancelled = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Go to Line")
        self.setModal(True)

        # Widgets
        self.prompt = QLabel("Line number:")
        self.line_edit = QLineEdit()
        self.ok_btn = QPushButton("Go")
        self.ok_btn.setDefault(True)
        self.cancel_btn = QPushButton("Cancel")

        # Layouts
        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.ok_btn)
        buttons.addWidget(self.cancel_btn)

        root = QVBoxLayout(self)
        root.addWidget(self.prompt)
        root.addWidget(self.line_edit)
        root.addLayout(buttons)

        # Signals
        self.ok_btn.clicked.connect(self._submit)
        self.line_edit.textChanged.connect(self.input_changed)
        self.cancel_btn.clicked.connect(self.reject)

    def prepare(self, line_count: int) -> None:
        self.prompt.setText(f"Line number (1 - {line_count}):")
        self.set_text("")

    def set_text(self, text: str) -> None:
        if self.line_edit.text() == text:
            return
        self.line_edit.blockSignals(True)
        self.line_edit.setText(text)
        self.line_edit.blockSignals(False)

    def _submit(self) -> None:
        self.jump_requested.emit(self.line_edit.text())

    def reject(self) -> None:
        # Esc, Cancel and the close button all end up here.
        super().reject()
        self.cancelled.emit()
