from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QEvent, QPoint, Qt, QUrl
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QListView,
    QMainWindow,
    QPushButton,
    QSlider,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from pyreader.domain.models import Document, ReaderSnapshot, ThemeMode
from pyreader.services import scroll_mapper
from pyreader.services.reader_state import ReaderState
from pyreader.services.ui.jump_dialog import JumpDialog
from pyreader.services.ui.lines_model import LinesModel
from pyreader.services.ui.scroll_animator import ScrollAnimator
from pyreader.services.ui.scrollbar import ReaderScrollBar
from pyreader.services.ui.theme import THEME_ICONS, ThemeApplier
from pyreader.utils.constants import APP_NAME, FONT_SIZE_MAX, FONT_SIZE_MIN


class MainWindow(QMainWindow):
    """Thin PyQt window: renders ReaderState snapshots and forwards intents to the presenter."""

    def __init__(
        self,
        state: ReaderState,
        *,
        theme: ThemeApplier | None = None,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(480, 800)

        self.app_title = app_title
        self.state = state
        self.presenter = None
        self.theme = theme or ThemeApplier()

        self._rendered: ReaderSnapshot | None = None
        self._press_pos: QPoint | None = None

        # Widgets
        self._build_top_bar()
        self._build_reader()
        self._build_bottom_bar()

        central = QWidget(self)
        root = QVBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 0)
        root.addWidget(self.top_bar)
        root.addWidget(self.reader_area, 1)
        root.addWidget(self.bottom_bar)
        self.setCentralWidget(central)
        self.setStatusBar(QStatusBar(self))

        self.jump_dialog = JumpDialog(self)
        self.animator = ScrollAnimator(self.list_view.verticalScrollBar(), parent=self)

        # UI
        self._build_actions()
        self._build_menu()

        # Signals
        self.state.state_changed.connect(self.render)
        bar = self.list_view.verticalScrollBar()
        bar.valueChanged.connect(self._update_scroll_handle)
        bar.rangeChanged.connect(self._update_scroll_handle)
        self.list_view.viewport().installEventFilter(self)

        self.render(self.state.snapshot)

        # DnD
        self.setAcceptDrops(True)

    # ---------- UI creation ----------
    def _build_top_bar(self) -> None:
        self.top_bar = QFrame(self)
        self.top_bar.setFrameShape(QFrame.Shape.StyledPanel)

        self.open_btn = QPushButton("Open…", self.top_bar)
        self.theme_btn = QPushButton(self.top_bar)
        self.theme_btn.setFlat(True)
        self.theme_btn.setToolTip("Theme: system / light / dark")

        self.font_slider = QSlider(Qt.Orientation.Horizontal, self.top_bar)
        self.font_slider.setRange(int(FONT_SIZE_MIN), int(FONT_SIZE_MAX))
        self.font_slider.setToolTip("Font size")

        row = QHBoxLayout()
        row.addWidget(self.open_btn)
        row.addStretch(1)
        row.addWidget(self.theme_btn)

        col = QVBoxLayout(self.top_bar)
        col.addLayout(row)
        col.addWidget(self.font_slider)

        self.open_btn.clicked.connect(lambda: self._call("open_via_dialog"))
        self.theme_btn.clicked.connect(lambda: self._call("cycle_theme"))
        self.font_slider.valueChanged.connect(lambda v: self._call("set_font_size", float(v)))

    def _build_reader(self) -> None:
        self.reader_area = QWidget(self)

        self.model = LinesModel(self)
        self.list_view = QListView(self.reader_area)
        self.list_view.setModel(self.model)
        self.list_view.setFrameShape(QFrame.Shape.NoFrame)
        self.list_view.setWordWrap(True)
        self.list_view.setUniformItemSizes(False)
        self.list_view.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.list_view.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.list_view.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.list_view.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.list_view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        # Arrow keys belong to the window actions, not to the view's own current index.
        self.list_view.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        self.scrollbar = ReaderScrollBar(self.reader_area)
        self.scrollbar.dragged.connect(lambda i: self._call("drag_scrollbar", i))
        self.scrollbar.tapped.connect(lambda i: self._call("tap_scrollbar", i))

        lay = QHBoxLayout(self.reader_area)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(0)
        lay.addWidget(self.list_view, 1)
        lay.addWidget(self.scrollbar)

    def _build_bottom_bar(self) -> None:
        self.bottom_bar = QFrame(self)
        self.prev_btn = QPushButton("Previous", self.bottom_bar)
        self.next_btn = QPushButton("Next", self.bottom_bar)
        self.jump_btn = QPushButton("Go to line…", self.bottom_bar)
        self.position_label = QLabel(self.bottom_bar)
        self.position_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        lay = QHBoxLayout(self.bottom_bar)
        lay.addWidget(self.prev_btn)
        lay.addWidget(self.position_label, 1)
        lay.addWidget(self.next_btn)
        lay.addWidget(self.jump_btn)

        self.prev_btn.clicked.connect(lambda: self._call("step_backward"))
        self.next_btn.clicked.connect(lambda: self._call("step_forward"))
        self.jump_btn.clicked.connect(lambda: self._call("open_jump_dialog"))

    def _build_actions(self) -> None:
        self.act_open = QAction(
            "Open…", self, shortcut=QKeySequence.StandardKey.Open,
            triggered=lambda: self._call("open_via_dialog"),
        )
        self.act_quit = QAction(
            "Quit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )

        self.act_prev = QAction("Previous Line", self, triggered=lambda: self._call("step_backward"))
        self.act_prev.setShortcuts([QKeySequence(Qt.Key.Key_Up), QKeySequence(Qt.Key.Key_PageUp)])
        self.act_next = QAction("Next Line", self, triggered=lambda: self._call("step_forward"))
        self.act_next.setShortcuts(
            [QKeySequence(Qt.Key.Key_Down), QKeySequence(Qt.Key.Key_PageDown)]
        )
        self.act_jump = QAction(
            "Go to Line…", self, shortcut="Ctrl+G",
            triggered=lambda: self._call("open_jump_dialog"),
        )

        self.act_font_up = QAction(
            "Larger Text", self, shortcut=QKeySequence.StandardKey.ZoomIn,
            triggered=lambda: self._call("change_font_size", 1.0),
        )
        self.act_font_down = QAction(
            "Smaller Text", self, shortcut=QKeySequence.StandardKey.ZoomOut,
            triggered=lambda: self._call("change_font_size", -1.0),
        )

        self.theme_actions: dict[ThemeMode, QAction] = {}
        for mode in ThemeMode:
            self.theme_actions[mode] = QAction(
                f"{THEME_ICONS[mode]} {mode.name.title()}",
                self,
                checkable=True,
                triggered=lambda chk=False, m=mode: self._call("set_theme", m),
            )

        for a in (self.act_prev, self.act_next, self.act_jump, self.act_font_up, self.act_font_down):
            self.addAction(a)

    def _build_menu(self) -> None:
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_open)
        filem.addSeparator()
        filem.addAction(self.act_quit)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_prev)
        viewm.addAction(self.act_next)
        viewm.addAction(self.act_jump)
        viewm.addSeparator()
        viewm.addAction(self.act_font_up)
        viewm.addAction(self.act_font_down)
        viewm.addSeparator()
        for a in self.theme_actions.values():
            viewm.addAction(a)

    # ---------- Presenter wiring ----------
    def attach_presenter(self, presenter) -> None:
        self.presenter = presenter
        self.jump_dialog.jump_requested.connect(presenter.request_jump)
        self.jump_dialog.input_changed.connect(presenter.set_jump_input)
        self.jump_dialog.cancelled.connect(presenter.close_jump_dialog)

    def _call(self, name: str, *args) -> None:
        if self.presenter is not None:
            getattr(self.presenter, name)(*args)

    # ---------- IReaderView ----------
    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    def scroll_to_line(self, row: int, *, animated: bool) -> None:
        if self.model.rowCount() == 0:
            self.animator.jump_to(0)
            return
        index = self.model.index(max(0, min(row, self.model.rowCount() - 1)), 0)
        rect = self.list_view.visualRect(index)
        if not animated or not rect.isValid():
            self.animator.cancel()
            self.list_view.scrollTo(index, QAbstractItemView.ScrollHint.PositionAtTop)
            return
        bar = self.list_view.verticalScrollBar()
        self.animator.animate_to(bar.value() + rect.top())

    # ---------- Rendering ----------
    def render(self, snap: ReaderSnapshot) -> None:
        prev = self._rendered
        self._rendered = snap

        if prev is None or snap.document is not prev.document:
            self.animator.cancel()
            self.model.set_lines(snap.document.lines)
            self.scrollbar.set_line_count(snap.line_count)
            self._update_title(snap.document)
        self.model.set_current(snap.cursor)

        if prev is None or snap.font_size != prev.font_size:
            f = self.list_view.font()
            f.setPointSizeF(snap.font_size)
            self.list_view.setFont(f)
            self.font_slider.blockSignals(True)
            self.font_slider.setValue(round(snap.font_size))
            self.font_slider.blockSignals(False)

        if prev is None or snap.theme is not prev.theme:
            self.theme.apply(snap.theme)
            self.theme_btn.setText(THEME_ICONS[snap.theme])
            for mode, act in self.theme_actions.items():
                act.setChecked(mode is snap.theme)
            highlight = self.theme.palette_for(snap.theme).highlight().color()
            highlight.setAlpha(90)
            self.model.set_highlight(highlight)

        self.position_label.setText(snap.position_label)
        self.prev_btn.setEnabled(snap.cursor > 0)
        self.next_btn.setEnabled(snap.cursor < snap.document.last_index)
        self.jump_btn.setEnabled(snap.line_count > 0)

        self._render_dialog(snap)
        self._update_scroll_handle()

    def _render_dialog(self, snap: ReaderSnapshot) -> None:
        if snap.dialog.visible and not self.jump_dialog.isVisible():
            self.jump_dialog.prepare(snap.line_count)
            self.jump_dialog.open()
        elif not snap.dialog.visible and self.jump_dialog.isVisible():
            self.jump_dialog.accept()
        self.jump_dialog.set_text(snap.dialog.input_text)

    def _update_title(self, doc: Document) -> None:
        if doc.key is None:
            self.setWindowTitle(self.app_title)
            return
        name = QUrl(doc.key).fileName() or doc.key
        self.setWindowTitle(f"{name} — {self.app_title}")

    def _update_scroll_handle(self, *_args) -> None:
        count = self.model.rowCount()
        track = self.scrollbar.height()
        top = self.list_view.indexAt(QPoint(0, 0))
        if count == 0 or not top.isValid():
            self.scrollbar.set_handle(0.0, float(track) if count else 0.0)
            return
        rect = self.list_view.visualRect(top)
        item_h = max(1, rect.height())
        visible = max(1, self.list_view.viewport().height() // item_h)
        handle_h = scroll_mapper.handle_height(track, visible, count)
        offset = scroll_mapper.index_to_handle_offset(
            top.row(), -rect.top(), item_h, count, track, handle_h
        )
        self.scrollbar.set_handle(offset, handle_h)

    # ---------- Tap zones ----------
    def eventFilter(self, obj, event):
        if obj is self.list_view.viewport():
            et = event.type()
            if et == QEvent.Type.MouseButtonPress and event.button() == Qt.MouseButton.LeftButton:
                self._press_pos = event.position().toPoint()
            elif et == QEvent.Type.MouseButtonRelease and self._press_pos is not None:
                pos = event.position().toPoint()
                moved = (pos - self._press_pos).manhattanLength()
                self._press_pos = None
                if moved < QApplication.startDragDistance():
                    self.tap_at(pos)
            elif et == QEvent.Type.Resize:
                self._update_scroll_handle()
        return super().eventFilter(obj, event)

    def tap_at(self, pos: QPoint) -> None:
        rel = scroll_mapper.relative_y(pos.y(), self.list_view.viewport().height())
        row = self.list_view.indexAt(pos).row()
        self._call("tap", scroll_mapper.classify_tap(rel), row)

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        urls = e.mimeData().urls()
        if not urls:
            return
        local = urls[0].toLocalFile()
        if local:
            self._call("open_path", Path(local))
