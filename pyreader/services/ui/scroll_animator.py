from __future__ import annotations

from typing import Protocol

from PyQt6.QtCore import QEasingCurve, QObject, QVariantAnimation

from pyreader.utils.constants import SCROLL_ANIMATION_MS


class ScrollTarget(Protocol):
    """Anything with an integer scroll value (QScrollBar in practice)."""

    def value(self) -> int: ...
    def setValue(self, value: int) -> None: ...
    def minimum(self) -> int: ...
    def maximum(self) -> int: ...


class ScrollAnimator(QObject):
    """
    Animates a scroll bar to a target value.

    Only one animation exists at a time: starting a new one, or jumping,
    stops the running animation first, so the latest request always wins.
    """

    def __init__(
        self,
        target: ScrollTarget,
        *,
        duration_ms: int = SCROLL_ANIMATION_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._target = target
        self._duration_ms = duration_ms
        self._current: QVariantAnimation | None = None

    @property
    def is_running(self) -> bool:
        return (
            self._current is not None
            and self._current.state() == QVariantAnimation.State.Running
        )

    @property
    def current(self) -> QVariantAnimation | None:
        return self._current

    def _clamp(self, value: int) -> int:
        return max(self._target.minimum(), min(int(value), self._target.maximum()))

    def cancel(self) -> None:
        anim = self._current
        self._current = None
        if anim is not None:
            anim.stop()
            anim.deleteLater()

    def jump_to(self, value: int) -> None:
        self.cancel()
        self._target.setValue(self._clamp(value))

    def animate_to(self, value: int) -> QVariantAnimation | None:
        """Start animating towards `value`; returns the animation handle."""
        self.cancel()
        end = self._clamp(value)
        start = self._target.value()
        if start == end or self._duration_ms <= 0:
            self._target.setValue(end)
            return None

        anim = QVariantAnimation(self)
        anim.setStartValue(start)
        anim.setEndValue(end)
        anim.setDuration(self._duration_ms)
        anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        anim.valueChanged.connect(lambda v, a=anim: self._on_frame(a, v))
        anim.finished.connect(lambda a=anim: self._on_finished(a))
        self._current = anim
        anim.start()
        return anim

    def _on_frame(self, anim: QVariantAnimation, value) -> None:
        # Frames from a superseded animation are dropped.
        if anim is self._current:
            self._target.setValue(int(value))

    def _on_finished(self, anim: QVariantAnimation) -> None:
        if anim is self._current:
            self._target.setValue(int(anim.endValue()))
            self._current = None
            anim.deleteLater()
