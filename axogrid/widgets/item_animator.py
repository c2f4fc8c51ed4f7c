"""Fire-and-forget position transitions for grid children."""

from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QObject, QPointF, QPropertyAnimation
from PySide6.QtWidgets import QGraphicsWidget


class PropertyItemAnimator(QObject):
    """One `pos` animation per widget; a new request replaces the running one."""

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self.easing = QEasingCurve.Type.OutCubic
        self._animations: dict[QGraphicsWidget, QPropertyAnimation] = {}

    def move_item(self, item, target: QPointF, duration: float):
        widget = item.widget
        running = self._animations.pop(widget, None)
        if running is not None:
            running.stop()
            running.deleteLater()

        if duration <= 0.0 or widget.pos() == target:
            widget.setPos(target)
            return

        animation = QPropertyAnimation(widget, b"pos", self)
        animation.setDuration(int(duration * 1000))
        animation.setStartValue(widget.pos())
        animation.setEndValue(QPointF(target))
        animation.setEasingCurve(self.easing)
        animation.finished.connect(lambda: self._on_finished(widget, animation))
        self._animations[widget] = animation
        animation.start()

    def scale_item(self, item, scale: float):
        # Scale around the visual centre; Qt keeps the origin for rendering.
        widget = item.widget
        widget.setTransformOriginPoint(widget.boundingRect().center())
        widget.setScale(scale)

    def is_animating(self, widget: QGraphicsWidget) -> bool:
        return widget in self._animations

    def stop_all(self):
        for animation in self._animations.values():
            animation.stop()
            animation.deleteLater()
        self._animations.clear()

    def _on_finished(self, widget: QGraphicsWidget, animation: QPropertyAnimation):
        if self._animations.get(widget) is animation:
            del self._animations[widget]
        animation.deleteLater()
