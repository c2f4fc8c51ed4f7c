"""QPainter-backed draw primitives for the debug overlay."""

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen


class PainterCanvas:

    def __init__(self, painter: QPainter):
        self._painter = painter

    def _pen(self, color: QColor, width: float) -> QPen:
        pen = QPen(color, width)
        pen.setCosmetic(True)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        return pen

    def draw_line(self, start: QPointF, end: QPointF, color: QColor, width: float):
        self._painter.setPen(self._pen(color, width))
        self._painter.drawLine(start, end)

    def draw_circle(self, center: QPointF, radius: float, color: QColor, filled: bool):
        self._painter.setPen(self._pen(color, 1.5))
        if filled:
            self._painter.setBrush(color)
        else:
            self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawEllipse(center, radius, radius)

    def draw_rect(self, rect: QRectF, color: QColor, width: float):
        self._painter.setPen(self._pen(color, width))
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawRect(rect)
