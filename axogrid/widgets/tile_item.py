"""Simple labelled tile used to populate the demo grid."""

from PySide6.QtCore import QSizeF, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QGraphicsWidget


class TileItem(QGraphicsWidget):

    def __init__(self, label: str, size: QSizeF, color: QColor, parent=None):
        super().__init__(parent)
        self._label = label
        self._color = QColor(color)
        self.setMinimumSize(size)
        self.resize(size)

    def label(self) -> str:
        return self._label

    def paint(self, painter: QPainter, option, widget=None):
        rect = self.rect().adjusted(1, 1, -1, -1)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(QPen(self._color.darker(160), 1.5))
        painter.setBrush(self._color)
        painter.drawRoundedRect(rect, 6, 6)
        painter.setPen(QColor(255, 255, 255))
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self._label)
