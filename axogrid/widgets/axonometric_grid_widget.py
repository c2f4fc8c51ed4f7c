"""Graphics container that arranges its child widgets on an axonometric grid."""

from __future__ import annotations

import weakref

from PySide6.QtCore import QCoreApplication, QEvent, QRectF, QSizeF, Qt, Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QGraphicsItem, QGraphicsWidget

from axogrid.layout.axonometric_layout import LayoutResult, compute_layout
from axogrid.layout.debug_overlay import DebugOverlayRenderer
from axogrid.layout.grid_schema import GridParameters
from axogrid.utils.flow_log import log_flow
from axogrid.utils.settings import is_design_time
from axogrid.widgets.item_animator import PropertyItemAnimator
from axogrid.widgets.painter_canvas import PainterCanvas

_STRUCTURE_CHANGES = (
    QGraphicsItem.GraphicsItemChange.ItemChildAddedChange,
    QGraphicsItem.GraphicsItemChange.ItemChildRemovedChange,
)


class GraphicsLayoutItem:
    """Adapts a child QGraphicsWidget to what the layout core reads."""

    __slots__ = ('widget',)

    def __init__(self, widget: QGraphicsWidget):
        self.widget = widget

    def minimum_size(self) -> QSizeF:
        return QSizeF(self.widget.effectiveSizeHint(Qt.SizeHint.MinimumSize))

    def is_visible(self) -> bool:
        # Relative to the container, so hiding the container does not empty the grid.
        return self.widget.isVisibleTo(self.widget.parentItem())


class AxonometricGridWidget(QGraphicsWidget):
    """Lays out child QGraphicsWidgets; other child item types are left alone.

    Every structural change (child added/removed, child visibility) marks
    the layout dirty. Dirty marks are coalesced into one posted
    LayoutRequest, and each request recomputes the whole grid. Managed
    children report this widget as their parent layout item, so a change
    to their size hints makes Qt post the same LayoutRequest.
    """

    layoutApplied = Signal(int)

    def __init__(self, parameters: GridParameters | None = None, parent: QGraphicsItem | None = None):
        super().__init__(parent)
        self._parameters = parameters or GridParameters()
        self._animator = PropertyItemAnimator(self)
        self._result: LayoutResult | None = None
        self._layout_pending = False
        self._watched = weakref.WeakSet()

    def parameters(self) -> GridParameters:
        return self._parameters

    def set_parameters(self, parameters: GridParameters):
        if parameters == self._parameters:
            return
        self.prepareGeometryChange()
        self._parameters = parameters
        self.invalidate_layout()
        self.update()

    def update_parameters(self, **changes):
        self.set_parameters(self._parameters.with_changes(**changes))

    def layout_result(self) -> LayoutResult | None:
        return self._result

    def animator(self) -> PropertyItemAnimator:
        return self._animator

    def managed_widgets(self) -> list[QGraphicsWidget]:
        return [child for child in self.childItems() if isinstance(child, QGraphicsWidget)]

    def invalidate_layout(self):
        if getattr(self, '_layout_pending', True):
            return
        self._layout_pending = True
        QCoreApplication.postEvent(self, QEvent(QEvent.Type.LayoutRequest))

    def relayout(self) -> LayoutResult:
        self._layout_pending = False
        widgets = self.managed_widgets()
        self._watch(widgets)
        try:
            result = compute_layout(
                [GraphicsLayoutItem(widget) for widget in widgets],
                self._parameters,
                animator=self._animator,
            )
        except Exception as e:
            log_flow("GRID_WIDGET", f"Layout pass failed: {e}", level="ERROR")
            raise

        self.prepareGeometryChange()
        self._result = result
        self.setMinimumSize(result.minimum_size)
        self.updateGeometry()
        self.update()
        self.layoutApplied.emit(len(result.placements))
        return result

    def _watch(self, widgets: list[QGraphicsWidget]):
        for widget in widgets:
            widget.setParentLayoutItem(self)
            if widget in self._watched:
                continue
            widget.visibleChanged.connect(self.invalidate_layout)
            self._watched.add(widget)

    def itemChange(self, change, value):
        if change in _STRUCTURE_CHANGES:
            if (change == QGraphicsItem.GraphicsItemChange.ItemChildRemovedChange
                    and isinstance(value, QGraphicsWidget)):
                value.setParentLayoutItem(None)
            self.invalidate_layout()
        return super().itemChange(change, value)

    def event(self, event):
        if event.type() == QEvent.Type.LayoutRequest:
            self.relayout()
        return super().event(event)

    def _overlay_visible(self) -> bool:
        return self._parameters.debug_overlay and self._result is not None and is_design_time()

    def boundingRect(self) -> QRectF:
        rect = super().boundingRect()
        if self._result is not None and self._overlay_visible():
            margin = DebugOverlayRenderer.origin_radius + 2.0
            rect = rect.united(self._result.bounds.adjusted(-margin, -margin, margin, margin))
        return rect

    def paint(self, painter: QPainter, option, widget=None):
        if not self._overlay_visible():
            return
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        DebugOverlayRenderer(PainterCanvas(painter)).render(self._result.state)
        painter.restore()
