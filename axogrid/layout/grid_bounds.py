"""Bounds of the arranged items and the container's minimum-size contract."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QPointF, QRectF, QSizeF

from axogrid.layout.grid_projection import project_slot
from axogrid.layout.grid_schema import ContainMode, GridState, LayoutItem, SlotCoordinate
from axogrid.utils.flow_log import log_flow


def item_footprint(size: QSizeF, anchor: QPointF, contain_mode: ContainMode) -> QRectF:
    """Rectangle an item of `size` covers when placed at `anchor`."""
    if contain_mode is ContainMode.CENTERED:
        top_left = QPointF(anchor.x() - size.width() / 2.0, anchor.y() - size.height() / 2.0)
    else:
        top_left = QPointF(anchor)
    return QRectF(top_left, size)


def compute_bounds(
    items: Sequence[LayoutItem],
    slots: Sequence[SlotCoordinate],
    state: GridState,
) -> QRectF:
    """Smallest rectangle holding every placed footprint and the reference point."""
    # QRectF.united() skips null rects, so the union is accumulated by hand
    # to keep the degenerate seed at the reference point.
    left = right = state.reference.x()
    top = bottom = state.reference.y()
    for item, slot in zip(items, slots):
        rect = item_footprint(item.minimum_size(), project_slot(slot, state), state.contain_mode)
        left = min(left, rect.left())
        top = min(top, rect.top())
        right = max(right, rect.right())
        bottom = max(bottom, rect.bottom())
    bounds = QRectF(left, top, right - left, bottom - top)
    log_flow(
        "GRID_BOUNDS",
        f"bounds=({bounds.x():.1f}, {bounds.y():.1f}, {bounds.width():.1f}x{bounds.height():.1f})",
    )
    return bounds


def minimum_size_for(bounds: QRectF) -> QSizeF:
    """Extent measured from the reference origin, not just the raw size."""
    return QSizeF(bounds.width() + bounds.x(), bounds.height() + bounds.y())
