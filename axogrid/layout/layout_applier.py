"""Layout applier - assigns items to slots and requests their transitions."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QPointF

from axogrid.layout.grid_projection import project_slot
from axogrid.layout.grid_schema import (
    ContainMode,
    GridState,
    ItemAnimator,
    LayoutItem,
    SlotCoordinate,
)
from axogrid.utils.flow_log import log_flow

DEFAULT_TRANSITION_DURATION = 0.3


def target_position(item: LayoutItem, anchor: QPointF, contain_mode: ContainMode) -> QPointF:
    if contain_mode is ContainMode.TOP_LEFT:
        return QPointF(anchor)
    size = item.minimum_size()
    return QPointF(anchor.x() - size.width() / 2.0, anchor.y() - size.height() / 2.0)


def apply_layout(
    items: Sequence[LayoutItem],
    slots: Sequence[SlotCoordinate],
    state: GridState,
    contain_mode: ContainMode | None = None,
    *,
    animator: ItemAnimator | None = None,
    duration: float = DEFAULT_TRANSITION_DURATION,
    item_scale: float = 1.0,
) -> dict:
    """Return {item: position} for the first min(len(items), len(slots)) items.

    Items past the last slot keep their current position and are absent from
    the result. With an animator, every placed item gets a transition request
    and every item gets the uniform scale.
    """
    contain_mode = state.contain_mode if contain_mode is None else contain_mode
    placements = {}
    for item, slot in zip(items, slots):
        placements[item] = target_position(item, project_slot(slot, state), contain_mode)

    if animator is not None:
        for item in items:
            animator.scale_item(item, item_scale)
        for item, position in placements.items():
            animator.move_item(item, position, duration)

    unplaced = len(items) - len(placements)
    log_flow(
        "LAYOUT_APPLIER",
        f"placed={len(placements)} unplaced={max(0, unplaced)} slots={len(slots)}",
    )
    return placements
