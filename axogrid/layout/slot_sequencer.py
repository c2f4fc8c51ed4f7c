"""Slot sequencer - enumerates grid slots and orders them for filling."""

from __future__ import annotations

import math

from axogrid.layout.grid_schema import (
    GridType,
    SlotCoordinate,
    SlotOrdering,
    StaggerParity,
    row_is_staggered,
)


def enumerate_slots(
    columns: int,
    rows: int,
    grid_type: GridType,
    stagger_parity: StaggerParity,
) -> list[SlotCoordinate]:
    """Row-major enumeration; staggered rows hold one slot fewer."""
    slots = []
    for row in range(rows):
        capacity = columns - 1 if row_is_staggered(grid_type, stagger_parity, row) else columns
        for column in range(capacity):
            slots.append(SlotCoordinate(column, row))
    return slots


def sequence_slots(
    columns: int,
    rows: int,
    grid_type: GridType,
    stagger_parity: StaggerParity,
    ordering: SlotOrdering,
) -> list[SlotCoordinate]:
    """Return every slot exactly once, in the order items should fill them."""
    slots = enumerate_slots(columns, rows, grid_type, stagger_parity)

    if ordering is SlotOrdering.REVERSE:
        slots.reverse()
    elif ordering is SlotOrdering.BOTTOM_UP:
        slots.sort(key=lambda slot: (-slot.row, slot.column))
    elif ordering is SlotOrdering.SPIRAL:
        center_x = (columns - 1) / 2.0
        center_y = (rows - 1) / 2.0

        def _distance(slot: SlotCoordinate) -> float:
            x = slot.column + (0.5 if row_is_staggered(grid_type, stagger_parity, slot.row) else 0.0)
            return math.hypot(x - center_x, slot.row - center_y)

        # list.sort is stable: equal distances keep their row-major order.
        slots.sort(key=_distance)
    return slots
