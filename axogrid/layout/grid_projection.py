"""Maps slot coordinates to points in the container's local space."""

from __future__ import annotations

from PySide6.QtCore import QPointF

from axogrid.layout.grid_schema import GridState, SlotCoordinate


def stagger_offset(state: GridState, row: int) -> float:
    return 0.5 if state.is_row_staggered(row) else 0.0


def project_slot(slot: SlotCoordinate, state: GridState) -> QPointF:
    """origin + dir_x * (column + stagger) * unit_x + dir_y * row * unit_y"""
    column, row = slot
    along_x = (column + stagger_offset(state, row)) * state.unit_x
    along_y = row * state.unit_y
    return state.origin + state.direction_x * along_x + state.direction_y * along_y
