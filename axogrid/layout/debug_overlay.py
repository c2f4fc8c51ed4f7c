"""Editor-only overlay showing grid lines, slots and the bounding rectangle."""

from __future__ import annotations

from PySide6.QtGui import QColor

from axogrid.layout.grid_projection import project_slot
from axogrid.layout.grid_schema import DebugCanvas, GridState, GridType, SlotCoordinate

ROW_LINE_COLOR = QColor(64, 220, 255, 160)
COLUMN_LINE_COLOR = QColor(64, 220, 255, 90)
FILLED_SLOT_COLOR = QColor(88, 255, 170, 230)
EMPTY_SLOT_COLOR = QColor(176, 176, 176, 160)
BOUNDS_COLOR = QColor(255, 140, 0, 220)
ORIGIN_COLOR = QColor(255, 78, 78, 255)


class DebugOverlayRenderer:
    """Issues draw calls for a grid snapshot; never mutates it."""

    line_width = 1.0
    slot_radius = 4.0
    origin_radius = 6.0

    def __init__(self, canvas: DebugCanvas):
        self._canvas = canvas

    def render(self, state: GridState, filled_count: int | None = None):
        # "Filled" is rank in the ordered slot list, not true occupancy.
        if filled_count is None:
            filled_count = len(state.items)

        self._draw_row_lines(state)
        if state.grid_type is GridType.ORTHOGONAL:
            self._draw_column_lines(state)

        for index, slot in enumerate(state.slots):
            filled = index < filled_count
            self._canvas.draw_circle(
                project_slot(slot, state),
                self.slot_radius,
                FILLED_SLOT_COLOR if filled else EMPTY_SLOT_COLOR,
                filled,
            )

        self._canvas.draw_rect(state.bounds, BOUNDS_COLOR, self.line_width)
        self._canvas.draw_circle(state.origin, self.origin_radius, ORIGIN_COLOR, False)

    def _draw_row_lines(self, state: GridState):
        for row in range(state.rows):
            capacity = state.row_capacity(row)
            if capacity <= 0:
                continue
            start = project_slot(SlotCoordinate(0, row), state)
            end = project_slot(SlotCoordinate(capacity - 1, row), state)
            self._canvas.draw_line(start, end, ROW_LINE_COLOR, self.line_width)

    def _draw_column_lines(self, state: GridState):
        if state.rows <= 0:
            return
        for column in range(state.columns):
            start = project_slot(SlotCoordinate(column, 0), state)
            end = project_slot(SlotCoordinate(column, state.rows - 1), state)
            self._canvas.draw_line(start, end, COLUMN_LINE_COLOR, self.line_width)
