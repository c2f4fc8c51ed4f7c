"""Grid builder - resolves counts, cell pitch, axis directions and origin."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from PySide6.QtCore import QPointF, QSizeF

from axogrid.layout.grid_schema import (
    DEFAULT_MIN_CELL_SIZE,
    ContainMode,
    GridParameters,
    GridState,
    LayoutItem,
)
from axogrid.utils.flow_log import log_flow


def participating_items(items: Iterable[LayoutItem], include_hidden: bool) -> list[LayoutItem]:
    """Hidden items take a slot only when `include_hidden` is set."""
    if include_hidden:
        return list(items)
    return [item for item in items if item.is_visible()]


def resolve_rows(item_count: int, params: GridParameters) -> int:
    if params.rows > 0:
        return params.rows
    return math.ceil(item_count / params.columns)


def base_cell_size(items: Sequence[LayoutItem]) -> QSizeF:
    """Component-wise max of the minimum sizes, floored at 64x64."""
    width = DEFAULT_MIN_CELL_SIZE
    height = DEFAULT_MIN_CELL_SIZE
    for item in items:
        size = item.minimum_size()
        width = max(width, size.width())
        height = max(height, size.height())
    return QSizeF(width, height)


def direction_from_angle(degrees: float) -> QPointF:
    """Unit vector where 0 degrees is +X and 90 degrees points down (+Y)."""
    radians = math.radians(degrees)
    return QPointF(math.cos(radians), math.sin(radians))


def build_grid_state(
    items: Iterable[LayoutItem],
    params: GridParameters,
    reference: QPointF | None = None,
) -> GridState:
    """Build the grid snapshot for one pass (slots and bounds left empty)."""
    reference = QPointF(0.0, 0.0) if reference is None else QPointF(reference)
    members = tuple(participating_items(items, params.include_hidden))

    columns = params.columns
    rows = resolve_rows(len(members), params)
    cell_size = base_cell_size(members)
    unit_x = cell_size.width() * params.spacing_x
    unit_y = cell_size.height() * params.spacing_y
    direction_x = direction_from_angle(params.angle_x)
    direction_y = direction_from_angle(params.angle_y)

    if params.contain_mode is ContainMode.CENTERED:
        span_x = max(0, columns - 1) * unit_x
        span_y = max(0, rows - 1) * unit_y
        origin = reference - direction_x * (span_x / 2.0) - direction_y * (span_y / 2.0)
    else:
        origin = QPointF(reference)

    log_flow(
        "GRID_BUILDER",
        f"items={len(members)} grid={columns}x{rows} cell={cell_size.width():.1f}x{cell_size.height():.1f} "
        f"unit=({unit_x:.1f}, {unit_y:.1f}) origin=({origin.x():.1f}, {origin.y():.1f})",
    )
    return GridState(
        columns=columns,
        rows=rows,
        origin=origin,
        direction_x=direction_x,
        direction_y=direction_y,
        unit_x=unit_x,
        unit_y=unit_y,
        cell_size=cell_size,
        grid_type=params.grid_type,
        stagger_parity=params.stagger_parity,
        contain_mode=params.contain_mode,
        reference=reference,
        items=members,
    )
