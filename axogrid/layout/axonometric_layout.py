"""One layout pass: build -> sequence -> bounds -> apply."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from PySide6.QtCore import QPointF, QRectF, QSizeF

from axogrid.layout.grid_bounds import compute_bounds, minimum_size_for
from axogrid.layout.grid_builder import build_grid_state
from axogrid.layout.grid_schema import GridParameters, GridState, ItemAnimator, LayoutItem
from axogrid.layout.layout_applier import apply_layout
from axogrid.layout.slot_sequencer import sequence_slots


@dataclass
class LayoutResult:
    """Everything a single pass produced."""

    state: GridState
    placements: dict = field(default_factory=dict)

    @property
    def bounds(self) -> QRectF:
        return self.state.bounds

    @property
    def minimum_size(self) -> QSizeF:
        return minimum_size_for(self.state.bounds)

    @property
    def unplaced_items(self) -> list:
        return [item for item in self.state.items if item not in self.placements]


def compute_layout(
    items: Iterable[LayoutItem],
    params: GridParameters,
    reference: QPointF | None = None,
    animator: ItemAnimator | None = None,
) -> LayoutResult:
    state = build_grid_state(items, params, reference)
    slots = tuple(sequence_slots(
        state.columns,
        state.rows,
        params.grid_type,
        params.stagger_parity,
        params.ordering,
    ))
    state = replace(state, slots=slots)
    state = replace(state, bounds=compute_bounds(state.items, slots, state))
    placements = apply_layout(
        state.items,
        slots,
        state,
        animator=animator,
        duration=params.transition_duration,
        item_scale=params.item_scale,
    )
    return LayoutResult(state=state, placements=placements)
