"""Axonometric grid layout.

Lays out rectangular items on a grid whose two axes are arbitrary
direction vectors with independent spacings:
- orthogonal or staggered (brick/hex) rows
- standard, reverse, bottom-up or centre-out spiral fill order
- centred or top-left containment
"""

from .grid_schema import (
    ContainMode,
    GridParameters,
    GridState,
    GridType,
    SlotCoordinate,
    SlotOrdering,
    StaggerParity,
)
from .grid_builder import build_grid_state
from .slot_sequencer import sequence_slots
from .grid_projection import project_slot
from .grid_bounds import compute_bounds, minimum_size_for
from .layout_applier import apply_layout
from .debug_overlay import DebugOverlayRenderer
from .axonometric_layout import LayoutResult, compute_layout

__all__ = [
    'ContainMode',
    'GridParameters',
    'GridState',
    'GridType',
    'SlotCoordinate',
    'SlotOrdering',
    'StaggerParity',
    'build_grid_state',
    'sequence_slots',
    'project_slot',
    'compute_bounds',
    'minimum_size_for',
    'apply_layout',
    'DebugOverlayRenderer',
    'LayoutResult',
    'compute_layout',
]
