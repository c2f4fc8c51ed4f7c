"""Grid schema - parameters, slot coordinates and the per-pass grid snapshot."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, NamedTuple, Protocol

from PySide6.QtCore import QPointF, QRectF, QSizeF
from PySide6.QtGui import QColor

from axogrid.utils.flow_log import log_flow

DEFAULT_MIN_CELL_SIZE = 64.0


class GridType(Enum):
    ORTHOGONAL = 'orthogonal'
    STAGGERED = 'staggered'


class StaggerParity(Enum):
    EVEN = 'even'
    ODD = 'odd'


class SlotOrdering(Enum):
    STANDARD = 'standard'
    SPIRAL = 'spiral'
    REVERSE = 'reverse'
    BOTTOM_UP = 'bottom_up'


class ContainMode(Enum):
    CENTERED = 'centered'
    TOP_LEFT = 'top_left'


class SlotCoordinate(NamedTuple):
    column: int
    row: int


class LayoutItem(Protocol):
    """What the layout core needs from an item."""

    def minimum_size(self) -> QSizeF: ...

    def is_visible(self) -> bool: ...


class ItemAnimator(Protocol):
    """Fire-and-forget position transitions and uniform scaling."""

    def move_item(self, item: LayoutItem, target: QPointF, duration: float): ...

    def scale_item(self, item: LayoutItem, scale: float): ...


class DebugCanvas(Protocol):
    """Draw primitives consumed by the debug overlay."""

    def draw_line(self, start: QPointF, end: QPointF, color: QColor, width: float): ...

    def draw_circle(self, center: QPointF, radius: float, color: QColor, filled: bool): ...

    def draw_rect(self, rect: QRectF, color: QColor, width: float): ...


ENUM_FIELDS = {
    'grid_type': GridType,
    'stagger_parity': StaggerParity,
    'ordering': SlotOrdering,
    'contain_mode': ContainMode,
}


def row_is_staggered(grid_type: GridType, parity: StaggerParity, row: int) -> bool:
    """Staggered rows lose one slot and shift half a unit along axis X."""
    if grid_type is not GridType.STAGGERED:
        return False
    if parity is StaggerParity.EVEN:
        return row % 2 == 0
    return row % 2 == 1


def coerce_enum(enum_cls: type[Enum], value: Any) -> Enum:
    """Accept an enum member, its value or its name (case-insensitive)."""
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    for member in enum_cls:
        if text in (member.value, member.name.lower()):
            return member
    raise ValueError(f"{value!r} is not a valid {enum_cls.__name__}")


@dataclass(frozen=True)
class GridParameters:
    """Immutable input of one layout pass.

    Out-of-range numbers are clamped rather than rejected: columns never
    drop below 1, rows below 0 (0 means auto) and the transition duration
    below 0. Non-finite numbers (inf, nan) are replaced by the field
    default.
    """

    grid_type: GridType = GridType.ORTHOGONAL
    stagger_parity: StaggerParity = StaggerParity.ODD
    include_hidden: bool = False
    ordering: SlotOrdering = SlotOrdering.STANDARD
    columns: int = 3
    rows: int = 0
    angle_x: float = 0.0
    angle_y: float = 90.0
    contain_mode: ContainMode = ContainMode.CENTERED
    spacing_x: float = 1.0
    spacing_y: float = 1.0
    item_scale: float = 1.0
    debug_overlay: bool = False
    transition_duration: float = 0.3

    def __post_init__(self):
        for name in _NUMERIC_FIELDS:
            value = float(getattr(self, name))
            if not math.isfinite(value):
                default = _FIELD_DEFAULTS[name]
                log_flow("PARAMS", f"{name}={value} is not finite; using {default}",
                         level="WARNING")
                value = default
            object.__setattr__(self, name, value)
        object.__setattr__(self, 'columns', max(1, int(self.columns)))
        object.__setattr__(self, 'rows', max(0, int(self.rows)))
        object.__setattr__(self, 'transition_duration', max(0.0, self.transition_duration))
        object.__setattr__(self, 'include_hidden', bool(self.include_hidden))
        object.__setattr__(self, 'debug_overlay', bool(self.debug_overlay))

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def create(cls, **values) -> GridParameters:
        """Build parameters from loosely typed values (settings, YAML).

        Unknown keys are ignored. Unknown enum names fall back to the
        field default and are logged.
        """
        defaults = cls()
        known = {}
        for name in cls.field_names():
            if name not in values or values[name] is None:
                continue
            value = values[name]
            if name in ENUM_FIELDS:
                try:
                    value = coerce_enum(ENUM_FIELDS[name], value)
                except ValueError as e:
                    log_flow("PARAMS", f"{e}; using {getattr(defaults, name).value}",
                             level="WARNING")
                    continue
            known[name] = value
        return cls(**known)

    def with_changes(self, **changes) -> GridParameters:
        """Pure replacement of the given fields."""
        return replace(self, **changes)

    def normalized(self) -> GridParameters:
        """Re-run coercion and clamping, e.g. on an instance whose enum
        fields were given as plain strings."""
        return type(self).create(**self.to_dict())

    def is_row_staggered(self, row: int) -> bool:
        return row_is_staggered(self.grid_type, self.stagger_parity, row)

    def to_dict(self) -> dict[str, Any]:
        result = {}
        for name in self.field_names():
            value = getattr(self, name)
            result[name] = value.value if isinstance(value, Enum) else value
        return result


_NUMERIC_FIELDS = ('columns', 'rows', 'angle_x', 'angle_y', 'spacing_x', 'spacing_y',
                   'item_scale', 'transition_duration')
_FIELD_DEFAULTS = {f.name: f.default for f in fields(GridParameters)}


@dataclass(frozen=True)
class GridState:
    """Snapshot of one layout pass. Rebuilt every pass, never reused."""

    columns: int
    rows: int
    origin: QPointF
    direction_x: QPointF
    direction_y: QPointF
    unit_x: float
    unit_y: float
    cell_size: QSizeF
    grid_type: GridType = GridType.ORTHOGONAL
    stagger_parity: StaggerParity = StaggerParity.ODD
    contain_mode: ContainMode = ContainMode.CENTERED
    reference: QPointF = field(default_factory=QPointF)
    items: tuple = ()
    slots: tuple[SlotCoordinate, ...] = ()
    bounds: QRectF = field(default_factory=QRectF)

    def is_row_staggered(self, row: int) -> bool:
        return row_is_staggered(self.grid_type, self.stagger_parity, row)

    def row_capacity(self, row: int) -> int:
        return self.columns - 1 if self.is_row_staggered(row) else self.columns
