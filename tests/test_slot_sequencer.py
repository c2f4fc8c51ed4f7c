import pytest

from axogrid.layout.grid_schema import GridType, SlotCoordinate, SlotOrdering, StaggerParity
from axogrid.layout.slot_sequencer import enumerate_slots, sequence_slots

ALL_ORDERINGS = list(SlotOrdering)


def test_standard_ordering_is_row_major():
    slots = sequence_slots(3, 2, GridType.ORTHOGONAL, StaggerParity.ODD, SlotOrdering.STANDARD)

    assert slots == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert all(isinstance(slot, SlotCoordinate) for slot in slots)


def test_staggered_even_rows_lose_one_slot():
    slots = sequence_slots(4, 2, GridType.STAGGERED, StaggerParity.EVEN, SlotOrdering.STANDARD)

    assert [slot for slot in slots if slot.row == 0] == [(0, 0), (1, 0), (2, 0)]
    assert [slot for slot in slots if slot.row == 1] == [(0, 1), (1, 1), (2, 1), (3, 1)]
    assert len(slots) == 7


@pytest.mark.parametrize("columns, rows", [(1, 1), (3, 3), (4, 5), (7, 2)])
@pytest.mark.parametrize("parity", list(StaggerParity))
def test_slot_count_invariant(columns, rows, parity):
    orthogonal = enumerate_slots(columns, rows, GridType.ORTHOGONAL, parity)
    staggered = enumerate_slots(columns, rows, GridType.STAGGERED, parity)
    wanted_remainder = 0 if parity is StaggerParity.EVEN else 1
    staggered_rows = sum(1 for row in range(rows) if row % 2 == wanted_remainder)

    assert len(orthogonal) == rows * columns
    assert len(staggered) == rows * columns - staggered_rows


@pytest.mark.parametrize("ordering", ALL_ORDERINGS)
@pytest.mark.parametrize("grid_type", list(GridType))
def test_every_ordering_is_a_permutation_of_standard(ordering, grid_type):
    standard = sequence_slots(5, 4, grid_type, StaggerParity.ODD, SlotOrdering.STANDARD)
    ordered = sequence_slots(5, 4, grid_type, StaggerParity.ODD, ordering)

    assert len(ordered) == len(standard)
    assert sorted(ordered) == sorted(standard)
    assert len(set(ordered)) == len(ordered)


def test_reverse_round_trip_restores_standard():
    standard = sequence_slots(4, 3, GridType.STAGGERED, StaggerParity.EVEN, SlotOrdering.STANDARD)
    reverse = sequence_slots(4, 3, GridType.STAGGERED, StaggerParity.EVEN, SlotOrdering.REVERSE)

    assert reverse[0] == standard[-1]
    assert list(reversed(reverse)) == standard


def test_bottom_up_fills_last_row_first_left_to_right():
    slots = sequence_slots(3, 2, GridType.ORTHOGONAL, StaggerParity.ODD, SlotOrdering.BOTTOM_UP)

    assert slots == [(0, 1), (1, 1), (2, 1), (0, 0), (1, 0), (2, 0)]


def test_spiral_starts_at_center_and_grows_outward():
    slots = sequence_slots(3, 3, GridType.ORTHOGONAL, StaggerParity.ODD, SlotOrdering.SPIRAL)

    assert slots[0] == (1, 1)
    assert set(slots[1:5]) == {(1, 0), (0, 1), (2, 1), (1, 2)}
    assert set(slots[5:]) == {(0, 0), (2, 0), (0, 2), (2, 2)}


def test_spiral_ties_keep_standard_order():
    slots = sequence_slots(3, 3, GridType.ORTHOGONAL, StaggerParity.ODD, SlotOrdering.SPIRAL)

    assert slots[1:5] == [(1, 0), (0, 1), (2, 1), (1, 2)]


def test_spiral_accounts_for_stagger_half_offset():
    slots = sequence_slots(3, 3, GridType.STAGGERED, StaggerParity.ODD, SlotOrdering.SPIRAL)

    # Row 1 is staggered: its two slots sit at x=0.5 and x=1.5, half a unit from the centre.
    assert slots[:2] == [(0, 1), (1, 1)]


def test_single_column_staggered_rows_have_no_slots():
    slots = sequence_slots(1, 3, GridType.STAGGERED, StaggerParity.EVEN, SlotOrdering.STANDARD)

    assert slots == [(0, 1)]


def test_zero_rows_yield_no_slots():
    for ordering in ALL_ORDERINGS:
        assert sequence_slots(4, 0, GridType.STAGGERED, StaggerParity.ODD, ordering) == []
