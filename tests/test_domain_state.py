import pytest

from multiselect.domain import InvalidRangeError, MultiSelectionState, SelectionRange
from multiselect.handlers import click, ctrl_click
from multiselect.state import (
    compact_anchor_history,
    get_initial_state,
    is_item_selected,
    is_multiple_selection_active,
    last_anchor,
)


def test_range_rejects_reversed_bounds():
    with pytest.raises(InvalidRangeError):
        SelectionRange(5, 4)
    with pytest.raises(ValueError):
        SelectionRange(0, -1)


def test_range_helpers():
    rng = SelectionRange.spanning(9, 6)
    assert rng == SelectionRange(6, 9)
    assert len(rng) == 4
    assert 6 in rng and 9 in rng and 10 not in rng
    assert list(rng.indexes()) == [6, 7, 8, 9]
    assert rng.to_dict() == {"from": 6, "to": 9}
    assert SelectionRange.single(3).is_single
    assert rng.contains_range(SelectionRange(7, 9))
    assert not rng.contains_range(SelectionRange(5, 7))


def test_initial_state_is_empty():
    state = get_initial_state()
    assert state.anchor_history == ()
    assert state.anchor_exceptions == frozenset()
    assert state.selection_ranges == ()
    assert last_anchor(state) is None


def test_is_item_selected_uses_raw_ranges_and_exceptions():
    state = MultiSelectionState.from_raw([(1, 5), (3, 8)], exceptions=[4])
    assert is_item_selected(state, 1)
    assert is_item_selected(state, 8)
    assert not is_item_selected(state, 4)
    assert not is_item_selected(state, 9)
    assert not is_item_selected(get_initial_state(), 0)


class TestMultipleSelectionActive:
    def test_empty_selection_is_inactive(self):
        assert not is_multiple_selection_active(get_initial_state(), 0)

    def test_only_initial_element_is_inactive(self):
        assert not is_multiple_selection_active(click(2), 2)

    def test_single_other_element_is_active(self):
        assert is_multiple_selection_active(click(3), 2)

    def test_several_ranges_are_active(self):
        assert is_multiple_selection_active(ctrl_click(click(2), 5), 2)

    def test_wider_range_is_active(self):
        state = MultiSelectionState.from_raw([(2, 4)])
        assert is_multiple_selection_active(state, 2)


def test_compact_anchor_history_keeps_tail():
    state = MultiSelectionState.from_raw([(1, 1)], history=[1, 2, 3, 4, 5])
    compacted = compact_anchor_history(state, 2)
    assert compacted.anchor_history == (4, 5)
    assert last_anchor(compacted) == last_anchor(state)
    assert compacted.selection_ranges == state.selection_ranges
    assert compact_anchor_history(state, 10) is state


def test_compact_anchor_history_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        compact_anchor_history(get_initial_state(), 0)
