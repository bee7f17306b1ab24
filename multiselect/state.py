"""Constructors and cheap queries over a MultiSelectionState."""

from __future__ import annotations

from dataclasses import replace

from .domain import MultiSelectionState


def get_initial_state() -> MultiSelectionState:
    return MultiSelectionState()


def last_anchor(state: MultiSelectionState) -> int | None:
    """Index that shift-click pivots around, or None before any anchoring click."""
    if not state.anchor_history:
        return None
    return state.anchor_history[-1]


def is_item_selected(state: MultiSelectionState, item: int) -> bool:
    """Check membership against the raw ranges minus exceptions.

    Works on the unnormalized state so it stays O(ranges) per call, which
    matters when a view asks once per visible row.
    """
    if item in state.anchor_exceptions:
        return False
    return any(item in rng for rng in state.selection_ranges)


def is_multiple_selection_active(state: MultiSelectionState, initial_element: int) -> bool:
    ranges = state.selection_ranges
    if len(ranges) == 1:
        only = ranges[0]
        # a lone singleton on the initial element is the default state, not a multi-selection
        if only.is_single and only.from_ == initial_element:
            return False
    return len(ranges) != 0


def compact_anchor_history(state: MultiSelectionState, limit: int) -> MultiSelectionState:
    """Keep only the newest ``limit`` anchors.

    Only the tail of the history is ever read, so trimming the head leaves
    shift-click behaviour unchanged.
    """
    if limit < 1:
        raise ValueError(f"history limit must be positive, got {limit}")
    if len(state.anchor_history) <= limit:
        return state
    return replace(state, anchor_history=state.anchor_history[-limit:])
