"""Pointer interaction handlers: plain click, ctrl/cmd-click and shift-click.

Each handler is a pure function taking the current state (plain click
excepted) and the clicked index, and returning the next state. Indices are
opaque: nothing here checks them against the size of the list.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .domain import MultiSelectionState, SelectionRange
from .state import get_initial_state, is_item_selected, last_anchor

logger = logging.getLogger(__name__)


def click(clicked_item: int) -> MultiSelectionState:
    """Replace the whole selection with ``clicked_item`` and anchor on it."""
    logger.debug("click %d", clicked_item)
    return replace(
        get_initial_state(),
        anchor_history=(clicked_item,),
        selection_ranges=(SelectionRange.single(clicked_item),),
    )


def ctrl_click(state: MultiSelectionState, clicked_item: int) -> MultiSelectionState:
    """Toggle ``clicked_item``: selected items get an exception, others a new singleton range.

    Every ctrl-click becomes the anchor for later shift-clicks, whether it
    added or removed the item.
    """
    history = state.anchor_history + (clicked_item,)

    if is_item_selected(state, clicked_item):
        logger.debug("ctrl-click %d: deselect", clicked_item)
        return replace(
            state,
            anchor_history=history,
            anchor_exceptions=state.anchor_exceptions | {clicked_item},
        )

    new_range = SelectionRange.single(clicked_item)
    ranges = state.selection_ranges
    # a range may still cover the item structurally (shift-range, then ctrl-deselect)
    if not any(rng.contains_range(new_range) for rng in ranges):
        ranges = ranges + (new_range,)
    logger.debug("ctrl-click %d: select", clicked_item)
    return replace(
        state,
        anchor_history=history,
        anchor_exceptions=state.anchor_exceptions - {clicked_item},
        selection_ranges=ranges,
    )


def shift_click(state: MultiSelectionState, clicked_item: int) -> MultiSelectionState:
    """Extend or contract the range pivoting on the last anchor."""
    anchor = last_anchor(state)

    if not state.selection_ranges or anchor is None:
        logger.debug("shift-click %d: no anchor yet, starting a range", clicked_item)
        return replace(
            state,
            anchor_history=state.anchor_history + (clicked_item,),
            selection_ranges=state.selection_ranges + (SelectionRange.single(clicked_item),),
        )

    extent = SelectionRange.spanning(anchor, clicked_item)
    exceptions = frozenset(ex for ex in state.anchor_exceptions if ex not in extent)

    ranges = list(state.selection_ranges)
    for i, rng in enumerate(ranges):
        if anchor in (rng.from_, rng.to):
            logger.debug("shift-click %d: resizing %s to %s", clicked_item, rng, extent)
            ranges[i] = extent
            break
    else:
        # anchor came from a ctrl-click away from any range edge
        logger.debug("shift-click %d: new range %s", clicked_item, extent)
        ranges.append(extent)

    return replace(state, anchor_exceptions=exceptions, selection_ranges=tuple(ranges))
