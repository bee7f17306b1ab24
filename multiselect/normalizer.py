"""Turn the raw selection state into the minimal set of disjoint ranges.

The raw ``selection_ranges`` accumulated by the handlers may overlap, nest
and contain excepted indices. Normalizing runs three stages:

1. ``slice_on_exceptions`` carves a hole around every exception;
2. ``remove_sub_ranges`` keeps only maximal ranges;
3. ``remove_overlapping_ranges`` folds overlapping pairs into their union.

Example: ranges ``[1-5]`` and ``[7-10]`` with exceptions ``{2, 8}``
normalize to ``[1-1], [3-5], [7-7], [9-10]``.

Stage 3 is a single pairwise pass. A chain of three or more ranges that only
overlap transitively (``[1-3], [3-6], [5-9]``) comes out of one call as
``[1-6], [5-9]``, so the overlapping indices are counted twice by
``selection_size`` and repeated by ``get_selected_indexes``. Normalizing the
result again collapses it.
"""

from __future__ import annotations

from .domain import MultiSelectionState, SelectionRange


def _split_around(rng: SelectionRange, exception: int) -> tuple[SelectionRange, SelectionRange]:
    # at an endpoint the piece collapses onto the exception itself and is dropped later
    if exception == rng.from_:
        head = SelectionRange.single(exception)
    else:
        head = SelectionRange(rng.from_, exception - 1)
    if exception == rng.to:
        tail = SelectionRange.single(exception)
    else:
        tail = SelectionRange(exception + 1, rng.to)
    return head, tail


def slice_on_exceptions(state: MultiSelectionState) -> list[SelectionRange]:
    exceptions = state.anchor_exceptions
    ranges = list(state.selection_ranges)

    for exception in sorted(exceptions):
        if not any(exception in rng for rng in ranges):
            continue
        # cut every range holding the exception; raw ranges may overlap
        sliced = []
        for rng in ranges:
            if exception in rng:
                sliced.extend(_split_around(rng, exception))
            else:
                sliced.append(rng)
        ranges = sliced

    return [rng for rng in ranges if rng.from_ not in exceptions and rng.to not in exceptions]


def _is_sub_range(inner: SelectionRange, outer: SelectionRange) -> bool:
    strictly_inside = outer.from_ < inner.from_ and inner.to < outer.to
    same_start = outer.from_ <= inner.from_ and inner.to < outer.to
    same_end = outer.from_ < inner.from_ and inner.to <= outer.to
    return strictly_inside or same_start or same_end


def remove_sub_ranges(ranges: list[SelectionRange]) -> list[SelectionRange]:
    """Drop every range contained in another one.

    Identical duplicates are not sub-ranges of each other and both survive;
    the overlap stage folds them.
    """
    return [rng for rng in ranges if not any(_is_sub_range(rng, other) for other in ranges)]


def _overlaps_left(other: SelectionRange, current: SelectionRange) -> bool:
    return other.from_ <= current.from_ and current.from_ <= other.to <= current.to


def _overlaps_right(other: SelectionRange, current: SelectionRange) -> bool:
    return current.from_ <= other.from_ <= current.to and other.to >= current.to


def remove_overlapping_ranges(ranges: list[SelectionRange]) -> list[SelectionRange]:
    """Merge each range with one overlapping partner, in a single scan.

    A range consumed by a merge is never emitted again nor offered as a
    partner to a later range.
    """
    consumed: set[int] = set()
    merged: list[SelectionRange] = []

    for i, current in enumerate(ranges):
        if i in consumed:
            continue
        candidates = [(j, other) for j, other in enumerate(ranges) if j != i and j not in consumed]

        left = next((j for j, other in candidates if _overlaps_left(other, current)), None)
        if left is not None:
            consumed.update((i, left))
            merged.append(SelectionRange(ranges[left].from_, current.to))
            continue

        right = next((j for j, other in candidates if _overlaps_right(other, current)), None)
        if right is not None:
            consumed.update((i, right))
            merged.append(SelectionRange(current.from_, ranges[right].to))
            continue

        merged.append(current)

    return merged


def normalize_ranges(state: MultiSelectionState) -> list[SelectionRange]:
    sliced = slice_on_exceptions(state)
    return remove_overlapping_ranges(remove_sub_ranges(sliced))


def selection_size(state: MultiSelectionState) -> int:
    return sum(len(rng) for rng in normalize_ranges(state))


def get_selected_indexes(state: MultiSelectionState) -> list[int]:
    """Flat list of selected indices, in normalized range order."""
    indexes: list[int] = []
    for rng in normalize_ranges(state):
        indexes.extend(rng.indexes())
    return indexes
