import logging

from PySide6.QtCore import QObject, Qt, Signal

from . import handlers
from .domain import MultiSelectionState
from .normalizer import normalize_ranges
from .settings import get_history_limit
from .state import compact_anchor_history, get_initial_state, is_item_selected, is_multiple_selection_active, last_anchor

logger = logging.getLogger(__name__)


class SelectionModel(QObject):
    """Holds the selection of one list view and notifies it on change."""

    selectionChanged = Signal(list)  # sorted selected indexes
    anchorChanged = Signal(object)  # anchor index or None

    def __init__(self, history_limit: int | None = None):
        super().__init__()
        self._state = get_initial_state()
        self._history_limit = history_limit if history_limit is not None else get_history_limit()

    def clear(self):
        changed = self._state != get_initial_state()
        self._state = get_initial_state()
        if changed:
            self.selectionChanged.emit([])
            self.anchorChanged.emit(None)

    def click(self, index: int):
        if not self._accepts(index):
            return
        self._apply(handlers.click(index))

    def ctrl_click(self, index: int):
        if not self._accepts(index):
            return
        self._apply(handlers.ctrl_click(self._state, index))

    def shift_click(self, index: int):
        if not self._accepts(index):
            return
        self._apply(handlers.shift_click(self._state, index))

    def handle_click(self, index: int, modifiers):
        ctrl = bool((modifiers & Qt.KeyboardModifier.ControlModifier) or (modifiers & Qt.KeyboardModifier.MetaModifier))
        shift = bool(modifiers & Qt.KeyboardModifier.ShiftModifier)

        if shift:
            self.shift_click(index)
        elif ctrl:
            self.ctrl_click(index)
        else:
            self.click(index)

    def _accepts(self, index) -> bool:
        if index is None or index < 0:
            logger.debug("Ignoring click on index %r", index)
            return False
        return True

    def _apply(self, new_state):
        old_anchor = last_anchor(self._state)
        self._state = compact_anchor_history(new_state, self._history_limit)
        selected = self.selected()
        logger.debug("Selection now %d item(s), anchor %s", len(selected), last_anchor(self._state))
        self.selectionChanged.emit(selected)
        anchor = last_anchor(self._state)
        if anchor != old_anchor:
            self.anchorChanged.emit(anchor)

    def state(self):
        return self._state

    def ranges(self):
        """Disjoint ranges for display.

        One normalization pass can leave a chain of overlapping ranges
        partly merged, so the result is normalized again until it settles.
        """
        ranges = normalize_ranges(self._state)
        while True:
            again = normalize_ranges(MultiSelectionState(selection_ranges=tuple(ranges)))
            if again == ranges:
                return ranges
            ranges = again

    def selected(self) -> list[int]:
        selected: list[int] = []
        for rng in self.ranges():
            selected.extend(rng.indexes())
        return sorted(selected)

    def size(self) -> int:
        return sum(len(rng) for rng in self.ranges())

    def anchor(self) -> int | None:
        return last_anchor(self._state)

    def is_selected(self, index: int) -> bool:
        return is_item_selected(self._state, index)

    def is_multiple_selection_active(self, initial_element: int) -> bool:
        return is_multiple_selection_active(self._state, initial_element)
