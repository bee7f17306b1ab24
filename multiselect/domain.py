from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


class InvalidRangeError(ValueError):
    """Raised when a range is built with its end before its start."""


@dataclass(frozen=True)
class SelectionRange:
    """Contiguous block of selected indices, both ends inclusive."""

    from_: int
    to: int

    def __post_init__(self):
        if self.to < self.from_:
            raise InvalidRangeError(f"range end {self.to} is before its start {self.from_}")

    @classmethod
    def single(cls, item: int) -> SelectionRange:
        return cls(item, item)

    @classmethod
    def spanning(cls, a: int, b: int) -> SelectionRange:
        """Range covering both indices, whichever order they come in."""
        return cls(min(a, b), max(a, b))

    @property
    def is_single(self) -> bool:
        return self.from_ == self.to

    def __contains__(self, item: int) -> bool:
        return self.from_ <= item <= self.to

    def __len__(self) -> int:
        return self.to + 1 - self.from_

    def contains_range(self, other: SelectionRange) -> bool:
        return self.from_ <= other.from_ and other.to <= self.to

    def indexes(self) -> Iterator[int]:
        return iter(range(self.from_, self.to + 1))

    def to_dict(self) -> dict[str, int]:
        return {"from": self.from_, "to": self.to}


@dataclass(frozen=True)
class MultiSelectionState:
    anchor_history: tuple[int, ...] = ()
    anchor_exceptions: frozenset[int] = field(default_factory=frozenset)  # holes punched by ctrl-click
    selection_ranges: tuple[SelectionRange, ...] = ()  # raw, may overlap; normalize before reporting

    @classmethod
    def from_raw(cls, ranges, exceptions=(), history=()):
        """Build a state from plain ``(from, to)`` pairs, mostly for tests and fixtures."""
        return cls(
            anchor_history=tuple(history),
            anchor_exceptions=frozenset(exceptions),
            selection_ranges=tuple(SelectionRange(a, b) for a, b in ranges),
        )
