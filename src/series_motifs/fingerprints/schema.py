"""Occurrence schema and read-only views over the occurrence index.

An Occurrence answers: where did this window start and end, and what metadata
did its first and last record carry? Occurrences are created once per accepted
window and never mutated afterwards.
"""

from __future__ import annotations
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, List, TypeVar

Index = TypeVar("Index")
Meta = TypeVar("Meta")


@dataclass(frozen=True)
class Occurrence(Generic[Index, Meta]):
    """One accepted window: boundaries of its first and last record."""
    start_index: Index
    start_meta: Meta
    end_index: Index
    end_meta: Meta
    offset: int  # record position of the window start

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_index": self.start_index,
            "start_meta": self.start_meta,
            "end_index": self.end_index,
            "end_meta": self.end_meta,
            "offset": self.offset,
        }


class OccurrenceView(Sequence, Generic[Index, Meta]):
    """Read-only, restartable view over one digest's occurrence list.

    The view reflects the list owned by the fingerprinter; it is not a copy.
    """

    __slots__ = ("_items",)

    def __init__(self, items: List[Occurrence[Index, Meta]]):
        self._items = items

    def __getitem__(self, i):
        return self._items[i]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Occurrence[Index, Meta]]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"OccurrenceView({self._items!r})"
