"""Sliding-window fingerprinter.

Flow: project records to values -> slide a fixed window one record at a time ->
filter -> digest -> append an Occurrence under that digest.

Digest equality stands in for value-sequence equality. Two different windows
can in principle share a digest; `duplicates(verify=True)` re-checks the
actual value slices and drops such false matches. The default trusts digests.
"""

from __future__ import annotations
import logging
from typing import (
    Any, Callable, Dict, Generic, Hashable, Iterator, List, Optional, Sequence, Tuple, TypeVar,
)

from ..errors import InvalidConfiguration
from ..utils.hashing import hash_sequence
from .filters import SequenceFilter, accept_all
from .metrics import ScanMetrics
from .schema import Occurrence, OccurrenceView

Data = TypeVar("Data")
Index = TypeVar("Index")
Meta = TypeVar("Meta")
Value = TypeVar("Value", bound=Hashable)

log = logging.getLogger("series_motifs.fingerprinter")


class Fingerprinter(Generic[Data, Index, Meta, Value]):
    """
    Windowed fingerprinting engine.

    Configured once with projections, a window size and a filter; reusable
    across series. Each `process_series` call replaces the occurrence index.
    Not thread-safe: use one instance per concurrent scan.
    """

    def __init__(
        self,
        get_value: Callable[[Data], Value],
        get_index: Callable[[Data], Index],
        get_meta: Callable[[Data], Meta],
        window_size: int,
        sequence_filter: Optional[SequenceFilter] = None,
    ):
        if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size <= 0:
            raise InvalidConfiguration(f"window_size must be a positive integer, got {window_size!r}")
        self.get_value = get_value
        self.get_index = get_index
        self.get_meta = get_meta
        self.window_size = window_size
        self.sequence_filter = sequence_filter or accept_all
        self.metrics = ScanMetrics(window_size=window_size)

        self._occurrences: Dict[int, List[Occurrence[Index, Meta]]] = {}
        self._values: List[Value] = []
        self._populated = False

    @property
    def is_empty(self) -> bool:
        """True until a series at least one window long is scanned, even if every window was rejected."""
        return not self._populated

    def process_series(self, data: Sequence[Data]) -> None:
        """Scan `data` and rebuild the occurrence index from scratch."""
        self._occurrences = {}
        self._values = []
        self._populated = False
        self.metrics = ScanMetrics(series_length=len(data), window_size=self.window_size)

        if len(data) < self.window_size:
            log.debug(
                "Series of %d records is shorter than window %d; index left empty",
                len(data), self.window_size,
            )
            return

        values = [self.get_value(record) for record in data]
        w = self.window_size

        for w_start in range(len(data) - w + 1):
            w_end = w_start + w
            w_values = values[w_start:w_end]

            accepted = bool(self.sequence_filter(w_values))
            self.metrics.record_window(accepted)
            if not accepted:
                continue

            digest = hash_sequence(w_values)
            first_record = data[w_start]
            last_record = data[w_end - 1]
            self._occurrences.setdefault(digest, []).append(Occurrence(
                start_index=self.get_index(first_record),
                start_meta=self.get_meta(first_record),
                end_index=self.get_index(last_record),
                end_meta=self.get_meta(last_record),
                offset=w_start,
            ))

        self._values = values
        self._populated = True
        dup_lists = [occ for occ in self._occurrences.values() if len(occ) > 1]
        self.metrics.distinct_digests = len(self._occurrences)
        self.metrics.duplicate_groups = len(dup_lists)
        self.metrics.duplicate_occurrences = sum(len(occ) for occ in dup_lists)
        log.info(
            "Scanned %d records (window=%d): %d windows hashed, %d rejected, %d duplicate groups",
            len(data), w, self.metrics.windows_hashed, self.metrics.windows_rejected,
            self.metrics.duplicate_groups,
        )

    def matches(self, sequence: Sequence[Value]) -> Optional[OccurrenceView[Index, Meta]]:
        """Occurrences whose window digest equals the digest of `sequence`, or None if unseen."""
        found = self._occurrences.get(hash_sequence(sequence))
        if found is None:
            return None
        return OccurrenceView(found)

    def duplicates(self, verify: bool = False) -> Iterator[OccurrenceView[Index, Meta]]:
        """Yield every group of two or more occurrences sharing a digest.

        With `verify=True` each digest group is split by the actual value
        slices of its windows, so colliding but different windows are not
        reported together.
        """
        for occurrences in self._occurrences.values():
            if len(occurrences) < 2:
                continue
            if not verify:
                yield OccurrenceView(occurrences)
                continue
            for group in self._split_by_values(occurrences):
                if len(group) > 1:
                    yield OccurrenceView(group)

    def groups(self) -> Iterator[Tuple[int, OccurrenceView[Index, Meta]]]:
        """Yield (digest, occurrences) for every digest, singletons included."""
        for digest, occurrences in self._occurrences.items():
            yield digest, OccurrenceView(occurrences)

    def window_values(self, occurrence: Occurrence[Index, Meta]) -> List[Value]:
        """Projected values of the window an occurrence was recorded for."""
        return self._values[occurrence.offset:occurrence.offset + self.window_size]

    def _split_by_values(
        self, occurrences: List[Occurrence[Index, Meta]],
    ) -> List[List[Occurrence[Index, Meta]]]:
        by_values: Dict[Tuple[Any, ...], List[Occurrence[Index, Meta]]] = {}
        for occ in occurrences:
            by_values.setdefault(tuple(self.window_values(occ)), []).append(occ)
        if len(by_values) > 1:
            log.warning("Digest collision: %d distinct windows shared one digest", len(by_values))
        return list(by_values.values())
