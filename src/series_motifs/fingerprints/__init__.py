"""Windowed fingerprinting: sliding-window digests grouped into occurrences."""

from .schema import Occurrence, OccurrenceView
from .metrics import ScanMetrics
from .filters import (
    SequenceFilter,
    accept_all,
    reject_constant,
    reject_all_zero,
    min_distinct,
    min_range,
    all_of,
    make_filter,
    make_filters,
)
from .fingerprinter import Fingerprinter

__all__ = [
    "Occurrence",
    "OccurrenceView",
    "ScanMetrics",
    "SequenceFilter",
    "accept_all",
    "reject_constant",
    "reject_all_zero",
    "min_distinct",
    "min_range",
    "all_of",
    "make_filter",
    "make_filters",
    "Fingerprinter",
]
