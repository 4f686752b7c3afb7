"""Series source plugin interface.

Goal: allow new series to be scanned without changing pipeline code.

A source can be:
- synthetic (waveforms, seeded random data)
- batch (local Parquet/CSV exports)

All sources expose `load()` returning the whole series in order. The
fingerprinter needs random access over the full series, so there is no
streaming interface.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, List, NamedTuple, Optional, Union


class SeriesPoint(NamedTuple):
    index: Any      # timestamp or integer offset
    value: float


@dataclass
class SeriesSpec:
    name: str
    kind: str                  # implementation key, e.g. sine, repeated_random, local_table
    length: int = 10_000       # number of points (per repeat for repeated_random)
    start: Union[str, datetime] = "2020-11-01T00:00:00+00:00"  # YAML may hand over a datetime
    step_seconds: float = 1.0
    period: float = 600.0      # points per full cycle for waveforms
    repeats: int = 2
    seed: Optional[int] = None
    # local_table options
    path: Optional[str] = None
    index_field: str = "timestamp"
    value_field: str = "value"

    def start_time(self) -> datetime:
        if isinstance(self.start, datetime):
            return self.start
        return datetime.fromisoformat(str(self.start))

    def timestamp(self, x: int) -> datetime:
        return self.start_time() + timedelta(seconds=x * self.step_seconds)


class SeriesSource:
    """Base interface for all series sources."""
    name: str
    kind: str = "base"

    def __init__(self, spec: SeriesSpec):
        self.spec = spec
        self.name = spec.name

    def metadata(self) -> Dict[str, Any]:
        return {"kind": self.kind, "name": self.name}

    def load(self) -> List[SeriesPoint]:
        raise NotImplementedError
