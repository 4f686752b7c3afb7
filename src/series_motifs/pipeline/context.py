"""Pipeline result model.

SeriesResult is what one scanned series leaves behind; ScanRun collects them
for a whole run. Reports, the manifest and the CLI table all read from here.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time

from ..fingerprints import ScanMetrics


@dataclass
class SeriesResult:
    name: str
    kind: str
    records: int
    metrics: ScanMetrics
    duplicate_groups: int = 0
    largest_group: int = 0
    # start indexes of the first reported duplicate group
    example_starts: List[Any] = field(default_factory=list)
    outputs: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "records": self.records,
            "metrics": self.metrics.to_dict(),
            "duplicate_groups": self.duplicate_groups,
            "largest_group": self.largest_group,
            "example_starts": [str(s) for s in self.example_starts],
            "outputs": dict(self.outputs),
        }


@dataclass
class ScanRun:
    run_id: str
    out_dir: str
    config_fingerprint: str
    results: List[SeriesResult] = field(default_factory=list)
    started_at_ms: int = field(default_factory=lambda: int(time.time() * 1000))
    finished_at_ms: Optional[int] = None
    outputs: Dict[str, str] = field(default_factory=dict)

    def manifest(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "out_dir": self.out_dir,
            "config_fingerprint": self.config_fingerprint,
            "started_at_ms": self.started_at_ms,
            "finished_at_ms": self.finished_at_ms,
            "series": [r.to_dict() for r in self.results],
            "outputs": dict(self.outputs),
        }
