"""Per-scan metrics. Reset on every `Fingerprinter.process_series` call."""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class ScanMetrics:
    """Counters for one sliding-window scan."""

    series_length: int = 0
    window_size: int = 0
    windows_considered: int = 0
    windows_rejected: int = 0
    windows_hashed: int = 0
    distinct_digests: int = 0
    duplicate_groups: int = 0
    duplicate_occurrences: int = 0

    @property
    def rejection_rate_pct(self) -> float:
        if self.windows_considered == 0:
            return 0.0
        return 100.0 * self.windows_rejected / self.windows_considered

    @property
    def duplication_rate_pct(self) -> float:
        """Share of hashed windows that belong to a duplicate group."""
        if self.windows_hashed == 0:
            return 0.0
        return 100.0 * self.duplicate_occurrences / self.windows_hashed

    def record_window(self, accepted: bool) -> None:
        self.windows_considered += 1
        if accepted:
            self.windows_hashed += 1
        else:
            self.windows_rejected += 1

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["rejection_rate_pct"] = self.rejection_rate_pct
        out["duplication_rate_pct"] = self.duplication_rate_pct
        return out

    def summary(self) -> str:
        lines = [
            "=== Scan Metrics ===",
            f"Series length: {self.series_length}",
            f"Window size: {self.window_size}",
            f"Windows considered: {self.windows_considered}",
            f"Windows rejected by filter: {self.windows_rejected} ({self.rejection_rate_pct:.2f}%)",
            f"Windows hashed: {self.windows_hashed}",
            f"Distinct digests: {self.distinct_digests}",
            f"Duplicate groups: {self.duplicate_groups}",
            f"Occurrences in duplicate groups: {self.duplicate_occurrences} ({self.duplication_rate_pct:.2f}%)",
        ]
        return "\n".join(lines)
