"""Local table source: one series read from a Parquet or CSV file.

Columns:
- `index_field` (default "timestamp"): timestamps or integer offsets
- `value_field` (default "value"): numeric values

Rows are kept in file order; the file is expected to be sorted already.
"""

from __future__ import annotations
import logging
import os
from typing import Any, Dict, List

import pyarrow as pa
import pyarrow.csv as pacsv
import pyarrow.parquet as pq

from .base import SeriesPoint, SeriesSource, SeriesSpec

log = logging.getLogger("series_motifs.sources.local_table")


class LocalTableSource(SeriesSource):
    kind = "local_table"

    def __init__(self, spec: SeriesSpec):
        super().__init__(spec)
        if not spec.path:
            raise ValueError(f"Series '{spec.name}': local_table sources require a 'path'")
        self.path = spec.path

    def metadata(self) -> Dict[str, Any]:
        return {
            **super().metadata(),
            "path": self.path,
            "size_bytes": os.path.getsize(self.path) if os.path.exists(self.path) else None,
        }

    def _read_table(self) -> pa.Table:
        if not os.path.exists(self.path):
            raise FileNotFoundError(f"Series file not found: {self.path}")
        ext = os.path.splitext(self.path)[1].lower()
        if ext == ".parquet":
            return pq.read_table(self.path, columns=[self.spec.index_field, self.spec.value_field])
        if ext == ".csv":
            return pacsv.read_csv(self.path)
        raise ValueError(f"Unsupported table format '{ext}' for {self.path} (expected .parquet or .csv)")

    def load(self) -> List[SeriesPoint]:
        table = self._read_table()
        missing = [c for c in (self.spec.index_field, self.spec.value_field) if c not in table.column_names]
        if missing:
            raise ValueError(f"{self.path}: missing column(s) {missing}; found {table.column_names}")
        indexes = table.column(self.spec.index_field).to_pylist()
        values = table.column(self.spec.value_field).to_pylist()
        points = []
        skipped = 0
        for idx, value in zip(indexes, values):
            if idx is None or value is None:
                skipped += 1
                continue
            points.append(SeriesPoint(idx, float(value)))
        if skipped:
            log.warning(f"{self.path}: skipped {skipped} row(s) with null index or value")
        return points
