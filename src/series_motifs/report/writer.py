"""Report writers.

We keep writers simple:
- `occurrences.parquet` per series: one row per occurrence of every duplicate group
- a run manifest (JSON) at the end

Index columns take their Arrow type from the index values themselves, so
timestamp-indexed and offset-indexed series both round-trip.
"""

from __future__ import annotations
import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, List

import pyarrow as pa
import pyarrow.parquet as pq

from ..fingerprints import Fingerprinter, Occurrence
from ..utils.hashing import hash_sequence

log = logging.getLogger("series_motifs.report.writer")


def _index_type(samples: List[Any]) -> pa.DataType:
    """Arrow type covering every index value; mixed int/float widens to float64, anything else mixed is string."""
    if not samples:
        return pa.int64()
    if all(isinstance(s, datetime) for s in samples):
        aware = {s.tzinfo is not None for s in samples}
        if aware == {True}:
            return pa.timestamp("us", tz="UTC")
        if aware == {False}:
            return pa.timestamp("us")
        return pa.string()
    if any(isinstance(s, bool) for s in samples):
        return pa.string()
    if all(isinstance(s, int) for s in samples):
        return pa.int64()
    if all(isinstance(s, (int, float)) for s in samples):
        return pa.float64()
    return pa.string()


def occurrences_schema(index_type: pa.DataType) -> pa.Schema:
    return pa.schema([
        ("group_id", pa.int64()),
        ("digest", pa.uint64()),
        ("group_size", pa.int64()),
        ("offset", pa.int64()),
        ("start_index", index_type),
        ("end_index", index_type),
    ], metadata={"schema_version": "v1"})


def occurrence_rows(fp: Fingerprinter, verify: bool = False) -> List[Dict[str, Any]]:
    """Flatten duplicate groups into rows, groups numbered in discovery order."""
    rows: List[Dict[str, Any]] = []
    if verify:
        groups = [(None, g) for g in fp.duplicates(verify=True)]
    else:
        groups = [(d, g) for d, g in fp.groups() if len(g) > 1]
    for group_id, (digest, group) in enumerate(groups):
        for occ in group:
            rows.append({
                "group_id": group_id,
                "digest": digest if digest is not None else _digest_of(fp, occ),
                "group_size": len(group),
                "offset": occ.offset,
                "start_index": occ.start_index,
                "end_index": occ.end_index,
            })
    return rows


def _digest_of(fp: Fingerprinter, occ: Occurrence) -> int:
    return hash_sequence(fp.window_values(occ))


def write_occurrences(path: str, fp: Fingerprinter, verify: bool = False) -> str:
    """Write the duplicate occurrences of the last scan to a Parquet file."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    rows = occurrence_rows(fp, verify=verify)
    index_type = _index_type([r[k] for r in rows for k in ("start_index", "end_index")])
    for r in rows:
        for k in ("start_index", "end_index"):
            if pa.types.is_string(index_type):
                r[k] = str(r[k])
            elif pa.types.is_floating(index_type):
                r[k] = float(r[k])
    table = pa.Table.from_pylist(rows, schema=occurrences_schema(index_type))
    pq.write_table(table, path, compression="zstd")
    log.info(f"Wrote {len(rows)} occurrence rows to {path}")
    return path


def write_manifest(path: str, manifest: Dict[str, Any]) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False, default=str)
    return path
