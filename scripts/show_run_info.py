"""Show information about a completed scan run: per-series metrics and the
largest duplicate groups found.

Usage:
    python scripts/show_run_info.py <output_dir> [--top N]
"""

from __future__ import annotations
import argparse
import glob
import json
import os
import sys
from collections import Counter

import pyarrow.parquet as pq


def show_run_info(out_dir: str, top: int = 5) -> int:
    print(f"\n{'='*60}")
    print(f"Run Information: {out_dir}")
    print(f"{'='*60}\n")

    manifest_files = sorted(glob.glob(os.path.join(out_dir, "manifests", "*.json")))
    if not manifest_files:
        print(f"No manifest found under {out_dir}/manifests")
        return 1

    with open(manifest_files[-1], "r", encoding="utf-8") as f:
        manifest = json.load(f)

    print(f"Run ID: {manifest.get('run_id')}")
    print(f"Config fingerprint: {str(manifest.get('config_fingerprint', ''))[:16]}")
    print()

    for series in manifest.get("series", []):
        metrics = series.get("metrics", {})
        print(f"{series['name']} ({series['kind']})")
        print("-" * 60)
        print(f"  Records: {series.get('records', 0):,}")
        print(f"  Windows considered: {metrics.get('windows_considered', 0):,}")
        print(f"  Duplicate groups: {series.get('duplicate_groups', 0):,}")

        occ_path = series.get("outputs", {}).get("occurrences")
        if occ_path and os.path.exists(occ_path):
            rows = pq.read_table(occ_path, columns=["group_id", "start_index"]).to_pylist()
            sizes = Counter(r["group_id"] for r in rows)
            starts = {}
            for r in rows:
                starts.setdefault(r["group_id"], []).append(r["start_index"])
            for group_id, size in sizes.most_common(top):
                shown = ", ".join(str(s) for s in starts[group_id][:3])
                print(f"    group {group_id}: {size} occurrences (starts: {shown}{' ...' if size > 3 else ''})")
        print()
    return 0


if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("out_dir")
    p.add_argument("--top", type=int, default=5)
    args = p.parse_args()
    sys.exit(show_run_info(args.out_dir, args.top))
