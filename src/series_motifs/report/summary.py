"""Plain-text summary report written at the end of a scan run."""

from __future__ import annotations
import os
from datetime import datetime

from ..pipeline.context import ScanRun


def render_summary(run: ScanRun) -> str:
    lines = []
    lines.append("=" * 70)
    lines.append("SERIES MOTIFS - RUN SUMMARY REPORT")
    lines.append("=" * 70)
    lines.append("")
    lines.append(f"Run ID: {run.run_id}")
    lines.append(f"Config fingerprint: {run.config_fingerprint[:16]}")
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")

    if not run.results:
        lines.append("WARNING: No series were scanned. Check the 'series' section of the config.")
        lines.append("")

    for r in run.results:
        m = r.metrics
        lines.append("=" * 70)
        lines.append(f"SERIES: {r.name} ({r.kind})")
        lines.append("=" * 70)
        lines.append(f"Records: {r.records:,}")
        lines.append(f"Window size: {m.window_size}")
        if r.records < m.window_size:
            lines.append("Series shorter than the window; nothing was scanned.")
        lines.append(f"Windows considered: {m.windows_considered:,}")
        lines.append(f"Windows rejected by filter: {m.windows_rejected:,} ({m.rejection_rate_pct:.1f}%)")
        lines.append(f"Distinct digests: {m.distinct_digests:,}")
        lines.append(f"Duplicate groups: {r.duplicate_groups:,}")
        if r.duplicate_groups:
            lines.append(f"Largest group: {r.largest_group} occurrences")
            starts = ", ".join(str(s) for s in r.example_starts[:5])
            more = " ..." if len(r.example_starts) > 5 else ""
            lines.append(f"Example group starts: {starts}{more}")
        for key, path in r.outputs.items():
            lines.append(f"{key}: {path}")
        lines.append("")

    return "\n".join(lines)


def write_summary(path: str, run: ScanRun) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_summary(run))
    return path
