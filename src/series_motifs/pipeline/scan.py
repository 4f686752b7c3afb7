"""Scan runner.

- resolves run id and output directory
- builds one Fingerprinter from the `fingerprint` section (reused across series)
- for every configured series: load -> process_series -> duplicates -> outputs
- writes a run manifest and a summary report

This module is the entrypoint behind `series-motifs scan` and `series-motifs demo`.
"""

from __future__ import annotations
import copy
import logging
import os
import time
from typing import Any, Dict

from tqdm import tqdm

from ..config import FingerprintConfig, OutputConfig, series_specs
from ..fingerprints import Fingerprinter, make_filters
from ..fingerprints.projections import make_meta, point_index, quantized_value
from ..render import plot_timeseries
from ..report.summary import write_summary
from ..report.writer import write_manifest, write_occurrences
from ..run_id import resolve_out_dir, resolve_run_id
from ..sources import SeriesSpec, make_source
from ..utils.hashing import config_digest
from .context import ScanRun, SeriesResult

log = logging.getLogger("series_motifs.scan")

DEMO_CONFIG: Dict[str, Any] = {
    "run": {"run_id": "demo", "out_dir": "storage/{run_id}"},
    "fingerprint": {
        "window_size": 100,
        "precision": 4,
        "filters": ["accept_all"],
        "meta": "none",
        "verify": False,
    },
    "output": {"plot": True, "plot_format": "html", "report": True},
    "series": [
        # periodic: every window recurs once per period
        {"name": "sin", "kind": "sine", "length": 10_000, "period": 600.0},
        # shouldn't have repeating sequences
        {"name": "sinc", "kind": "sinc", "length": 10_000, "period": 600.0},
        # 5000 random values repeated twice
        {"name": "random", "kind": "repeated_random", "length": 5_000, "repeats": 2},
    ],
}


def demo_config(out_dir: str | None = None, window_size: int | None = None, plot: bool = True) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEMO_CONFIG)
    if out_dir:
        cfg["run"]["out_dir"] = out_dir
    if window_size is not None:
        cfg["fingerprint"]["window_size"] = window_size
    cfg["output"]["plot"] = plot
    return cfg


def make_fingerprinter(fp_cfg: FingerprintConfig) -> Fingerprinter:
    return Fingerprinter(
        get_value=quantized_value(fp_cfg.precision),
        get_index=point_index,
        get_meta=make_meta(fp_cfg.meta),
        window_size=fp_cfg.window_size,
        sequence_filter=make_filters(fp_cfg.filters),
    )


def _scan_one(
    fp: Fingerprinter,
    spec: SeriesSpec,
    fp_cfg: FingerprintConfig,
    out_cfg: OutputConfig,
    out_dir: str,
) -> SeriesResult:
    src = make_source(spec)
    log.info(f"Loading series '{spec.name}' ({src.metadata()})")
    data = src.load()

    fp.process_series(data)
    duplicates = list(fp.duplicates(verify=fp_cfg.verify))

    result = SeriesResult(
        name=spec.name,
        kind=spec.kind,
        records=len(data),
        metrics=fp.metrics,
        duplicate_groups=len(duplicates),
        largest_group=max((len(g) for g in duplicates), default=0),
        example_starts=[occ.start_index for occ in duplicates[0]] if duplicates else [],
    )

    if out_cfg.report:
        path = os.path.join(out_dir, "occurrences", f"{spec.name}.parquet")
        result.outputs["occurrences"] = write_occurrences(path, fp, verify=fp_cfg.verify)

    if out_cfg.plot:
        if data:
            path = os.path.join(out_dir, "plots", f"{spec.name}.{out_cfg.plot_format}")
            result.outputs["plot"] = plot_timeseries(path, spec.name, data, duplicates)
        else:
            log.warning(f"Series '{spec.name}' is empty; skipping plot")

    return result


def scan_series(cfg: Dict[str, Any]) -> ScanRun:
    """Run a configured scan and write its outputs. Returns the run record."""
    fp_cfg = FingerprintConfig.from_dict(cfg)
    out_cfg = OutputConfig.from_dict(cfg)
    specs = series_specs(cfg)

    run_id = resolve_run_id(cfg)
    out_dir = resolve_out_dir(cfg, run_id)
    os.makedirs(out_dir, exist_ok=True)

    run = ScanRun(run_id=run_id, out_dir=out_dir, config_fingerprint=config_digest(cfg))
    fp = make_fingerprinter(fp_cfg)
    log.info(f"Run {run_id}: {len(specs)} series, window={fp_cfg.window_size}, precision={fp_cfg.precision}")

    for spec in tqdm(specs, desc="series", unit="series", disable=len(specs) < 2):
        result = _scan_one(fp, spec, fp_cfg, out_cfg, out_dir)
        log.info(
            f"[{spec.name}] {result.records} records, {result.duplicate_groups} duplicate groups "
            f"(largest {result.largest_group})"
        )
        run.results.append(result)

    run.finished_at_ms = int(time.time() * 1000)
    run.outputs["manifest"] = os.path.join(out_dir, "manifests", f"{run_id}.json")
    run.outputs["summary"] = os.path.join(out_dir, "reports", f"{run_id}_summary.txt")
    write_manifest(run.outputs["manifest"], run.manifest())
    write_summary(run.outputs["summary"], run)
    return run
