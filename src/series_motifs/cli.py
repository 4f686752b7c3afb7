"""CLI entrypoint.

Commands:
- `series-motifs scan --config configs/scan.yaml`
- `series-motifs demo [--out-dir DIR] [--window-size N] [--no-plot]`
- `series-motifs sources`
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from .config import load_yaml
from .logging_ import setup_logging
from .pipeline.context import ScanRun
from .pipeline.scan import demo_config, scan_series
from .run_id import resolve_out_dir, resolve_run_id
from .sources import list_sources

log = logging.getLogger("series_motifs.cli")


def _results_table(run: ScanRun) -> Table:
    table = Table(title=f"Run {run.run_id}", box=box.SIMPLE_HEAVY)
    table.add_column("Series", style="bold")
    table.add_column("Kind")
    table.add_column("Records", justify="right")
    table.add_column("Windows", justify="right")
    table.add_column("Rejected", justify="right")
    table.add_column("Duplicate groups", justify="right")
    table.add_column("Largest group", justify="right")
    for r in run.results:
        table.add_row(
            r.name,
            r.kind,
            f"{r.records:,}",
            f"{r.metrics.windows_considered:,}",
            f"{r.metrics.windows_rejected:,}",
            f"[red]{r.duplicate_groups:,}[/red]" if r.duplicate_groups else "0",
            str(r.largest_group),
        )
    return table


def _run(cfg: dict, console: Console) -> int:
    run_id = resolve_run_id(cfg)
    # pin the run id so an auto-generated one matches the log file name
    cfg["run"] = {**(cfg.get("run") or {}), "run_id": run_id}
    out_dir = resolve_out_dir(cfg, run_id)
    setup_logging(out_dir=out_dir, run_id=run_id)
    try:
        run = scan_series(cfg)
    except Exception as e:
        log.error(f"Scan failed: {e}", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    console.print(_results_table(run))
    for key, path in run.outputs.items():
        console.print(f"{key}: {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="series-motifs")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("scan", help="Scan the series listed in a YAML config")
    ps.add_argument("--config", required=True)

    pd = sub.add_parser("demo", help="Scan built-in sin/sinc/random series")
    pd.add_argument("--out-dir", default=None, help="Output directory (default: storage/demo)")
    pd.add_argument("--window-size", type=int, default=None, help="Window size (default: 100)")
    pd.add_argument("--no-plot", action="store_true", help="Skip writing plots")

    sub.add_parser("sources", help="List registered source kinds")

    args = p.parse_args(argv)
    console = Console()

    if args.cmd == "sources":
        for kind, origin in sorted(list_sources().items()):
            console.print(f"{kind} ({origin})")
        return 0

    if args.cmd == "demo":
        cfg = demo_config(out_dir=args.out_dir, window_size=args.window_size, plot=not args.no_plot)
    else:
        cfg = load_yaml(args.config)
    return _run(cfg, console)


if __name__ == "__main__":
    raise SystemExit(main())
