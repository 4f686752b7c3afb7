"""Run identifiers for scans.

A scan's run id names its log file, manifest and summary, and fills the
`{run_id}` placeholder of `run.out_dir`. It is either pinned in the config
(`run.run_id`) or built from `run.run_id_auto`:

    run:
      run_id_auto: {prefix_digits: 4, suffix_digits: 6}   # -> sin_2026_143015
      out_dir: storage/{run_id}

Auto ids are `<first series name>_<leading stamp digits>_<trailing stamp digits>`
where the stamp is the UTC time as YYYYMMDDHHMMSS.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

DEFAULT_RUN_ID = "run"
DEFAULT_OUT_DIR = "storage"


@dataclass(frozen=True)
class RunIdAuto:
    prefix_digits: int = 4  # year
    suffix_digits: int = 6  # HHMMSS
    include_input_name: bool = True
    separator: str = "_"

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> RunIdAuto:
        return cls(
            prefix_digits=int(d.get("prefix_digits", 4)),
            suffix_digits=int(d.get("suffix_digits", 6)),
            include_input_name=bool(d.get("include_input_name", True)),
            separator=str(d.get("separator", "_")),
        )


def _utc_stamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now(timezone.utc)).strftime("%Y%m%d%H%M%S")


def _series_label(cfg: Dict[str, Any]) -> str:
    series = cfg.get("series") or []
    raw = str(series[0].get("name") or "") if series else ""
    return re.sub(r"[^\w\-]", "_", raw) or DEFAULT_RUN_ID


def generate_run_id(cfg: Dict[str, Any], auto_cfg: Dict[str, Any], now: Optional[datetime] = None) -> str:
    """Build an id from `run.run_id_auto` settings, the first series name and the clock."""
    auto = RunIdAuto.from_dict(auto_cfg)
    stamp = _utc_stamp(now)

    parts: List[str] = []
    if auto.include_input_name:
        parts.append(_series_label(cfg))
    if auto.prefix_digits > 0:
        parts.append(stamp[:auto.prefix_digits])
    if auto.suffix_digits > 0:
        parts.append(stamp[-auto.suffix_digits:])
    return auto.separator.join(parts) or DEFAULT_RUN_ID


def resolve_run_id(cfg: Dict[str, Any]) -> str:
    run = cfg.get("run") or {}
    pinned = "" if run.get("run_id") is None else str(run["run_id"]).strip()
    if pinned:
        return pinned
    auto_cfg = run.get("run_id_auto")
    if isinstance(auto_cfg, dict) and auto_cfg.get("enabled", True):
        return generate_run_id(cfg, auto_cfg)
    return DEFAULT_RUN_ID


def resolve_out_dir(cfg: Dict[str, Any], run_id: str) -> str:
    out_dir = (cfg.get("run") or {}).get("out_dir") or DEFAULT_OUT_DIR
    return str(out_dir).replace("{run_id}", run_id)
