"""Scan configuration.

Scan configs are YAML files:

    run:
      run_id: demo              # or run_id_auto: {prefix_digits: 4, ...}
      out_dir: storage/{run_id}
    fingerprint:
      window_size: 100
      precision: 4              # decimals kept by the value projection
      filters: [accept_all]
      meta: none                # none | value
      verify: false             # re-check value slices of digest groups
    output:
      plot: true
      plot_format: html         # html | svg | png
      report: true
    series:
      - {name: sin, kind: sine, length: 10000, period: 600}

Keeping configs in YAML keeps runs reviewable and versioned alongside results.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Union

import yaml

from .errors import InvalidConfiguration
from .sources.base import SeriesSpec

PLOT_FORMATS = ("html", "svg", "png")


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    sec = cfg.get(key) or {}
    if not isinstance(sec, dict):
        raise InvalidConfiguration(f"'{key}' section must be a mapping, got {type(sec).__name__}")
    return sec


def _reject_unknown(section: str, given: Dict[str, Any], cls) -> None:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(given) - known)
    if unknown:
        raise InvalidConfiguration(f"Unknown key(s) in '{section}': {unknown}. Known: {sorted(known)}")


@dataclass(frozen=True)
class FingerprintConfig:
    window_size: int = 100
    precision: int = 4
    filters: List[Union[str, Dict[str, Any]]] = field(default_factory=lambda: ["accept_all"])
    meta: str = "none"
    verify: bool = False

    def __post_init__(self):
        if isinstance(self.window_size, bool) or not isinstance(self.window_size, int) or self.window_size <= 0:
            raise InvalidConfiguration(f"fingerprint.window_size must be a positive integer, got {self.window_size!r}")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise InvalidConfiguration(f"fingerprint.precision must be a non-negative integer, got {self.precision!r}")
        if not isinstance(self.filters, list):
            raise InvalidConfiguration("fingerprint.filters must be a list")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> FingerprintConfig:
        sec = _section(cfg, "fingerprint")
        _reject_unknown("fingerprint", sec, cls)
        return cls(**sec)


@dataclass(frozen=True)
class OutputConfig:
    plot: bool = True
    plot_format: str = "html"
    report: bool = True

    def __post_init__(self):
        if self.plot_format not in PLOT_FORMATS:
            raise InvalidConfiguration(f"output.plot_format must be one of {PLOT_FORMATS}, got {self.plot_format!r}")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> OutputConfig:
        sec = _section(cfg, "output")
        _reject_unknown("output", sec, cls)
        return cls(**sec)


def series_specs(cfg: Dict[str, Any]) -> List[SeriesSpec]:
    entries = cfg.get("series") or []
    if not isinstance(entries, list):
        raise InvalidConfiguration("'series' must be a list of series mappings")
    specs = []
    for entry in entries:
        if not isinstance(entry, dict) or "name" not in entry or "kind" not in entry:
            raise InvalidConfiguration(f"Each series needs at least 'name' and 'kind': {entry!r}")
        _reject_unknown(f"series[{entry['name']}]", entry, SeriesSpec)
        specs.append(SeriesSpec(**entry))
    return specs
