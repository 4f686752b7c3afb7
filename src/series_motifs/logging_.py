"""Logging utilities.

Standard `logging` with a plain `time level logger | message` format.

- Logs go to: `<log_dir>/<run_id>.log` (default `<out_dir>/logs`)
- Also prints concise progress to the console.
- Calling `setup_logging` again (one process, several runs) replaces the
  handlers it installed earlier instead of stacking them.
"""

from __future__ import annotations
import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_installed: list[logging.Handler] = []


def setup_logging(out_dir: str, run_id: str, log_dir: Optional[str] = None, level: int = logging.INFO) -> str:
    """
    Setup logging for one run and return the log file path.

    Args:
        out_dir: Output directory of the run
        run_id: Run identifier, used as the log file name
        log_dir: Log directory (if None, uses out_dir/logs)
        level: Root log level
    """
    if log_dir is None:
        log_dir = os.path.join(out_dir, "logs")

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, f"{run_id}.log")

    root = logging.getLogger()
    root.setLevel(level)
    while _installed:
        h = _installed.pop()
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(fmt)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)

    for h in (fh, ch):
        root.addHandler(h)
        _installed.append(h)
    return log_path
