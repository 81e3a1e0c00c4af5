"""
Handlers for the "ta_engine" logger tree. Only main.py calls setup_logging;
indicator, signal, backtest and risk modules just emit through named
child loggers and leave handler choice to the embedding application.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Attach a stderr handler, plus a file under log_dir when both log_dir and
    log_file are set, and return the "ta_engine" logger. Calling it again
    replaces the handlers. stdout is left to --json payloads and summaries.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger("ta_engine")
    root.setLevel(log_level)
    root.handlers.clear()

    fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_fmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt, datefmt=date_fmt)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir and log_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        path = log_dir / log_file
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    return root
