"""Logging configuration for the interactive todo list.

The screen is repainted after every command, so anything written to the
terminal by a log handler is wiped almost immediately. Detailed logs go
to a file when ``TODO_LOG_FILE`` is set; otherwise only warnings reach
stderr.
"""
from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(raw: Optional[str], default: int) -> int:
    if not raw:
        return default
    value = logging.getLevelName(raw.strip().upper())
    return value if isinstance(value, int) else default


def setup_logging(
    *,
    log_file: Optional[str | Path] = None,
    file_level: Optional[int] = None,
    console_level: int = logging.WARNING,
) -> None:
    """Install handlers on the root logger. Call once, before the first repaint."""
    if log_file is None:
        log_file = os.getenv("TODO_LOG_FILE") or None
    if file_level is None:
        file_level = _level(os.getenv("TODO_LOG_LEVEL"), logging.DEBUG)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
