"""Logging utilities with per-run file logging and excerpt truncation."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

WORKSPACE = Path(__file__).resolve().parent.parent / "workspace"
LOGS_DIR = WORKSPACE / "logs"


def _ensure_dirs() -> None:
    LOGS_DIR.mkdir(parents=True, exist_ok=True)


class TruncatingFormatter(logging.Formatter):
    """Formatter that cuts overly long messages (e.g. quoted input text)."""

    max_length = 500

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        if len(msg) > self.max_length:
            msg = msg[: self.max_length] + f"... [{len(msg) - self.max_length} chars truncated]"
        return msg


def setup_logger(
    name: str = "frdetect",
    verbosity: int = 1,
    run_id: Optional[str] = None,
) -> logging.Logger:
    """Create or retrieve a configured logger."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logger.setLevel(level)

    fmt = TruncatingFormatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    if run_id:
        _ensure_dirs()
        fh = logging.FileHandler(LOGS_DIR / f"{run_id}.log", encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def generate_run_id() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
