"""Run management — identity and per-run log files.

When the CLI is given ``--log-dir``, every command is a run: it gets a UUID
and writes ``<log-dir>/runs/<run_id>/run.log``.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path


def new_run_id() -> str:
    return str(uuid.uuid4())


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def setup_run_logger(log_dir: str | Path, run_id: str) -> tuple[logging.Logger, Path]:
    """Create a file logger for this run and return (logger, log_path)."""
    run_dir = Path(log_dir) / "runs" / run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    log_path = run_dir / "run.log"

    logger = logging.getLogger(f"kanawidth.run.{run_id}")
    logger.setLevel(logging.DEBUG)
    # Keep run output out of the root handlers (stderr stays clean)
    logger.propagate = False

    if not logger.handlers:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger, log_path


def close_run_logger(logger: logging.Logger) -> None:
    """Flush and detach the file handlers of a run logger."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
