"""Logging setup shared by the web server and the CLI entry points."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logging(log_dir: Path | None = None, *, level: str = "INFO") -> None:
    """Send ``pruntools`` logs to stdout and, when given, log_dir/pruntools.log."""
    formatter = logging.Formatter(
        "[%(asctime)s] %(message)s", datefmt="%H:%M:%S",
    )

    root = logging.getLogger("pruntools")
    root.setLevel(level.upper())
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "pruntools.log", mode="a")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
