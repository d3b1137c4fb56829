"""Logging configuration for the taletree CLI.

Narration goes to stdout through ``print``; diagnostics go through the
standard ``logging`` module to stderr so the two never interleave on a pipe.

Usage:
    from taletree.core.log import setup_logging

    setup_logging("DEBUG")
    logger = logging.getLogger(__name__)
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str | None, default: int = logging.WARNING) -> int:
    """Translate a level name into a logging constant, falling back to default."""
    if not level:
        return default
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else default


def setup_logging(level: str | None = "WARNING", log_file: Path | str | None = None) -> None:
    """Configure the ``taletree`` logger hierarchy.

    Args:
        level: Level name such as ``"DEBUG"``; unknown names mean WARNING.
        log_file: Optional file that receives the same records with timestamps.
    """
    numeric_level = parse_level(level)
    root = logging.getLogger("taletree")
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(file_handler)

    root.propagate = False
