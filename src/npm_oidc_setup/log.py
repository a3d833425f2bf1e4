"""Logging setup for diagnostic output.

User-facing progress is printed directly by the CLI; this logger carries
debug traces of directory and subprocess handling.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, TextIO

_LEVEL_ABBREV: Dict[int, str] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("npm_oidc_setup")


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Attach a single stderr handler using ``mm-dd HH:MM:SS [LVL] message``."""
    resolved_level = getattr(logging, (level or "WARNING").upper(), None)
    if not isinstance(resolved_level, int):
        resolved_level = logging.WARNING

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        _AbbrevLevelFormatter(fmt="%(asctime)s [%(levelabbr)s] %(message)s", datefmt="%m-%d %H:%M:%S")
    )

    log.handlers.clear()
    log.addHandler(handler)
    log.setLevel(resolved_level)
    log.propagate = False
