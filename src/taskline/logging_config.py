"""Logging setup for the interactive shell.

Replies to the user are written to stdout through ``print_fn``; log records
always go to stderr, so redirecting one never mixes in the other.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime

DEFAULT_LEVEL = "WARNING"
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON line, for piping stderr into log tooling."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


def configure_logging(level_override: str | None = None) -> None:
    """Point the root logger at stderr.

    The shell stays quiet at WARNING unless ``--log-level`` or ``LOG_LEVEL``
    asks for more; dispatch decisions appear at DEBUG and reported user
    errors at INFO. ``LOG_FORMAT=json`` switches to JSON lines.
    """
    level = _resolve_level(level_override or os.getenv("LOG_LEVEL", DEFAULT_LEVEL))

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(os.getenv("LOG_FORMAT", "text")))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
