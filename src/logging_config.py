"""Centralized logging configuration for the task tracker."""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import TextIO

DEFAULT_LEVEL = "WARNING"


class JSONFormatter(logging.Formatter):
    """JSON log formatter, one object per line (NDJSON).

    Fields: timestamp, level, logger, message, and optionally exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(
    level_override: str | None = None, stream: TextIO | None = None
) -> None:
    """Configure logging based on environment variables.

    Logs go to stderr by default so they never mix with the responses
    printed on stdout.

    Args:
        level_override: If set, takes precedence over LOG_LEVEL env var.
        stream: Where to write log records. Defaults to stderr.

    Environment variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR).
            Defaults to WARNING.
        LOG_FORMAT: Output format. "json" for JSON lines,
            anything else for human-readable. Defaults to "text".
    """
    level_name = (level_override or os.getenv("LOG_LEVEL", DEFAULT_LEVEL)).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = getattr(logging, DEFAULT_LEVEL)

    log_format = os.getenv("LOG_FORMAT", "text").lower()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root_logger.addHandler(handler)
