"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

_RESERVED = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.
    
    Merges any `extra=` kwargs directly into the payload.
    Supports structured queries in log aggregation systems.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        # Merge any extra fields passed via logger.info(..., extra={...})
        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(level: int = logging.WARNING, json_format: bool = False) -> logging.Handler:
    """Attach a single stderr handler to the ``asereport`` package logger.

    Calling it again replaces the previous handler, so the CLI can be
    invoked repeatedly in one process (e.g. from tests).

    Args:
        level: Logging level for the package logger.
        json_format: Emit single-line JSON (``JsonFormatter``) instead of
            plain text.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger("asereport")
    for existing in list(logger.handlers):
        if getattr(existing, "_asereport_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler._asereport_handler = True
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
