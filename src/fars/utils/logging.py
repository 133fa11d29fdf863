"""Structured logging setup shared by the CLI and library modules."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

# Attributes every LogRecord carries; anything else arrived via ``extra=``.
_RESERVED_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})

_TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed with ``logger.warning(..., extra={"year": 2013})`` are
    merged into the payload so skipped years can be filtered downstream.
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

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(level: int = logging.INFO, json_format: bool = False) -> logging.Handler:
    """Attach a single stderr handler to the ``fars`` package logger.

    Calling this more than once replaces the previously installed handler
    rather than stacking duplicates.

    Args:
        level: Logging level for the package logger.
        json_format: Use :class:`JsonFormatter` instead of plain text.

    Returns:
        The installed handler.
    """
    pkg_logger = logging.getLogger("fars")
    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_fars_handler", False):
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    handler._fars_handler = True  # type: ignore[attr-defined]

    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    return handler
