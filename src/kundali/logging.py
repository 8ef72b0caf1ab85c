"""
Kundali Structured JSON Logging

One JSON object per line, with any extra= fields carried through.
Hosts call setup_logging() once; library modules only use
logging.getLogger(__name__).
"""

import json
import logging
import sys

from typing import Any, TextIO

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}

_PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line

    Args:
        static_fields: Fields added to every record (e.g. {"app": "kundali"})
    """

    def __init__(self, static_fields: dict[str, Any] | None = None):
        super().__init__()
        self.static_fields = dict(static_fields or {})

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            **self.static_fields,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (k, v) for k, v in vars(record).items() if k not in _RECORD_ATTRS
        )
        return json.dumps(payload, default=str)


def setup_logging(
    level: str = "INFO", format_json: bool = True, stream: TextIO | None = None
) -> None:
    """
    Install a single handler on the root logger

    Args:
        level: Log level name, case-insensitive
        format_json: JSON lines when True, plain text otherwise
        stream: Output stream (default: stdout)
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter() if format_json else logging.Formatter(_PLAIN_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())


def get_logger(name: str, extra_fields: dict[str, Any] | None = None) -> logging.Logger:
    """
    Get a logger, wrapped so extra_fields ride along on every record

    Returns:
        The named logger, or a LoggerAdapter when extra_fields are given
    """
    logger = logging.getLogger(name)
    if extra_fields:
        return logging.LoggerAdapter(logger, extra_fields)
    return logger
