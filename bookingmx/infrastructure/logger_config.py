"""JSON log lines on stdout for every `bookingmx.*` logger."""

import json
import logging
import sys
from datetime import datetime, timezone

ROOT_LOGGER_NAME = "bookingmx"


class JsonFormatter(logging.Formatter):
    """
    Render a record as one JSON object. Values passed through
    `extra={"extra_fields": {...}}` (reservation ids and the like) become top-level keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **getattr(record, "extra_fields", {}),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Give the package logger a single stdout JSON handler and set its level.
    Safe to call again: the handler is only added once.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level.upper())
    return logger
