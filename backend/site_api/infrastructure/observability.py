"""Structured Logging: JSON lines in production, key=value text in development.

Invariants:
    - Every entry carries timestamp, level, logger and message
    - Request/row fields (LOG_FIELDS) are included only when the record has them
    - setup_logging is idempotent: it replaces the handler it installed earlier
    - httpx request lines are demoted to WARNING (they would log every identity lookup)
"""

import json
import logging
from datetime import datetime, timezone

LOG_FIELDS = ("error_code", "path", "method", "user_id", "table", "row_id")
HANDLER_NAME = "site_api"
_QUIET_LOGGERS = ("httpx", "httpcore")


def _present_fields(record: logging.LogRecord, keys) -> dict:
    return {
        key: record.__dict__[key]
        for key in keys
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for the log collector."""

    def __init__(self, fields: tuple[str, ...] = LOG_FIELDS):
        super().__init__()
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_present_fields(record, self.fields),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with the same fields appended as key=value."""

    def __init__(self, fields: tuple[str, ...] = LOG_FIELDS):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _present_fields(record, self.fields)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
