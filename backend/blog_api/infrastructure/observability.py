"""Structured Logging - JSON formatter and root handler setup for the blog API.

Invariants:
    - Every line carries timestamp, level, logger name and message
    - Store context (blog_id, username, error_code, path, operation) is
      surfaced when the call site passed it through `extra`
    - At most one handler installed by setup_logging is attached to root,
      however many times the app lifespan runs in one process
    - Formatting never raises on an unserializable extra value

Design Decisions:
    - JSONFormatter on stdlib logging over a third-party log library: the
      services already log through logging.getLogger(__name__), nothing to wrap
    - setup_logging called once per lifespan startup; a repeated call swaps
      the handler instead of stacking a second one (tests and reloads start
      the app more than once)
    - Text format for local runs (LOG_FORMAT=text), JSON everywhere else
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("blog_id", "username", "error_code", "path", "operation")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_installed_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application's root log handler."""
    global _installed_handler

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler
