"""Structured Logging — JSON formatter and setup for docstore logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (document_id, operation, match_count, error_code) surfaced when present
    - JSON format by default, human-readable with fmt="text"

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging is opt-in: a library never configures the root logger on import
    - setup_logging is idempotent: one docstore handler at a time
"""

import logging
import json
from datetime import datetime, timezone

from docstore.config import get_settings

_EXTRA_FIELDS = ("document_id", "operation", "match_count", "error_code")

_installed_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a stream handler to the docstore logger and return it.

    Calling again replaces the handler installed by the previous call.
    """
    global _installed_handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root = logging.getLogger("docstore")
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler


def configure_from_settings() -> logging.Handler:
    """setup_logging driven by DOCSTORE_LOG_LEVEL / DOCSTORE_LOG_FORMAT."""
    settings = get_settings()
    return setup_logging(settings.log_level, settings.log_format)
