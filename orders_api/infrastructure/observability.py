"""Structured Logging: JSON formatter and setup for the API process.

What gets logged:
    - services: one INFO line per create/update/delete, tagged with resource,
      resource_id and (for deletes) affected_rows
    - routes: WARNING when a delete matched no row
    - error handlers: WARNING for 4xx (error_code, path, method), ERROR for 5xx
    - database layer: ERROR with the failed step before it becomes DatabaseError

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, path, resource, ...) surfaced when present
    - JSON format by default, human-readable when log_format != "json"

Design Decisions:
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "error_code", "path", "method", "resource", "resource_id", "affected_rows",
)


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
