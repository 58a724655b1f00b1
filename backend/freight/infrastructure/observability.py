"""Structured Logging — JSON formatter, optional rolling log file, setup on startup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (user_id, entity_kind, operation, error_code, path) surfaced when present
    - JSON format in production, human-readable in development
    - Log file (when configured) rolls daily and keeps every past file

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - TimedRotatingFileHandler for the on-disk log: same rolling-daily behaviour ops
      already tails, no extra library
    - setup_logging called once on startup via lifespan; repeated calls replace handlers
"""

import logging
import json
import os
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler

EXTRA_FIELDS = (
    "user_id", "email", "entity_kind", "operation", "error_code", "path",
)

_HUMAN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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


def _make_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(_HUMAN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(
    level: str = "INFO", fmt: str = "json", log_file: str | None = None,
) -> None:
    """Configure logging for the application."""
    for handler in list(logging.root.handlers):
        if getattr(handler, "_freight_handler", False):
            logging.root.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(TimedRotatingFileHandler(
            log_file, when="midnight", backupCount=0, utc=True, encoding="utf-8",
        ))

    for handler in handlers:
        handler.setFormatter(_make_formatter(fmt))
        handler._freight_handler = True
        logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
