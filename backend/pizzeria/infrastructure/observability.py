"""Structured Logging — entity-aware formatters and handler setup.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Entity context (entity, entity_id) and error context (error_code, path)
      appear in BOTH formats when present, and are omitted when None
    - Timestamps come from the record's creation time, not the format call
    - At most one pizzeria handler on the root logger: setup_logging replaces it

Design Decisions:
    - stdlib logging only: routes attach context through ``extra=``
    - Handler found by name, so repeated app startups in one process
      (tests, reloads) never duplicate output
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "pizzeria"
CONTEXT_FIELDS = ("entity", "entity_id", "error_code", "path")
TEXT_LAYOUT = "%(asctime)s %(levelname)s %(name)s — %(message)s"


def record_context(record: logging.LogRecord) -> dict:
    """Context fields set on the record via ``extra=``, in display order."""
    context = {}
    for key in CONTEXT_FIELDS:
        val = record.__dict__.get(key)
        if val is not None:
            context[key] = val
    return context


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable line with a trailing ``[key=value ...]`` context block."""

    def __init__(self):
        super().__init__(TEXT_LAYOUT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def _build_formatter(fmt: str) -> logging.Formatter:
    return JSONFormatter() if fmt == "json" else TextFormatter()


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the pizzeria root handler. Returns the new handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(_build_formatter(fmt))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
