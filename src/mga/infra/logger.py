"""Logger construction from a :class:`~mga.core.models.LoggerConfig`.

All records go to standard error so that results written to standard
output stay machine-readable.  Structured fields are passed through the
standard ``extra=`` mapping and rendered either as ``key=value`` pairs
(text) or as top-level JSON keys (json).
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import IO, Any

from rich.console import Console
from rich.logging import RichHandler

from mga.core.models import JSON_FORMAT, LoggerConfig

LOGGER_NAME = "mga"

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_SLOG_LEVEL_NAMES: dict[int, str] = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}

_RESERVED_ATTRS: frozenset[str] = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName", "markup", "highlighter"}


def parse_level(level: str) -> int:
    """Map ``debug|info|warn|error`` to a :mod:`logging` level.

    Unknown values fall back to ``INFO``.
    """
    return _LEVELS.get(level.strip().lower(), logging.INFO)


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the ``extra=`` fields attached to *record*, in insertion order."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

class KeyValueFormatter(logging.Formatter):
    """Append structured fields to the message as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields = extra_fields(record)
        if not fields:
            return message
        pairs = " ".join(f"{key}={_render_value(value)}" for key, value in fields.items())
        return f"{message} {pairs}"


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": _SLOG_LEVEL_NAMES.get(record.levelno, record.levelname),
            "msg": record.getMessage(),
        }
        payload.update(extra_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return value if value and " " not in value else json.dumps(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(str(item) for item in value) + "]"
    return str(value)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def create_logger(config: LoggerConfig, *, stream: IO[str] | None = None) -> logging.Logger:
    """Configure and return the application logger.

    Parameters
    ----------
    config:
        Level and format to apply.
    stream:
        Destination for log records.  Defaults to standard error.

    The ``mga`` logger is reconfigured on every call: existing handlers
    are removed and it never propagates to the root logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    level = parse_level(config.level)
    handler: logging.Handler
    if config.format == JSON_FORMAT:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonFormatter())
    else:
        console = Console(file=stream) if stream is not None else Console(stderr=True)
        handler = RichHandler(console=console, show_path=False, rich_tracebacks=False)
        handler.setFormatter(KeyValueFormatter("%(message)s"))

    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
