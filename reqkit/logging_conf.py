"""JSON-lines logging for reqkit.

The helpers never raise on bad input; instead they log a DEBUG `*_fallback`
event carrying the swallowed error, so a caller can turn on LOG_LEVEL=DEBUG and
see why a body came back unformatted. The preview API logs one INFO line per
request.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import LogRecord
from typing import Any

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Attributes every LogRecord has; anything else arrived through `extra=`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Parser messages can quote large chunks of the offending body.
MAX_ERROR_CHARS = 300

_HANDLER_NAME = "reqkit.json"


class JsonFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, message plus extras.

    Fallback records also get `error` (truncated to MAX_ERROR_CHARS) and
    `error_type`.
    """

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        for key, value in extras.items():
            payload.setdefault(key, value)

        error = payload.get("error")
        if isinstance(error, str) and len(error) > MAX_ERROR_CHARS:
            payload["error"] = error[: MAX_ERROR_CHARS - 3] + "..."

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str | int = _DEFAULT_LEVEL) -> None:
    """Install the JSON stdout handler on the "reqkit" logger, once."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger("reqkit")
    root.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the "reqkit" namespace."""
    return logging.getLogger(f"reqkit.{name}" if name else "reqkit")


def log_fallback(logger: logging.Logger, operation: str, error: BaseException) -> None:
    """Record that `operation` (e.g. "json.parse") gave up and returned its input."""
    message = f"{operation}_fallback"
    logger.debug(
        message,
        extra={
            "event": message.replace(".", "_"),
            "error": str(error),
            "error_type": type(error).__name__,
        },
    )
