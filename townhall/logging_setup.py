"""
Logging configuration.

Console logging for the whole package, plus an optional append-only
JSON-lines request log (one line per API call) when REQUEST_LOG_PATH is set.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict

from townhall.config import Settings

REQUEST_LOGGER_NAME = "townhall.requests"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonLinesFormatter(logging.Formatter):
    """One JSON object per record: timestamp, message and the `event` extra."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "event", {}) or {})
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    if settings.request_log_path:
        attach_request_log(settings.request_log_path)


def attach_request_log(path: str) -> logging.Handler:
    """Append request events to `path` as JSON lines (idempotent per path)."""
    request_logger = logging.getLogger(REQUEST_LOGGER_NAME)
    target = str(Path(path).resolve())

    for handler in request_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return handler

    Path(target).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(target, mode="a", encoding="utf-8")
    handler.setFormatter(JsonLinesFormatter())
    request_logger.addHandler(handler)
    request_logger.setLevel(logging.INFO)
    return handler


def log_request(operation: str, **fields: Any) -> None:
    """Emit one request event (written to the JSON-lines file when one is attached)."""
    logging.getLogger(REQUEST_LOGGER_NAME).info(operation, extra={"event": {"operation": operation, **fields}})
