"""Structured JSON logging for the event encoder."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from ml_download_events.settings import LOG_LEVEL

LOGGER_NAME = "ml_download_events"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        if hasattr(record, "extra") and isinstance(record.extra, dict):
            payload.update(record.extra)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"))


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stdout JSON handler to the package logger.

    A no-op once the package logger already has handlers, so repeated calls
    from application start-up code are safe.  The root logger is left alone.
    """
    pkg = logging.getLogger(LOGGER_NAME)
    if pkg.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    pkg.setLevel(level or LOG_LEVEL)
    pkg.addHandler(handler)


logger = logging.getLogger(LOGGER_NAME)
