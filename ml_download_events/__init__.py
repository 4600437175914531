"""Telemetry event model and JSON encoder for the ML model downloader."""

from ml_download_events.encoder import EventSink, emit, encode, json_transformer
from ml_download_events.errors import (
    EncodingError,
    EventModelError,
    InvalidFieldValueError,
    MissingRequiredFieldError,
)
from ml_download_events.models import *  # noqa: F401,F403
from ml_download_events.models import __all__ as _models_all
from ml_download_events.utils.logger import configure_logging

__all__ = [
    *_models_all,
    "EncodingError",
    "EventModelError",
    "EventSink",
    "InvalidFieldValueError",
    "MissingRequiredFieldError",
    "configure_logging",
    "emit",
    "encode",
    "json_transformer",
]
