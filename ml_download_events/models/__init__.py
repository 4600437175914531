"""Event models namespace.

Call-sites can simply::

    from ml_download_events.models import LogEvent, ErrorCode
"""

from ml_download_events.models.enums import DownloadStatus, ErrorCode, EventName, ModelType
from ml_download_events.models.events import (
    LogEvent,
    LogEventBuilder,
    ModelDownloadLogEvent,
    ModelDownloadLogEventBuilder,
    ModelInfo,
    ModelInfoBuilder,
    ModelOptions,
    ModelOptionsBuilder,
    SystemInfo,
    SystemInfoBuilder,
    attach_system_info,
)

__all__ = [
    # Enums
    "DownloadStatus",
    "ErrorCode",
    "EventName",
    "ModelType",
    # Entities
    "LogEvent",
    "ModelDownloadLogEvent",
    "ModelInfo",
    "ModelOptions",
    "SystemInfo",
    # Builders
    "LogEventBuilder",
    "ModelDownloadLogEventBuilder",
    "ModelInfoBuilder",
    "ModelOptionsBuilder",
    "SystemInfoBuilder",
    # Helpers
    "attach_system_info",
]
