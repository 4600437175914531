"""Immutable model-download log events and their builders.

Every entity is a frozen pydantic model.  Instances are assembled through a
mutable builder that collects values field by field and validates them all at
once in ``build()``.  The wire name of every field is pinned through
``serialization_alias`` so renaming a Python attribute never changes the
payload the backend receives.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ml_download_events.errors import InvalidFieldValueError, MissingRequiredFieldError
from ml_download_events.models.enums import DownloadStatus, ErrorCode, EventName, ModelType
from ml_download_events.settings import MAX_INT32, MAX_INT64, NO_INT_VALUE
from ml_download_events.utils.logger import logger

__all__ = [
    "LogEvent",
    "LogEventBuilder",
    "ModelDownloadLogEvent",
    "ModelDownloadLogEventBuilder",
    "ModelInfo",
    "ModelInfoBuilder",
    "ModelOptions",
    "ModelOptionsBuilder",
    "SystemInfo",
    "SystemInfoBuilder",
    "attach_system_info",
]


class _EventModel(BaseModel):
    # fields like model_info collide with pydantic's reserved "model_" prefix
    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())


# ---------------------------------------------------------------------------
# Builder plumbing
# ---------------------------------------------------------------------------


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def _enum_input(enum_cls: Type[Enum], value: Any) -> Any:
    """Admit only plain ints or members of *enum_cls*; pydantic maps ints to members."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected a {enum_cls.__name__} member, got {value!r}")
    if isinstance(value, Enum) and not isinstance(value, enum_cls):
        raise ValueError(f"expected a {enum_cls.__name__} member, got {value!r}")
    return value


class _Builder:
    """Mutable field accumulator shared by all entity builders.

    A field is present iff its name is a key of ``_values``; setting ``None``
    removes it again.  Setters never validate, ``build()`` does it all.
    """

    _model: ClassVar[Type[_EventModel]]

    def __init__(self, **values: Any) -> None:
        self._values: Dict[str, Any] = {}
        for name, value in values.items():
            self._set(name, value)

    def _set(self, name: str, value: Any):
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value
        return self

    def build(self):
        entity = self._model.__name__
        for name, field in self._model.model_fields.items():
            if field.is_required() and name not in self._values:
                logger.debug(
                    "Builder finalize failed",
                    extra={"extra": {"entity": entity, "field": name}},
                )
                raise MissingRequiredFieldError(entity, name)
        try:
            return self._model(**self._values)
        except ValidationError as exc:
            raise InvalidFieldValueError(entity, _describe(exc)) from exc


# ---------------------------------------------------------------------------
# SystemInfo
# ---------------------------------------------------------------------------


class SystemInfo(_EventModel):
    """Identifies the app and Firebase project that emitted the event."""

    app_id: str = Field(..., min_length=1, serialization_alias="app_id")
    app_version: str = Field(..., min_length=1, serialization_alias="app_version")
    api_key: str = Field(..., min_length=1, serialization_alias="api_key")
    firebase_project_id: str = Field(..., min_length=1, serialization_alias="firebase_project_id")

    @classmethod
    def builder(cls) -> "SystemInfoBuilder":
        return SystemInfoBuilder()


class SystemInfoBuilder(_Builder):
    _model = SystemInfo

    def set_app_id(self, value: str) -> "SystemInfoBuilder":
        return self._set("app_id", value)

    def set_app_version(self, value: str) -> "SystemInfoBuilder":
        return self._set("app_version", value)

    def set_api_key(self, value: str) -> "SystemInfoBuilder":
        return self._set("api_key", value)

    def set_firebase_project_id(self, value: str) -> "SystemInfoBuilder":
        return self._set("firebase_project_id", value)

    def build(self) -> SystemInfo:
        return super().build()


# ---------------------------------------------------------------------------
# ModelInfo / ModelOptions
# ---------------------------------------------------------------------------


class ModelInfo(_EventModel):
    """Name and content hash of the downloaded model."""

    name: str = Field(..., min_length=1, serialization_alias="name")
    hash: str = Field(..., min_length=1, serialization_alias="hash")
    model_type: ModelType = Field(..., serialization_alias="model_type")

    @field_validator("model_type", mode="before")
    @classmethod
    def check_model_type(cls, value: Any) -> Any:
        return _enum_input(ModelType, value)

    @classmethod
    def builder(cls) -> "ModelInfoBuilder":
        # CUSTOM is the only legal type but the backend still requires it
        return ModelInfoBuilder(model_type=ModelType.CUSTOM)


class ModelInfoBuilder(_Builder):
    _model = ModelInfo

    def set_name(self, value: str) -> "ModelInfoBuilder":
        return self._set("name", value)

    def set_hash(self, value: str) -> "ModelInfoBuilder":
        return self._set("hash", value)

    def set_model_type(self, value: ModelType) -> "ModelInfoBuilder":
        return self._set("model_type", value)

    def build(self) -> ModelInfo:
        return super().build()


class ModelOptions(_EventModel):
    model_info: ModelInfo = Field(..., serialization_alias="model_info")

    @classmethod
    def builder(cls) -> "ModelOptionsBuilder":
        return ModelOptionsBuilder()


class ModelOptionsBuilder(_Builder):
    _model = ModelOptions

    def set_model_info(self, value: ModelInfo) -> "ModelOptionsBuilder":
        return self._set("model_info", value)

    def build(self) -> ModelOptions:
        return super().build()


# ---------------------------------------------------------------------------
# ModelDownloadLogEvent
# ---------------------------------------------------------------------------


class ModelDownloadLogEvent(_EventModel):
    """Outcome of a single model download."""

    error_code: ErrorCode = Field(..., serialization_alias="error_code")
    download_status: DownloadStatus = Field(..., serialization_alias="download_status")
    download_failure_status: int = Field(
        ...,
        strict=True,
        ge=-MAX_INT32 - 1,
        le=MAX_INT32,
        serialization_alias="download_failure_status",
    )
    rough_download_duration_ms: int = Field(
        ..., strict=True, ge=0, le=MAX_INT64, serialization_alias="rough_download_duration_ms"
    )
    exact_download_duration_ms: int = Field(
        ..., strict=True, ge=0, le=MAX_INT64, serialization_alias="exact_download_duration_ms"
    )
    model_options: ModelOptions = Field(..., serialization_alias="model_options")

    @field_validator("error_code", mode="before")
    @classmethod
    def check_error_code(cls, value: Any) -> Any:
        return _enum_input(ErrorCode, value)

    @field_validator("download_status", mode="before")
    @classmethod
    def check_download_status(cls, value: Any) -> Any:
        return _enum_input(DownloadStatus, value)

    @classmethod
    def builder(cls) -> "ModelDownloadLogEventBuilder":
        return ModelDownloadLogEventBuilder(
            download_failure_status=NO_INT_VALUE,
            download_status=DownloadStatus(NO_INT_VALUE),
            exact_download_duration_ms=0,
            rough_download_duration_ms=0,
            error_code=ErrorCode.UNKNOWN_ERROR,
        )


class ModelDownloadLogEventBuilder(_Builder):
    _model = ModelDownloadLogEvent

    def set_error_code(self, value: ErrorCode) -> "ModelDownloadLogEventBuilder":
        return self._set("error_code", value)

    def set_download_status(self, value: DownloadStatus) -> "ModelDownloadLogEventBuilder":
        return self._set("download_status", value)

    def set_download_failure_status(self, value: int) -> "ModelDownloadLogEventBuilder":
        return self._set("download_failure_status", value)

    def set_rough_download_duration_ms(self, value: int) -> "ModelDownloadLogEventBuilder":
        return self._set("rough_download_duration_ms", value)

    def set_exact_download_duration_ms(self, value: int) -> "ModelDownloadLogEventBuilder":
        return self._set("exact_download_duration_ms", value)

    def set_model_options(self, value: ModelOptions) -> "ModelDownloadLogEventBuilder":
        return self._set("model_options", value)

    def build(self) -> ModelDownloadLogEvent:
        return super().build()


# ---------------------------------------------------------------------------
# LogEvent
# ---------------------------------------------------------------------------


class LogEvent(_EventModel):
    """Top-level record handed to the encoder.

    ``system_info`` and ``model_download_log_event`` are independently
    optional; absent ones are left out of the wire payload entirely.
    """

    event_name: EventName = Field(..., serialization_alias="event_name")
    system_info: Optional[SystemInfo] = Field(None, serialization_alias="system_info")
    model_download_log_event: Optional[ModelDownloadLogEvent] = Field(
        None, serialization_alias="model_download_log_event"
    )

    @field_validator("event_name", mode="before")
    @classmethod
    def check_event_name(cls, value: Any) -> Any:
        return _enum_input(EventName, value)

    @classmethod
    def builder(cls) -> "LogEventBuilder":
        return LogEventBuilder()

    def to_builder(self) -> "LogEventBuilder":
        """Return a builder seeded with this event's current values."""
        return LogEventBuilder(**{name: getattr(self, name) for name in type(self).model_fields})

    def with_system_info(self, value: Optional[SystemInfo]) -> "LogEvent":
        """Return a copy of this event with ``system_info`` attached or replaced."""
        return self.to_builder().set_system_info(value).build()


class LogEventBuilder(_Builder):
    _model = LogEvent

    def set_event_name(self, value: EventName) -> "LogEventBuilder":
        return self._set("event_name", value)

    def set_system_info(self, value: Optional[SystemInfo]) -> "LogEventBuilder":
        return self._set("system_info", value)

    def set_model_download_log_event(
        self, value: Optional[ModelDownloadLogEvent]
    ) -> "LogEventBuilder":
        return self._set("model_download_log_event", value)

    def build(self) -> LogEvent:
        return super().build()


def attach_system_info(event: LogEvent, system_info: SystemInfo) -> LogEvent:
    """Derive a new :class:`LogEvent` carrying *system_info*; *event* is untouched."""
    return event.with_system_info(system_info)
