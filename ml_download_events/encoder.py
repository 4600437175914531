"""JSON wire encoding of :class:`LogEvent` records.

The encoder is the last step before a transport collaborator takes over:
it turns a finalized event into the exact bytes the logging backend expects
and never performs any I/O itself.
"""

from __future__ import annotations

from typing import Callable, Protocol

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from ml_download_events.errors import EncodingError
from ml_download_events.models.events import LogEvent
from ml_download_events.settings import WIRE_CHARSET
from ml_download_events.utils.logger import logger

__all__ = ["EventSink", "emit", "encode", "json_transformer"]

_MISSING = object()


class EventSink(Protocol):
    """Transport-side consumer of encoded events (delivery, batching, retry)."""

    def __call__(self, payload: bytes) -> None:
        ...


def _fail(message: str) -> EncodingError:
    logger.warning("Refusing to encode log event: %s", message)
    return EncodingError(message)


def _ensure_complete(model: BaseModel, path: str) -> None:
    """Reject instances that bypassed validation and lack a required field.

    Only reachable through ``model_construct`` or similar back doors; every
    builder-produced instance passes trivially.
    """
    for name, field in type(model).model_fields.items():
        value = model.__dict__.get(name, _MISSING)
        if value is _MISSING or value is None:
            if field.is_required():
                raise _fail(f"required field '{path}.{name}' is not set")
            continue
        if isinstance(value, BaseModel):
            _ensure_complete(value, f"{path}.{name}")


def encode(event: LogEvent) -> bytes:
    """Serialise *event* to compact UTF-8 JSON.

    Absent optional fields are omitted, enums are written as their integer
    value and keys follow declaration order, so the same event always yields
    the same bytes.
    """
    if not isinstance(event, LogEvent):
        raise _fail(f"expected LogEvent, got {type(event).__name__}")
    _ensure_complete(event, type(event).__name__)

    try:
        body = event.model_dump_json(by_alias=True, exclude_none=True, warnings="error")
    except PydanticSerializationError as exc:
        raise _fail(str(exc)) from exc

    payload = body.encode(WIRE_CHARSET)
    logger.debug(
        "Encoded log event",
        extra={"extra": {"event_name": int(event.event_name), "size": len(payload)}},
    )
    return payload


def json_transformer() -> Callable[[LogEvent], bytes]:
    """Return the ``LogEvent -> bytes`` transformer handed to the transport layer."""
    return encode


def emit(event: LogEvent, sink: EventSink) -> bytes:
    """Encode *event* once and hand the bytes to *sink*.

    Whatever the sink raises propagates unchanged; retries are its concern.
    """
    payload = encode(event)
    sink(payload)
    return payload
