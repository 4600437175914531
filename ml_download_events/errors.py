"""Exceptions raised while building and encoding log events."""

from __future__ import annotations


class EventModelError(Exception):
    """Base class for every error raised by this package."""


class MissingRequiredFieldError(EventModelError):
    """A builder was finalized while a mandatory field was still unset."""

    def __init__(self, entity: str, field: str) -> None:
        self.entity = entity
        self.field = field
        super().__init__(f"Missing required field '{field}' on {entity}")


class InvalidFieldValueError(EventModelError, ValueError):
    """A builder held a value outside the field's declared domain.

    The underlying pydantic ``ValidationError`` is chained as ``__cause__``.
    """

    def __init__(self, entity: str, detail: str) -> None:
        self.entity = entity
        self.detail = detail
        super().__init__(f"Invalid value for {entity}: {detail}")


class EncodingError(EventModelError):
    """The encoder was handed an object it cannot turn into a wire record."""
