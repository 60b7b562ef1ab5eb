"""Standardized errors for iterkit.

Absence and failure are ordinary values (Option/Result) everywhere in the
iterator algebra. Exceptions are reserved for usage errors: an invalid range,
an unsupported collection kind, or unwrapping the wrong variant.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

DetailValue = int | float | str | None


class ErrorCode(StrEnum):
    """Machine-readable error codes."""
    INVALID_RANGE = "INVALID_RANGE"
    UNSUPPORTED_COLLECTION = "UNSUPPORTED_COLLECTION"
    UNWRAP_FAILED = "UNWRAP_FAILED"
    UNKNOWN = "UNKNOWN"


class ErrorInfo(BaseModel):
    """Structured description of an iterkit error.
    
    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        details: Values that describe the failing call (bounds, kinds, ...)
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Machine-readable error classification")
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    details: dict[str, DetailValue] = Field(default_factory=dict)

    @computed_field
    @property
    def is_usage_error(self) -> bool:
        """Whether the caller could have avoided this error by validating input first."""
        return self.code in (ErrorCode.INVALID_RANGE, ErrorCode.UNSUPPORTED_COLLECTION)

    def render(self) -> str:
        """Format as `[CODE] message (k=v, ...)`."""
        extra = f" ({', '.join(f'{k}={v!r}' for k, v in self.details.items())})" if self.details else ""
        return f"[{self.code}] {self.message}{extra}"


class IterkitError(Exception):
    """Base exception. Carries an `ErrorInfo` in `.info`."""

    code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN
    default_message: ClassVar[str] = "iterkit error"

    def __init__(self, message: str, **details: DetailValue) -> None:
        message = message.strip() or self.default_message
        super().__init__(message)
        self.info = ErrorInfo(code=self.code, message=message, details=details)

    @property
    def message(self) -> str:
        return self.info.message


class InvalidRangeError(IterkitError, ValueError):
    """Range bounds where begin is greater than end."""

    code = ErrorCode.INVALID_RANGE

    def __init__(self, begin: int, end: int) -> None:
        super().__init__(f"Invalid range: begin {begin} is greater than end {end}", begin=begin, end=end)
        self.begin, self.end = begin, end


class UnsupportedCollectionError(IterkitError, TypeError):
    """Collection kind with no known way to extend it."""

    code = ErrorCode.UNSUPPORTED_COLLECTION

    def __init__(self, kind: object) -> None:
        name = getattr(kind, "__name__", repr(kind))
        super().__init__(f"Cannot collect into {name}", kind=name)
        self.kind = kind


class UnwrapError(IterkitError, RuntimeError):
    """Extraction of a value from the wrong Option/Result variant."""

    code = ErrorCode.UNWRAP_FAILED
    default_message = "Unwrapped the wrong variant"
