"""Result and error types for period resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


class DateSliceError(ValueError):
    """Base class for errors raised while resolving a date slice."""

    pass


class DateParseError(DateSliceError):
    """Raised when a date string is not a valid YYYY, YYYYMM or YYYYMMDD value."""

    def __init__(self, text: str, position: str, reason: str = ""):
        self.text = text
        self.position = position
        message = f"Invalid {position} date string: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidRangeError(DateSliceError):
    """Raised when a range ends before it begins."""

    def __init__(self, begin: date, end: date):
        self.begin = begin
        self.end = end
        super().__init__(f"Range end {end} is before begin {begin}")


class DateOutOfRangeError(DateSliceError):
    """Raised when calendar arithmetic leaves the supported years 1-9999."""

    def __init__(self, day: date, offset: dict):
        self.day = day
        self.offset = offset
        super().__init__(f"Shifting {day} by {offset} leaves the supported calendar range")


@dataclass(frozen=True)
class DateSliceResult:
    dates: list = field(default_factory=list)
    error: Optional[DateSliceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list:
        """Return the dates, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.dates


__all__ = [
    "DateSliceError",
    "DateParseError",
    "InvalidRangeError",
    "DateOutOfRangeError",
    "DateSliceResult",
]
