from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_YEAR = "invalid year"
    INVALID_MONTH = "invalid month"
    INVALID_DAY = "invalid day"
    INVALID_HOUR = "invalid hour"
    INVALID_MINUTE = "invalid minute"
    INVALID_SECOND = "invalid second"
    INVALID_DAY_OF_YEAR = "invalid day of year"
    INVALID_WEEK = "invalid week"
    DIVISION_BY_ZERO = "division by zero"
    OUT_OF_BOUNDS = "out of bounds"
    MIXED_RADIX_WRONG_SIZE = "mixed radix: wrong array size"
    MIXED_RADIX_ZERO_BASE = "mixed radix: zero radix"
    ENCOUNTERED_NAN = "encountered NaN or non-finite value"
    IMPOSSIBLE_RESULT = "impossible result"


class CalfixError(Exception):
    """Base error."""


class CalendarError(CalfixError, ValueError):
    """Rejected input. Always carries an ErrorKind."""

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        msg = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(msg)


class ContractViolation(CalfixError, AssertionError):
    """Raised by unchecked paths when the caller broke their precondition."""
