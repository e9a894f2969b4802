from __future__ import annotations
from typing import Any


class CaljalError(Exception):
    """Base error. `value` holds the raw input that caused the failure."""

    def __init__(self, message: str, *, value: Any = None):
        super().__init__(message)
        self.value = value

class FormatError(CaljalError, ValueError):
    """Date text does not split into three integer fields."""

class InvalidDateError(CaljalError, ValueError):
    """Fields parse but do not name a day of the calendar."""

class InvalidArgumentError(CaljalError, ValueError):
    """A non-date argument is outside its documented domain."""

class DateOverflowError(CaljalError, OverflowError):
    """Result falls outside the supported day range."""
