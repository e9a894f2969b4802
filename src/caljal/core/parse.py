"""
caljal.core.parse
-----------------
Date text in and out. Parsing only splits and reads integers; whether the
fields name a real day is decided by the calendar engines.
"""

from __future__ import annotations

import re
from typing import Tuple

from .errors import FormatError
from .types import CalendarDate, CalendarKind

DELIMITERS = {"jalali": "/", "gregorian": "-"}

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

YEAR_MIN, YEAR_MAX = -(2**31), 2**31 - 1
FIELD_MAX = 255


def _field(text: str, segment: str, name: str, pattern: re.Pattern, lo: int, hi: int) -> int:
    if not pattern.fullmatch(segment):
        raise FormatError(f"invalid date {text!r}: {name} value {segment!r} is not an integer", value=text)
    n = int(segment)
    if not (lo <= n <= hi):
        raise FormatError(f"invalid date {text!r}: {name} value {n} out of range {lo}..{hi}", value=text)
    return n

def parse_raw(text: str, delimiter: str) -> Tuple[int, int, int]:
    """Split `text` into a raw (year, month, day) triple."""
    if not isinstance(text, str):
        raise FormatError(f"invalid date {text!r}: expected text", value=text)
    parts = text.split(delimiter)
    if len(parts) != 3 or not all(parts):
        raise FormatError(f"invalid date {text!r} format, expected YYYY{delimiter}MM{delimiter}DD", value=text)
    year = _field(text, parts[0], "year", _SIGNED_RE, YEAR_MIN, YEAR_MAX)
    month = _field(text, parts[1], "month", _UNSIGNED_RE, 0, FIELD_MAX)
    day = _field(text, parts[2], "day", _UNSIGNED_RE, 0, FIELD_MAX)
    return year, month, day

def parse_calendar_raw(text: str, calendar: CalendarKind) -> Tuple[int, int, int]:
    return parse_raw(text, DELIMITERS[calendar])

def format_ymd(year: int, month: int, day: int, calendar: CalendarKind) -> str:
    sep = DELIMITERS[calendar]
    return f"{year:04d}{sep}{month:02d}{sep}{day:02d}"

def format_date(d: CalendarDate) -> str:
    """Render `YYYY/MM/DD` for Jalali dates and `YYYY-MM-DD` for Gregorian ones."""
    return format_ymd(d.year, d.month, d.day, d.calendar)
