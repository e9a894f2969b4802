"""
caljal.core.months
------------------
Month lengths for both calendars, keyed by (calendar, leap year).
Every component that needs a month length goes through this table.
"""

from __future__ import annotations

from itertools import accumulate
from typing import Dict, Tuple

from .types import CalendarKind

_JALALI = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
_GREGORIAN = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTH_LENGTHS: Dict[Tuple[CalendarKind, bool], Tuple[int, ...]] = {
    ("jalali", False): _JALALI,
    ("jalali", True): _JALALI[:11] + (30,),
    ("gregorian", False): _GREGORIAN,
    ("gregorian", True): _GREGORIAN[:1] + (29,) + _GREGORIAN[2:],
}

# Days elapsed in the year before the first of each month (index 0 = month 1).
DAYS_BEFORE_MONTH: Dict[Tuple[CalendarKind, bool], Tuple[int, ...]] = {
    key: (0,) + tuple(accumulate(lengths))[:-1] for key, lengths in MONTH_LENGTHS.items()
}


def month_length(calendar: CalendarKind, month: int, leap: bool) -> int:
    return MONTH_LENGTHS[(calendar, leap)][month - 1]

def days_before_month(calendar: CalendarKind, month: int, leap: bool) -> int:
    return DAYS_BEFORE_MONTH[(calendar, leap)][month - 1]

def year_length(calendar: CalendarKind, leap: bool) -> int:
    return sum(MONTH_LENGTHS[(calendar, leap)])

def month_from_day_of_year(calendar: CalendarKind, doy: int, leap: bool) -> Tuple[int, int]:
    """Map a 0-based day of year to (month, day)."""
    for month, length in enumerate(MONTH_LENGTHS[(calendar, leap)], start=1):
        if doy < length:
            return month, doy + 1
        doy -= length
    raise ValueError("day of year exceeds year length")
