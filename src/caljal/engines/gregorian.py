"""Proleptic Gregorian side of the JDN pivot."""

from __future__ import annotations

from caljal.core.errors import InvalidDateError
from caljal.core.months import month_length
from caljal.core.time import gregorian_to_jdn, jdn_to_gregorian
from caljal.core.types import CalendarDate


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def date(year: int, month: int, day: int) -> CalendarDate:
    """Validated Gregorian date; raises InvalidDateError."""
    if not (1 <= month <= 12):
        raise InvalidDateError(f"invalid gregorian date {year}-{month}-{day}: month out of range 1..12",
                               value=(year, month, day))
    last = month_length("gregorian", month, is_leap(year))
    if not (1 <= day <= last):
        raise InvalidDateError(f"invalid gregorian date {year}-{month}-{day}: month {month} of {year} "
                               f"has {last} days", value=(year, month, day))
    return CalendarDate(year, month, day, "gregorian")

def to_jdn(d: CalendarDate) -> int:
    if d.calendar != "gregorian":
        raise ValueError(f"expected a gregorian date, got {d.calendar}")
    return gregorian_to_jdn(d.year, d.month, d.day)

def from_jdn(jdn: int) -> CalendarDate:
    return CalendarDate(*jdn_to_gregorian(jdn), "gregorian")
