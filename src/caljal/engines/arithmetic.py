"""
caljal.engines.arithmetic
-------------------------
Day and month arithmetic over CalendarDate values, pivoting through JDN.
"""

from __future__ import annotations

from caljal.core.errors import InvalidArgumentError
from caljal.core.time import check_jdn
from caljal.core.types import CalendarDate
from caljal.engines import gregorian
from caljal.engines.calendar import JalaliCalendar


def to_jdn(cal: JalaliCalendar, d: CalendarDate) -> int:
    if d.calendar == "gregorian":
        return gregorian.to_jdn(d)
    return cal.date_to_jdn(d)

def from_jdn(cal: JalaliCalendar, jdn: int, calendar: str = "jalali") -> CalendarDate:
    """Rebuild a date in `calendar`; raises DateOverflowError outside the supported range."""
    check_jdn(jdn)
    if calendar == "gregorian":
        return gregorian.from_jdn(jdn)
    return cal.from_jdn(jdn)

def to_gregorian(cal: JalaliCalendar, d: CalendarDate) -> CalendarDate:
    return from_jdn(cal, to_jdn(cal, d), "gregorian")

def to_jalali(cal: JalaliCalendar, d: CalendarDate) -> CalendarDate:
    return from_jdn(cal, to_jdn(cal, d), "jalali")

# ---------------------------------------------------------
# Days
# ---------------------------------------------------------

def add_days(cal: JalaliCalendar, d: CalendarDate, delta: int) -> CalendarDate:
    """Shift by `delta` days (may be negative), staying in the input's calendar."""
    return from_jdn(cal, to_jdn(cal, d) + delta, d.calendar)

def diff_days(cal: JalaliCalendar, start: CalendarDate, end: CalendarDate) -> int:
    """Signed day count, positive when `end` is after `start`. Calendars may be mixed."""
    return to_jdn(cal, end) - to_jdn(cal, start)

def diff_days_with_adjustment(cal: JalaliCalendar, start: CalendarDate, end: CalendarDate,
                              adjustment: int) -> int:
    """
    (|diff| + adjustment), negated when `end` is before `start`.

    The adjustment is added to the magnitude before the sign is applied, so an
    adjustment of 1 counts both endpoints in either direction.
    """
    delta = diff_days(cal, start, end)
    sign = -1 if delta < 0 else 1
    return (abs(delta) + adjustment) * sign

# ---------------------------------------------------------
# Months
# ---------------------------------------------------------

def add_months(cal: JalaliCalendar, d: CalendarDate, months: int) -> CalendarDate:
    """
    Advance a Jalali date by a positive number of months.

    The day is clamped to the length of the destination month in the
    destination year, so 1403/06/31 + 6 months is 1403/12/30 (1403 is leap)
    while 1402/06/31 + 6 months is 1402/12/29.
    """
    if d.calendar != "jalali":
        raise InvalidArgumentError(f"add_months works on jalali dates, got {d.calendar}", value=d)
    if months <= 0:
        raise InvalidArgumentError(f"invalid months value {months}: must be positive", value=months)

    year = d.year + months // 12
    month = d.month + months % 12
    if month > 12:
        year, month = year + 1, month - 12

    day = min(d.day, cal.month_length(year, month))
    out = cal.date(year, month, day)
    check_jdn(cal.date_to_jdn(out), value=out)
    return out
