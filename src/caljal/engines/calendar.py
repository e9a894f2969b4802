"""
caljal.engines.calendar
-----------------------
The Jalali orchestrator. Binds a LeapRule to the month table and translates
Persian dates to Julian Day Numbers (JDN) and back.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Dict

from caljal.core.engine import LeapRule
from caljal.core.errors import InvalidDateError
from caljal.core.months import days_before_month, month_from_day_of_year, month_length
from caljal.core.types import CalendarDate


class JalaliCalendar:
    """
    JDN(y, m, d) = epoch + 365 * (y - 1) + leap_years_before(y)
                   + days_before_month(m) + d - 1
    """
    def __init__(self, rule: LeapRule):
        self.rule = rule
        self._mean_year = Fraction(rule.mean_year)

    def is_leap(self, year: int) -> bool:
        return self.rule.is_leap(year)

    def month_length(self, year: int, month: int) -> int:
        return month_length("jalali", month, self.rule.is_leap(year))

    def is_month_end(self, d: CalendarDate) -> bool:
        return d.day == self.month_length(d.year, d.month)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    def date(self, year: int, month: int, day: int) -> CalendarDate:
        """Validated Jalali date; raises InvalidDateError."""
        if not (1 <= month <= 12):
            raise InvalidDateError(f"invalid jalali date {year}/{month}/{day}: month out of range 1..12",
                                   value=(year, month, day))
        last = self.month_length(year, month)
        if not (1 <= day <= last):
            raise InvalidDateError(f"invalid jalali date {year}/{month}/{day}: month {month} of {year} "
                                   f"has {last} days", value=(year, month, day))
        return CalendarDate(year, month, day, "jalali")

    # ---------------------------------------------------------
    # Forward: Jalali date to JDN
    # ---------------------------------------------------------

    def new_year_jdn(self, year: int) -> int:
        """JDN of 1 Farvardin of `year`."""
        return self.rule.epoch_jdn + 365 * (year - 1) + self.rule.leap_years_before(year)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        leap = self.rule.is_leap(year)
        return self.new_year_jdn(year) + days_before_month("jalali", month, leap) + day - 1

    def date_to_jdn(self, d: CalendarDate) -> int:
        if d.calendar != "jalali":
            raise ValueError(f"expected a jalali date, got {d.calendar}")
        return self.to_jdn(d.year, d.month, d.day)

    # ---------------------------------------------------------
    # Inverse: JDN to Jalali date
    # ---------------------------------------------------------

    def year_of_jdn(self, jdn: int) -> int:
        days = jdn - self.rule.epoch_jdn
        year = 1 + (days * self._mean_year.denominator) // self._mean_year.numerator
        # Correct the mean-year estimate.
        while jdn < self.new_year_jdn(year):
            year -= 1
        while jdn >= self.new_year_jdn(year + 1):
            year += 1
        return year

    def from_jdn(self, jdn: int) -> CalendarDate:
        year = self.year_of_jdn(jdn)
        doy = jdn - self.new_year_jdn(year)
        month, day = month_from_day_of_year("jalali", doy, self.rule.is_leap(year))
        return CalendarDate(year, month, day, "jalali")

    def info(self) -> Dict[str, Any]:
        return {"calendar": "jalali", "rule": self.rule.info()}
