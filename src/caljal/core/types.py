from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

from .errors import InvalidDateError

CalendarKind = Literal["jalali", "gregorian"]
PeriodState = Literal["Start", "Middle", "End", "Unknown"]

CALENDARS = ("jalali", "gregorian")


@dataclass(frozen=True)
class CalendarDate:
    """
    A civil, zone-less day in one of the two calendars.

    Only the calendar-independent invariants are checked here; month lengths
    depend on the leap rule, so build values through `JalaliCalendar.date`
    or `caljal.engines.gregorian.date`.
    """
    year: int
    month: int
    day: int
    calendar: CalendarKind = "jalali"

    def __post_init__(self) -> None:
        if self.calendar not in CALENDARS:
            raise ValueError(f"calendar must be one of {CALENDARS}, got {self.calendar!r}")
        if not (1 <= self.month <= 12):
            raise InvalidDateError(
                f"month {self.month} out of range 1..12", value=(self.year, self.month, self.day)
            )
        if not (1 <= self.day <= 31):
            raise InvalidDateError(
                f"day {self.day} out of range 1..31", value=(self.year, self.month, self.day)
            )

    @property
    def ymd(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)
