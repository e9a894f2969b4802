"""
caljal.engines.period
---------------------
Classifies a Jalali date against a recurring period whose boundary falls on
a nominal day of the month (the anchor day).

A period ends on the anchor day and the next one starts the day after. Short
months (29/30 days) still close the period on their last day when that day
comes before the anchor, and day 1 opens a period when the previous month
was too short to reach the anchor.

Rows of PERIOD_RULES are tried in order; the first match decides.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from caljal.core.types import CalendarDate, PeriodState
from caljal.engines.calendar import JalaliCalendar


@dataclass(frozen=True)
class PeriodContext:
    date: CalendarDate
    anchor: int
    cal: JalaliCalendar

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def month_end(self) -> bool:
        return self.cal.is_month_end(self.date)

    @property
    def anchor_in_range(self) -> bool:
        return 1 <= self.anchor <= 31

    def previous_day(self) -> int:
        """Day of month of the day before `date`."""
        return self.cal.from_jdn(self.cal.date_to_jdn(self.date) - 1).day


Predicate = Callable[[PeriodContext], bool]


def _month_end(c: PeriodContext) -> bool:
    return c.month_end and c.day <= c.anchor

def _new_year_rollover(c: PeriodContext) -> bool:
    # previous_day() is only evaluated on 1 Farvardin.
    return c.day == 1 and c.month == 1 and (c.anchor >= 30 or c.anchor == c.previous_day())

def _short_month_rollover(c: PeriodContext) -> bool:
    return c.day == 1 and ((2 <= c.month <= 7 and c.anchor == 31) or (8 <= c.month <= 12 and c.anchor >= 30))

def _anchor_day(c: PeriodContext) -> bool:
    return c.anchor_in_range and c.day == c.anchor

def _after_anchor(c: PeriodContext) -> bool:
    return c.anchor_in_range and c.day == c.anchor + 1

def _inside_period(c: PeriodContext) -> bool:
    return c.anchor_in_range


PERIOD_RULES: Tuple[Tuple[str, Predicate, PeriodState], ...] = (
    ("month_end", _month_end, "End"),
    ("new_year_rollover", _new_year_rollover, "Start"),
    ("short_month_rollover", _short_month_rollover, "Start"),
    ("anchor_day", _anchor_day, "End"),
    ("after_anchor", _after_anchor, "Start"),
    ("inside_period", _inside_period, "Middle"),
)


def explain_period_state(cal: JalaliCalendar, d: CalendarDate, anchor: int) -> Tuple[str, PeriodState]:
    """Return (matching rule name, state); ("fallback", "Unknown") when no row matches."""
    ctx = PeriodContext(d, anchor, cal)
    for name, predicate, state in PERIOD_RULES:
        if predicate(ctx):
            return name, state
    return "fallback", "Unknown"

def period_state(cal: JalaliCalendar, d: CalendarDate, anchor: int) -> PeriodState:
    return explain_period_state(cal, d, anchor)[1]
