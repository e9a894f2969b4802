"""
Text-level operations. Each call parses its arguments, works on CalendarDate
values and renders the result back to text; nothing is kept between calls.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .core.engine import LeapRule, RuleRegistry
from .core.errors import CaljalError
from .core.parse import format_date, parse_calendar_raw
from .core.time import utc_today
from .core.types import CalendarDate, PeriodState
from .engines import arithmetic, gregorian
from .engines import period as _period
from .engines.calendar import JalaliCalendar
from .engines.specs import DEFAULT_RULE

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_registry: Optional[RuleRegistry] = None

def set_registry(reg: RuleRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> RuleRegistry:
    if _registry is None:
        raise RuntimeError("Leap rule registry not initialized")
    return _registry

def list_rules() -> List[str]:
    return _reg().list()

def rule_info(rule: str = DEFAULT_RULE) -> Dict[str, Any]:
    return _reg().get(rule).info()

def register_rule(name: str, rule: LeapRule, *, overwrite: bool = False) -> None:
    _reg().register(name, rule, overwrite=overwrite)

def get_calendar(rule: str = DEFAULT_RULE) -> JalaliCalendar:
    return JalaliCalendar(_reg().get(rule))


def _logged(fn: F) -> F:
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except CaljalError as e:
            log.debug("%s%r failed: %s: %s", fn.__name__, args, type(e).__name__, e)
            raise
    return wrapper  # type: ignore[return-value]

# ============================================================
# Parsing helpers
# ============================================================

def parse_jalali(text: str, *, rule: str = DEFAULT_RULE) -> CalendarDate:
    """`YYYY/MM/DD` -> validated Jalali CalendarDate."""
    y, m, d = parse_calendar_raw(text, "jalali")
    return get_calendar(rule).date(y, m, d)

def parse_gregorian(text: str) -> CalendarDate:
    """`YYYY-MM-DD` -> validated Gregorian CalendarDate."""
    y, m, d = parse_calendar_raw(text, "gregorian")
    return gregorian.date(y, m, d)

# ============================================================
# Operations
# ============================================================

@_logged
def jalali_to_gregorian(text: str, *, rule: str = DEFAULT_RULE) -> str:
    cal = get_calendar(rule)
    return format_date(arithmetic.to_gregorian(cal, parse_jalali(text, rule=rule)))

@_logged
def gregorian_to_jalali(text: str, *, rule: str = DEFAULT_RULE) -> str:
    cal = get_calendar(rule)
    return format_date(arithmetic.to_jalali(cal, parse_gregorian(text)))

def diff_days(start: str, end: str, *, rule: str = DEFAULT_RULE) -> int:
    return diff_days_with_adjustment(start, end, 0, rule=rule)

@_logged
def diff_days_with_adjustment(start: str, end: str, adjustment: int, *, rule: str = DEFAULT_RULE) -> int:
    cal = get_calendar(rule)
    d0 = parse_jalali(start, rule=rule)
    d1 = parse_jalali(end, rule=rule)
    return arithmetic.diff_days_with_adjustment(cal, d0, d1, adjustment)

@_logged
def add_days(text: str, days: int, *, rule: str = DEFAULT_RULE) -> str:
    cal = get_calendar(rule)
    return format_date(arithmetic.add_days(cal, parse_jalali(text, rule=rule), days))

@_logged
def add_months(text: str, months: int, *, rule: str = DEFAULT_RULE) -> str:
    cal = get_calendar(rule)
    return format_date(arithmetic.add_months(cal, parse_jalali(text, rule=rule), months))

def now(*, rule: str = DEFAULT_RULE) -> str:
    """Today's UTC date as Jalali text."""
    cal = get_calendar(rule)
    today = utc_today()
    g = gregorian.date(today.year, today.month, today.day)
    return format_date(arithmetic.to_jalali(cal, g))

@_logged
def is_leap_year(text: str, *, rule: str = DEFAULT_RULE) -> bool:
    d = parse_jalali(text, rule=rule)
    return get_calendar(rule).is_leap(d.year)

@_logged
def period_state(text: str, anchor_day: int, *, rule: str = DEFAULT_RULE) -> PeriodState:
    cal = get_calendar(rule)
    return _period.period_state(cal, parse_jalali(text, rule=rule), anchor_day)

def explain_period_state(text: str, anchor_day: int, *, rule: str = DEFAULT_RULE) -> Dict[str, Any]:
    cal = get_calendar(rule)
    d = parse_jalali(text, rule=rule)
    name, state = _period.explain_period_state(cal, d, anchor_day)
    return {
        "date": format_date(d),
        "anchor_day": anchor_day,
        "month_end": cal.is_month_end(d),
        "leap_year": cal.is_leap(d.year),
        "matched": name,
        "state": state,
    }
