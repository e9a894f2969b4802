"""caljal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    jalali_to_gregorian,
    gregorian_to_jalali,
    diff_days,
    diff_days_with_adjustment,
    add_days,
    add_months,
    now,
    is_leap_year,
    period_state,
    explain_period_state,
    parse_jalali,
    parse_gregorian,
    list_rules,
    rule_info,
    register_rule,
    get_calendar,
)
from .core.errors import (
    CaljalError,
    FormatError,
    InvalidDateError,
    InvalidArgumentError,
    DateOverflowError,
)
from .core.types import CalendarDate

__all__ = [
    "jalali_to_gregorian",
    "gregorian_to_jalali",
    "diff_days",
    "diff_days_with_adjustment",
    "add_days",
    "add_months",
    "now",
    "is_leap_year",
    "period_state",
    "explain_period_state",
    "parse_jalali",
    "parse_gregorian",
    "list_rules",
    "rule_info",
    "register_rule",
    "get_calendar",
    "CalendarDate",
    "CaljalError",
    "FormatError",
    "InvalidDateError",
    "InvalidArgumentError",
    "DateOverflowError",
]
