"""
caljal.sql
----------
Exposes the operations as scalar SQL functions on a sqlite3 connection,
under the names used by the PostgreSQL extension this package mirrors:

    SELECT jalali_date_to_gregorian('1403/01/01');         -- '2024-03-20'
    SELECT jalali_date_period_state('1403/06/31', 31);     -- 'End'

A failing call raises inside sqlite and surfaces as sqlite3.OperationalError.
"""

from __future__ import annotations

import functools
import logging
import sqlite3
from typing import Any, Callable, Dict, Tuple

from . import api
from .engines.specs import DEFAULT_RULE

log = logging.getLogger(__name__)

# name -> (api function, number of SQL arguments, deterministic)
SQL_FUNCTIONS: Dict[str, Tuple[Callable[..., Any], int, bool]] = {
    "jalali_date_to_gregorian": (api.jalali_to_gregorian, 1, True),
    "gregorian_date_to_jalali": (api.gregorian_to_jalali, 1, True),
    "jalali_date_diff": (api.diff_days, 2, True),
    "jalali_date_diff_with_addition": (api.diff_days_with_adjustment, 3, True),
    "jalali_date_add_days": (api.add_days, 2, True),
    "jalali_date_add_months": (api.add_months, 2, True),
    "jalali_date_now": (api.now, 0, False),
    "jalali_date_is_leap_year": (api.is_leap_year, 1, True),
    "jalali_date_period_state": (api.period_state, 2, True),
}


def _bind(fn: Callable[..., Any], rule: str) -> Callable[..., Any]:
    @functools.wraps(fn)
    def call(*args):
        out = fn(*args, rule=rule)
        # sqlite has no boolean type
        return int(out) if isinstance(out, bool) else out
    return call

def register_functions(conn: sqlite3.Connection, *, rule: str = DEFAULT_RULE) -> None:
    """Register every caljal function on `conn`, using leap rule `rule`."""
    api.get_calendar(rule)  # fail fast on an unknown rule
    for name, (fn, nargs, deterministic) in SQL_FUNCTIONS.items():
        conn.create_function(name, nargs, _bind(fn, rule), deterministic=deterministic)
    log.debug("registered %d SQL functions (rule=%s)", len(SQL_FUNCTIONS), rule)
