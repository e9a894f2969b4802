from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Tuple

from .errors import DateOverflowError

# JDN of datetime.date.min and datetime.date.max; every produced date lies in this window.
JDN_MIN = 1721426
JDN_MAX = 5373484


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to Julian Day Number (JDN)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def to_jdn(d: date) -> int:
    return gregorian_to_jdn(d.year, d.month, d.day)

def from_jdn(jdn: int) -> date:
    return date(*jdn_to_gregorian(check_jdn(jdn)))

def check_jdn(jdn: int, *, value: object = None) -> int:
    if not (JDN_MIN <= jdn <= JDN_MAX):
        raise DateOverflowError(
            f"day {jdn} is outside the supported range {JDN_MIN}..{JDN_MAX} (0001-01-01..9999-12-31)",
            value=value if value is not None else jdn,
        )
    return jdn

def utc_today() -> date:
    """Current civil date in UTC."""
    return datetime.now(timezone.utc).date()
