# tests/test_arithmetic.py

import random

import pytest

import caljal
from caljal.core.errors import DateOverflowError, FormatError, InvalidArgumentError, InvalidDateError
from caljal.core.parse import format_date
from caljal.core.time import JDN_MAX, JDN_MIN
from caljal.engines import arithmetic, gregorian


@pytest.fixture
def cal():
    return caljal.get_calendar()


def test_add_days_examples():
    assert caljal.add_days("1403/05/28", 2) == "1403/05/30"
    assert caljal.add_days("1403/05/28", 0) == "1403/05/28"
    assert caljal.add_days("1403/06/31", 1) == "1403/07/01"
    assert caljal.add_days("1403/12/30", 1) == "1404/01/01"
    assert caljal.add_days("1402/12/29", 1) == "1403/01/01"
    assert caljal.add_days("1403/01/01", -1) == "1402/12/29"
    assert caljal.add_days("1403/01/01", 366) == "1404/01/01"
    assert caljal.add_days("1403/01/01", -365) == "1402/01/01"

def test_add_days_gregorian_input(cal):
    g = gregorian.date(2024, 2, 28)
    assert format_date(arithmetic.add_days(cal, g, 1)) == "2024-02-29"
    assert format_date(arithmetic.add_days(cal, g, 2)) == "2024-03-01"

def test_additive_identity(cal):
    random.seed(5)
    for _ in range(2000):
        d = cal.from_jdn(random.randint(2400000, 2500000))
        n = random.randint(-200000, 200000)
        moved = arithmetic.add_days(cal, d, n)
        assert arithmetic.diff_days(cal, d, moved) == n

def test_add_days_overflow():
    with pytest.raises(DateOverflowError):
        caljal.add_days("1403/01/01", 10**7)
    with pytest.raises(DateOverflowError):
        caljal.add_days("1403/01/01", -(10**7))

def test_diff_days_examples():
    assert caljal.diff_days("1403/01/01", "1403/01/01") == 0
    assert caljal.diff_days("1403/01/01", "1404/01/01") == 366
    assert caljal.diff_days("1402/01/01", "1403/01/01") == 365
    assert caljal.diff_days("1403/05/30", "1403/05/28") == -2

def test_diff_days_antisymmetric(cal):
    random.seed(11)
    for _ in range(2000):
        a = cal.from_jdn(random.randint(JDN_MIN, JDN_MAX))
        b = cal.from_jdn(random.randint(JDN_MIN, JDN_MAX))
        assert arithmetic.diff_days(cal, a, b) == -arithmetic.diff_days(cal, b, a)

def test_diff_days_mixed_calendars(cal):
    j = cal.date(1403, 1, 1)
    g = gregorian.date(2024, 3, 30)
    assert arithmetic.diff_days(cal, j, g) == 10
    assert arithmetic.diff_days(cal, g, j) == -10

def test_diff_with_adjustment():
    # adjustment is added to the magnitude, then the sign is applied
    assert caljal.diff_days_with_adjustment("1403/01/01", "1403/01/10", 1) == 10
    assert caljal.diff_days_with_adjustment("1403/01/10", "1403/01/01", 1) == -10
    assert caljal.diff_days_with_adjustment("1403/01/01", "1403/01/01", 1) == 1
    assert caljal.diff_days_with_adjustment("1403/01/01", "1403/01/10", 0) == 9

@pytest.mark.parametrize("start, months, expected", [
    ("1403/06/31", 6, "1403/12/30"),
    ("1402/06/31", 6, "1402/12/29"),
    ("1403/11/30", 13, "1404/12/29"),
    ("1403/10/15", 5, "1404/03/15"),
    ("1403/01/31", 12, "1404/01/31"),
    ("1403/12/30", 12, "1404/12/29"),
    ("1403/01/31", 6, "1403/07/30"),
    ("1403/12/15", 1, "1404/01/15"),
    ("1399/12/30", 48, "1403/12/30"),
    ("1403/05/28", 25, "1405/06/28"),
])
def test_add_months(start, months, expected):
    assert caljal.add_months(start, months) == expected

@pytest.mark.parametrize("months", [0, -1, -12])
def test_add_months_non_positive(months):
    with pytest.raises(InvalidArgumentError):
        caljal.add_months("1403/05/28", months)

def test_add_months_validates_date_first():
    with pytest.raises(FormatError):
        caljal.add_months("1403/05", 0)
    with pytest.raises(InvalidDateError):
        caljal.add_months("1402/12/30", 0)

def test_add_months_clamps_against_destination_year(cal):
    # Every result is a constructible date and keeps the day when it fits
    for year in (1402, 1403):
        for month in range(1, 13):
            for day in (1, 29, cal.month_length(year, month)):
                for months in range(1, 30):
                    out = arithmetic.add_months(cal, cal.date(year, month, day), months)
                    assert cal.date(out.year, out.month, out.day) == out
                    assert out.day == min(day, cal.month_length(out.year, out.month))

def test_add_months_rejects_gregorian(cal):
    with pytest.raises(InvalidArgumentError):
        arithmetic.add_months(cal, gregorian.date(2024, 1, 1), 1)
