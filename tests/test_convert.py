# tests/test_convert.py

import random
from datetime import date

import pytest

import caljal
from caljal.core.errors import DateOverflowError, InvalidDateError
from caljal.core.months import year_length
from caljal.core.time import JDN_MAX, JDN_MIN, from_jdn, gregorian_to_jdn, jdn_to_gregorian, to_jdn
from caljal.engines import arithmetic, gregorian


@pytest.fixture(params=caljal.list_rules())
def cal(request):
    return caljal.get_calendar(request.param)


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert gregorian_to_jdn(2000, 1, 1) == 2451545
    assert to_jdn(date(1, 1, 1)) == JDN_MIN
    assert to_jdn(date(9999, 12, 31)) == JDN_MAX

def test_gregorian_jdn_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(JDN_MIN, JDN_MAX)
        assert to_jdn(from_jdn(jdn_in)) == jdn_in
        assert gregorian_to_jdn(*jdn_to_gregorian(jdn_in)) == jdn_in

@pytest.mark.parametrize("jalali, greg", [
    ("1403/01/01", "2024-03-20"),
    ("1403/05/29", "2024-08-19"),
    ("1402/12/29", "2024-03-19"),
    ("1402/12/10", "2024-02-29"),
    ("1403/12/30", "2025-03-20"),
    ("1404/01/01", "2025-03-21"),
    ("1400/01/01", "2021-03-21"),
    ("1357/11/22", "1979-02-11"),
])
def test_known_conversions(jalali, greg):
    assert caljal.jalali_to_gregorian(jalali) == greg
    assert caljal.gregorian_to_jalali(greg) == jalali

def test_epoch_per_rule():
    assert caljal.jalali_to_gregorian("0001/01/01", rule="arithmetic-33") == "0622-03-21"
    # 19 March 622 Julian
    assert caljal.jalali_to_gregorian("0001/01/01", rule="birashk-2820") == "0622-03-22"

def test_jalali_roundtrip_whole_range(cal):
    random.seed(123)
    for _ in range(5000):
        jdn = random.randint(JDN_MIN, JDN_MAX)
        j = cal.from_jdn(jdn)
        assert cal.date(j.year, j.month, j.day) == j
        assert cal.date_to_jdn(j) == jdn
        g = arithmetic.to_gregorian(cal, j)
        assert arithmetic.to_jalali(cal, g) == j
        assert gregorian.to_jdn(g) == jdn

def test_consecutive_days_are_consecutive(cal):
    # Walk across several year boundaries one day at a time
    start = gregorian_to_jdn(2020, 1, 1)
    prev = cal.from_jdn(start)
    for jdn in range(start + 1, start + 4 * 366):
        cur = cal.from_jdn(jdn)
        if cur.day == 1:
            assert prev.day == cal.month_length(prev.year, prev.month)
            if cur.month == 1:
                assert (prev.year, prev.month) == (cur.year - 1, 12)
            else:
                assert (prev.year, prev.month) == (cur.year, cur.month - 1)
        else:
            assert (prev.year, prev.month, prev.day + 1) == (cur.year, cur.month, cur.day)
        prev = cur

def test_leap_consistency(cal):
    for year in range(1300, 1500):
        leap = cal.is_leap(year)
        if leap:
            assert cal.date(year, 12, 30).day == 30
        else:
            with pytest.raises(InvalidDateError):
                cal.date(year, 12, 30)
        # year length agrees with the rule
        assert cal.new_year_jdn(year + 1) - cal.new_year_jdn(year) == year_length("jalali", leap) == (366 if leap else 365)

@pytest.mark.parametrize("text", [
    "1403/00/10",
    "1403/13/01",
    "1403/01/00",
    "1403/01/32",
    "1403/07/31",
    "1402/12/30",
])
def test_invalid_jalali(text):
    with pytest.raises(InvalidDateError):
        caljal.jalali_to_gregorian(text)

@pytest.mark.parametrize("text", ["2023-02-29", "2100-02-29", "2024-04-31", "2024-13-01", "2024-00-01"])
def test_invalid_gregorian(text):
    with pytest.raises(InvalidDateError):
        caljal.gregorian_to_jalali(text)

def test_gregorian_leap_rule():
    assert gregorian.is_leap(2000)
    assert gregorian.is_leap(2024)
    assert not gregorian.is_leap(1900)
    assert not gregorian.is_leap(2023)

def test_out_of_range():
    with pytest.raises(DateOverflowError):
        caljal.jalali_to_gregorian("9999/01/01")
    with pytest.raises(DateOverflowError):
        caljal.jalali_to_gregorian("-700/01/01")
    with pytest.raises(DateOverflowError):
        caljal.gregorian_to_jalali("0000-12-31")
