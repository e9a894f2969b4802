# tests/test_sql.py

import sqlite3

import pytest

from caljal import api
from caljal.sql import SQL_FUNCTIONS, register_functions


@pytest.fixture
def conn():
    c = sqlite3.connect(":memory:")
    register_functions(c)
    yield c
    c.close()


def q(conn, sql, *params):
    return conn.execute(sql, params).fetchone()[0]


def test_every_function_is_registered(conn):
    for name, (_, nargs, _) in SQL_FUNCTIONS.items():
        args = ", ".join(["NULL"] * nargs)
        # arity mismatch would be "no such function"; NULL input fails inside the function instead
        try:
            conn.execute(f"SELECT {name}({args})")
        except sqlite3.OperationalError as e:
            assert "no such function" not in str(e)

def test_conversions(conn):
    assert q(conn, "SELECT jalali_date_to_gregorian('1403/01/01')") == "2024-03-20"
    assert q(conn, "SELECT gregorian_date_to_jalali('2024-08-19')") == "1403/05/29"

def test_arithmetic(conn):
    assert q(conn, "SELECT jalali_date_diff('1403/01/01', '1404/01/01')") == 366
    assert q(conn, "SELECT jalali_date_diff_with_addition('1403/01/10', '1403/01/01', 1)") == -10
    assert q(conn, "SELECT jalali_date_add_days('1403/12/30', 1)") == "1404/01/01"
    assert q(conn, "SELECT jalali_date_add_months('1403/06/31', 6)") == "1403/12/30"

def test_leap_year_is_integer(conn):
    assert q(conn, "SELECT jalali_date_is_leap_year('1403/01/01')") == 1
    assert q(conn, "SELECT jalali_date_is_leap_year('1402/01/01')") == 0

def test_period_state(conn):
    assert q(conn, "SELECT jalali_date_period_state('1403/06/31', 31)") == "End"
    assert q(conn, "SELECT jalali_date_period_state(?, ?)", "1403/05/11", 10) == "Start"

def test_now(conn, monkeypatch):
    from datetime import date
    monkeypatch.setattr(api, "utc_today", lambda: date(2024, 3, 20))
    assert q(conn, "SELECT jalali_date_now()") == "1403/01/01"

def test_over_a_table(conn):
    conn.execute("CREATE TABLE t (d TEXT)")
    conn.executemany("INSERT INTO t VALUES (?)", [("1402/12/29",), ("1403/01/01",), ("1403/05/29",)])
    rows = conn.execute("SELECT jalali_date_to_gregorian(d) FROM t ORDER BY d").fetchall()
    assert [r[0] for r in rows] == ["2024-03-19", "2024-03-20", "2024-08-19"]

@pytest.mark.parametrize("sql", [
    "SELECT jalali_date_to_gregorian('1403-01-01')",
    "SELECT jalali_date_to_gregorian('1402/12/30')",
    "SELECT jalali_date_add_months('1403/01/01', 0)",
])
def test_failures_surface_as_operational_error(conn, sql):
    with pytest.raises(sqlite3.OperationalError):
        q(conn, sql)

def test_rule_selection():
    c = sqlite3.connect(":memory:")
    register_functions(c, rule="birashk-2820")
    assert q(c, "SELECT jalali_date_to_gregorian('0001/01/01')") == "0622-03-22"
    c.close()

def test_unknown_rule():
    c = sqlite3.connect(":memory:")
    with pytest.raises(KeyError):
        register_functions(c, rule="no-such-rule")
    c.close()
