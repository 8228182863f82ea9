"""Tests for date parsing and calendar helpers."""

import time

import pytest
from datetime import date, datetime, timedelta
from mefirst.utils.date_parser import (
    add_months,
    format_short,
    last_day_of_month,
    parse_date,
    parse_local_date,
)


@pytest.fixture
def host_timezone(monkeypatch):
    """Switch the process timezone, restoring it afterwards."""

    def switch(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield switch
    monkeypatch.undo()
    time.tzset()


@pytest.mark.skipif(not hasattr(time, "tzset"), reason="time.tzset is not available")
@pytest.mark.parametrize(
    "tz",
    ["UTC", "America/Los_Angeles", "Pacific/Auckland", "Asia/Kolkata", "Pacific/Kiritimati"],
)
def test_parse_local_date_keeps_calendar_day(host_timezone, tz):
    """An ISO date is read as the same calendar day, whatever the host offset."""
    host_timezone(tz)

    result = parse_local_date("2026-02-28")
    assert result.day == 28
    assert result == date(2026, 2, 28)
    assert parse_local_date("2026-02-28T00:00:00Z") == date(2026, 2, 28)


def test_parse_local_date_ignores_time_suffix():
    """A time part, even one marked UTC, does not move the date."""
    assert parse_local_date("2026-02-28T00:00:00Z") == date(2026, 2, 28)
    assert parse_local_date("2026-03-01 23:59") == date(2026, 3, 1)


def test_parse_local_date_passes_dates_through():
    assert parse_local_date(date(2026, 1, 5)) == date(2026, 1, 5)
    assert parse_local_date(datetime(2026, 1, 5, 23, 30)) == date(2026, 1, 5)


@pytest.mark.parametrize("value", ["", "28/02/2026", "2026-02-30", "2026-13-01", "not a date"])
def test_parse_local_date_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_local_date(value)


def test_last_day_of_month():
    assert last_day_of_month(2026, 2) == 28
    assert last_day_of_month(2024, 2) == 29
    assert last_day_of_month(2026, 4) == 30
    assert last_day_of_month(2026, 12) == 31


def test_add_months_clamps_to_month_end():
    """31 March minus one month lands on the last day of February."""
    assert add_months(date(2026, 3, 31), -1) == date(2026, 2, 28)
    assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert add_months(date(2026, 1, 15), -1) == date(2025, 12, 15)


def test_format_short():
    assert format_short(date(2026, 3, 1)) == "1 Mar"
    assert format_short(date(2026, 12, 25)) == "25 Dec"


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_named_month_date():
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_tomorrow():
    assert parse_date("Tomorrow") == date.today() + timedelta(days=1)


def test_parse_this_and_last_month():
    today = date.today()
    assert parse_date("this month") == today.replace(day=1)
    last = parse_date("last month")
    assert last.day == 1
    assert last < today.replace(day=1)
    assert (today.replace(day=1) - last).days <= 31


def test_parse_this_week_is_monday():
    assert parse_date("this week").weekday() == 0


def test_parse_invalid_date():
    """Test that invalid dates raise ValueError."""
    with pytest.raises(ValueError):
        parse_date("definitely not a date")
