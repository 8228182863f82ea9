"""Tests for next-payday computation."""

import logging
from datetime import date, timedelta

import pytest

from mefirst.domain.payday import adjust_for_weekend, days_until, next_payday, payday_candidate


def test_weekday_payday_this_month():
    assert next_payday(date(2026, 3, 10), 25) == date(2026, 3, 25)


def test_payday_today_counts():
    assert next_payday(date(2026, 3, 25), 25) == date(2026, 3, 25)


def test_passed_payday_moves_to_next_month():
    assert next_payday(date(2026, 3, 26), 25) == date(2026, 4, 24)  # 25 Apr 2026 is a Saturday


def test_saturday_moves_back_to_friday():
    """1 Aug 2026 is a Saturday, so that payday falls on Friday 31 July."""
    assert next_payday(date(2026, 7, 20), 1) == date(2026, 7, 31)


def test_sunday_moves_back_to_friday():
    """1 Nov 2026 is a Sunday, so that payday falls on Friday 30 October."""
    assert next_payday(date(2026, 10, 19), 1) == date(2026, 10, 30)


def test_weekend_shift_before_today_moves_to_next_month():
    """15 Mar 2026 is a Sunday: shifted to 13 Mar, which is already past on the 14th."""
    assert next_payday(date(2026, 3, 14), 15) == date(2026, 4, 15)


def test_day_clamped_to_short_month_never_rolls_over():
    """Day 31 in February is 28 Feb (a Saturday), then Friday 27 Feb, never March."""
    assert next_payday(date(2026, 2, 10), 31) == date(2026, 2, 27)


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2026, 4, 2), date(2026, 4, 30)),
        (date(2026, 6, 5), date(2026, 6, 30)),
        (date(2026, 3, 31), date(2026, 3, 31)),
    ],
)
def test_day_31_lands_on_last_weekday(today, expected):
    assert next_payday(today, 31) == expected


def test_fallback_two_months_ahead(caplog):
    """28 Feb 2026 is a Saturday; both this month's and next month's day-1 paydays
    (Sun 1 Feb -> 30 Jan, Sun 1 Mar -> 27 Feb) fall before it."""
    with caplog.at_level(logging.WARNING, logger="mefirst.domain.payday"):
        result = next_payday(date(2026, 2, 28), 1)

    assert result == date(2026, 4, 1)
    assert "fallback" in caplog.text


def test_december_rolls_into_next_year():
    assert next_payday(date(2026, 12, 29), 25) == date(2027, 1, 25)


def test_payday_candidate_offsets_cross_year():
    assert payday_candidate(date(2026, 11, 3), 1, 2) == date(2027, 1, 1)


def test_adjust_for_weekend_leaves_weekdays():
    monday = date(2026, 10, 19)
    assert adjust_for_weekend(monday) == monday
    assert adjust_for_weekend(date(2026, 10, 24)) == date(2026, 10, 23)
    assert adjust_for_weekend(date(2026, 10, 25)) == date(2026, 10, 23)


def test_next_payday_properties_over_a_year():
    """Every result is on or after today and never on a weekend. The two-months
    fallback is only taken when both nearer paydays fall before today."""
    day = date(2026, 1, 1)
    while day.year == 2026:
        for payday_day in range(1, 29):
            result = next_payday(day, payday_day)
            assert result >= day
            assert result.weekday() < 5

            this_month = payday_candidate(day, payday_day, 0)
            next_month = payday_candidate(day, payday_day, 1)
            if result not in (this_month, next_month):
                assert result == payday_candidate(day, payday_day, 2)
                assert this_month < day and next_month < day
        day += timedelta(days=1)


def test_days_until():
    assert days_until(date(2026, 10, 30), date(2026, 10, 19)) == 11
    assert days_until(date(2026, 10, 19), date(2026, 10, 19)) == 0
    assert days_until(date(2026, 10, 18), date(2026, 10, 19)) == 0
