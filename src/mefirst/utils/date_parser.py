"""Date parsing utilities.

Every date in mefirst is a calendar day, never an instant. Strings are turned
into dates here and nowhere else.
"""

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_ISO_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ].*)?$")


def parse_local_date(value: Union[str, date]) -> date:
    """Parse an ISO date string as a local calendar date.

    The year, month and day are read separately and the date is built from
    them, so the result never depends on the host's UTC offset. A trailing
    time part ("2026-02-28T00:00:00Z") is ignored.

    Args:
        value: "YYYY-MM-DD" string, or a date which is returned as-is

    Returns:
        Date object

    Raises:
        ValueError: If the string is not an ISO calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    match = _ISO_DATE.match(str(value).strip())
    if match is None:
        raise ValueError(f"Could not parse date '{value}': expected YYYY-MM-DD")

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Could not parse date '{value}': {e}")


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in a month (1-based month, leap years included)."""
    return calendar.monthrange(year, month)[1]


def add_months(value: date, months: int) -> date:
    """Shift a date by whole calendar months.

    Days past the end of a shorter month land on its last day, e.g.
    31 March minus one month is 28 February.
    """
    return value + relativedelta(months=months)


def format_short(value: date) -> str:
    """Format a date for display as "D Mon" (e.g. "1 Mar")."""
    return f"{value.day} {value.strftime('%b')}"


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - ISO dates: "2024-01-15" (always read as a local calendar date)
    - Other absolute dates: "January 15, 2024", "15/01/2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this year", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return add_months(today, -1).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            # Monday of last week
            return today - timedelta(days=today.weekday() + 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "month":
            return add_months(today, 1).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=1)
        elif period == "week":
            return today + timedelta(days=(7 - today.weekday()))

    if _ISO_DATE.match(date_str):
        return parse_local_date(date_str)

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
