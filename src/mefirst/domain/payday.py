"""Next-payday computation.

Two rules, applied in this order for every candidate month:

1. the configured day is clamped to the month's last day before the date is
   built (never build an out-of-range day and roll into the next month);
2. a Saturday moves back to Friday, a Sunday moves back two days to Friday.
"""

from datetime import date, timedelta

from mefirst.logging_setup import get_logger
from mefirst.utils.date_parser import last_day_of_month

logger = get_logger("mefirst.domain.payday")

SATURDAY = 5
SUNDAY = 6
FALLBACK_OFFSET = 2


def adjust_for_weekend(candidate: date) -> date:
    """Move a weekend date back to the preceding Friday."""
    weekday = candidate.weekday()
    if weekday == SATURDAY:
        return candidate - timedelta(days=1)
    if weekday == SUNDAY:
        return candidate - timedelta(days=2)
    return candidate


def payday_candidate(today: date, payday_day_of_month: int, offset: int) -> date:
    """Weekend-adjusted payday in the month ``offset`` months after ``today``'s."""
    month_index = today.month - 1 + offset
    year = today.year + month_index // 12
    month = month_index % 12 + 1

    day = max(1, min(int(payday_day_of_month), last_day_of_month(year, month)))
    return adjust_for_weekend(date(year, month, day))


def next_payday(today: date, payday_day_of_month: int) -> date:
    """Return the next payday on or after ``today``.

    This month's payday is tried first, then next month's. When both have been
    pulled before ``today`` by the weekend rule, the month after next is
    returned without further checks.
    """
    for offset in (0, 1):
        candidate = payday_candidate(today, payday_day_of_month, offset)
        if candidate >= today:
            return candidate

    fallback = payday_candidate(today, payday_day_of_month, FALLBACK_OFFSET)
    logger.warning(
        "Payday fallback used for today=%s day=%s: returning unverified %s",
        today.isoformat(),
        payday_day_of_month,
        fallback.isoformat(),
    )
    return fallback


def days_until(payday: date, today: date) -> int:
    """Whole days from ``today`` to ``payday``, never negative."""
    return max((payday - today).days, 0)
