"""Pay period partitioning."""

from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from mefirst.domain.entities import PayPeriod, Transaction
from mefirst.utils.date_parser import add_months, format_short, parse_local_date

PERIOD_COUNT = 6
ALL_TIME_LABEL = "All time"


def period_label(start_date: date, end_date: date) -> str:
    """Display label such as "2 Feb – 1 Mar"."""
    return f"{format_short(start_date)} – {format_short(end_date)}"


def in_period(txn_date: date, start_date: date, end_date: date) -> bool:
    """Check ``start_date <= txn_date < end_date + 1 day``."""
    return start_date <= txn_date < end_date + timedelta(days=1)


def build_periods(
    transactions: Iterable[Transaction],
    next_payday_date: date,
    count: int = PERIOD_COUNT,
) -> list[PayPeriod]:
    """Split transactions into monthly pay periods ending on paydays.

    Windows are chained backwards one calendar month at a time from
    ``next_payday_date``, most recent first. Each period includes its end date;
    its first day is the day after the previous period's end, so every
    transaction lands in at most one period.

    Args:
        transactions: Transactions to assign
        next_payday_date: End date of the most recent period
        count: Number of periods to build

    Returns:
        List of PayPeriod, index 0 being the current period
    """
    transactions = list(transactions)
    end = parse_local_date(next_payday_date)

    periods: list[PayPeriod] = []
    for _ in range(count):
        boundary = add_months(end, -1)
        start = boundary + timedelta(days=1)
        items = tuple(
            txn for txn in transactions if in_period(txn.date, start, end)
        )
        periods.append(
            PayPeriod(
                label=period_label(start, end),
                start_date=start,
                end_date=end,
                items=items,
            )
        )
        end = boundary

    return periods


def select_period(
    periods: Sequence[PayPeriod],
    index: Optional[int],
    transactions: Iterable[Transaction],
) -> PayPeriod:
    """Return the period at ``index``, or an "All time" period when out of range."""
    if index is not None and 0 <= index < len(periods):
        return periods[index]
    return PayPeriod(
        label=ALL_TIME_LABEL,
        start_date=None,
        end_date=None,
        items=tuple(transactions),
    )
