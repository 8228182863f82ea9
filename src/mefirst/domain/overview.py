"""Overview domain service."""

from datetime import date
from typing import Optional

from mefirst.database.base import Store
from mefirst.database.records import Records
from mefirst.domain import aggregates, allocation
from mefirst.domain.entities import Overview
from mefirst.domain.payday import days_until, next_payday
from mefirst.domain.periods import build_periods, select_period


class OverviewService:
    """Service for building the dashboard snapshot."""

    def __init__(self, store: Store):
        """Initialize overview service.

        Args:
            store: Store instance
        """
        self.store = store
        self.records = Records(store)

    def build_overview(self, today: Optional[date] = None, period_index: int = 0) -> Overview:
        """Compute every dashboard figure from the stored records.

        Args:
            today: Current calendar date (defaults to date.today())
            period_index: 0 for the current pay period, 1 for the one before, ...;
                an index past the last period selects all transactions

        Returns:
            Overview snapshot
        """
        today = today or date.today()
        pay_settings = self.records.load_pay_settings()
        transactions = self.records.load_transactions()
        buckets = self.records.load_buckets()

        payday = next_payday(today, pay_settings.payday_day_of_month)
        periods = build_periods(transactions, payday)
        period = select_period(periods, period_index, transactions)

        period_expenses = aggregates.expense_total(period.items)
        bills = aggregates.recurring_total(self.records.load_recurring())
        free = aggregates.free_to_spend(pay_settings, bills)

        return Overview(
            today=today,
            next_payday=payday,
            days_until_payday=days_until(payday, today),
            periods=tuple(periods),
            period=period,
            period_expense_total=period_expenses,
            recurring_total=bills,
            free_to_spend=free,
            remaining=aggregates.remaining(free, period_expenses),
            category_totals=aggregates.total_by_category(period.items),
            bucket_statuses=tuple(
                allocation.bucket_status(bucket, pay_settings, period.items)
                for bucket in buckets
            ),
            allocation=allocation.allocation_status(buckets),
        )
