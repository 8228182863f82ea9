"""Recurring expense domain service."""

from decimal import Decimal
from typing import Optional

from mefirst.database.base import Store
from mefirst.database.records import Records, next_id
from mefirst.domain.aggregates import recurring_total
from mefirst.domain.entities import RecurringExpense, clamp_payday_day
from mefirst.domain.errors import NotFoundError, recurring_not_found
from mefirst.domain.validation import require_known_category, require_name, require_positive


class RecurringService:
    """Service for managing monthly recurring bills."""

    def __init__(self, store: Store):
        """Initialize recurring expense service.

        Args:
            store: Store instance
        """
        self.store = store
        self.records = Records(store)

    def _build(self, recurring_id: int, name, category, amount, day_of_month) -> RecurringExpense:
        return RecurringExpense(
            id=recurring_id,
            name=require_name(name, "Recurring expense"),
            category=require_known_category(category, self.records.load_categories()),
            amount=require_positive(amount),
            day_of_month=clamp_payday_day(day_of_month),
        )

    def add_recurring(
        self, name: str, category: str, amount, day_of_month: int = 1
    ) -> RecurringExpense:
        """Create a recurring expense.

        Args:
            name: Bill name
            category: Spending category
            amount: Positive monthly amount
            day_of_month: Due day, clamped to 1-28

        Returns:
            Created recurring expense

        Raises:
            ValidationError: If any input is invalid
        """
        recurring = self.records.load_recurring(strict=True)
        expense = self._build(next_id(recurring), name, category, amount, day_of_month)
        self.records.save_recurring([*recurring, expense])
        return expense

    def get_recurring(self, recurring_id: int) -> Optional[RecurringExpense]:
        return next((r for r in self.records.load_recurring() if r.id == recurring_id), None)

    def list_recurring(self) -> list[RecurringExpense]:
        return sorted(self.records.load_recurring(), key=lambda r: (r.day_of_month, r.id))

    def update_recurring(
        self, recurring_id: int, name: str, category: str, amount, day_of_month: int
    ) -> RecurringExpense:
        """Replace a recurring expense.

        Raises:
            NotFoundError: If the recurring expense doesn't exist
            ValidationError: If any input is invalid
        """
        recurring = self.records.load_recurring(strict=True)
        if not any(r.id == recurring_id for r in recurring):
            raise NotFoundError(recurring_not_found(recurring_id))
        expense = self._build(recurring_id, name, category, amount, day_of_month)
        self.records.save_recurring([expense if r.id == recurring_id else r for r in recurring])
        return expense

    def delete_recurring(self, recurring_id: int) -> None:
        """Delete a recurring expense.

        Raises:
            NotFoundError: If the recurring expense doesn't exist
        """
        recurring = self.records.load_recurring(strict=True)
        if not any(r.id == recurring_id for r in recurring):
            raise NotFoundError(recurring_not_found(recurring_id))
        self.records.save_recurring([r for r in recurring if r.id != recurring_id])

    def total(self) -> Decimal:
        """Sum of all recurring bills."""
        return recurring_total(self.records.load_recurring())
