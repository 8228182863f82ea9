"""Transaction totals and free-to-spend figures."""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from mefirst.domain.entities import (
    PaySettings,
    RecurringExpense,
    Transaction,
    TransactionKind,
)

ZERO = Decimal("0")


def total_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Sum expenses per category.

    Transfers and investments move money rather than spend it, so they are left out.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn.is_expense:
            totals[txn.category] += txn.amount
    return dict(totals)


def expense_total(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of expense amounts."""
    return sum((txn.amount for txn in transactions if txn.is_expense), ZERO)


def recurring_total(recurring_expenses: Iterable[RecurringExpense]) -> Decimal:
    """Sum of recurring bills."""
    return sum((r.amount for r in recurring_expenses), ZERO)


def free_to_spend(pay_settings: PaySettings, recurring_sum: Decimal) -> Decimal:
    """Income left once recurring obligations are paid."""
    return pay_settings.monthly_income - recurring_sum


def remaining(free_amount: Decimal, period_expense_total: Decimal) -> Decimal:
    """What is left this period; negative means over budget."""
    return free_amount - period_expense_total


def largest_category_total(totals: Mapping[str, Decimal]) -> Decimal:
    """Largest category total, at least 1 so it can scale display bars."""
    return max([*totals.values(), Decimal("1")])


def filter_transactions(
    transactions: Iterable[Transaction],
    *,
    kind: Optional[TransactionKind] = None,
    category: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[Transaction]:
    """Filter transactions by kind, category and inclusive date range."""
    results = []
    for txn in transactions:
        if kind is not None:
            txn_kind = txn.kind or TransactionKind.EXPENSE
            if txn_kind != kind:
                continue
        if category is not None and txn.category != category:
            continue
        if start is not None and txn.date < start:
            continue
        if end is not None and txn.date > end:
            continue
        results.append(txn)
    return results
