"""Domain model entities for mefirst.

These are pure data classes representing budgeting concepts, independent of
how the records are stored. Derived records (pay periods, bucket statuses,
the overview snapshot) are recomputed on demand and never persisted.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Mapping, Optional

MIN_PAYDAY_DAY = 1
MAX_PAYDAY_DAY = 28


def clamp_payday_day(day: int) -> int:
    """Clamp a configured payday day-of-month to 1..28 (valid in every month)."""
    return max(MIN_PAYDAY_DAY, min(MAX_PAYDAY_DAY, int(day)))


class TransactionKind(str, Enum):
    """What a transaction does with the money."""

    EXPENSE = "expense"
    TRANSFER_TO_SAVINGS = "transfer"
    INVESTMENT = "investment"


@dataclass(frozen=True)
class PaySettings:
    """Income settings driving budgets and paydays."""

    monthly_income: Decimal = Decimal("0")
    monthly_hours: Decimal = Decimal("160")
    payday_day_of_month: int = 1

    def __post_init__(self):
        object.__setattr__(
            self, "payday_day_of_month", clamp_payday_day(self.payday_day_of_month)
        )

    @property
    def hourly_rate(self) -> Decimal:
        if self.monthly_hours > 0:
            return self.monthly_income / self.monthly_hours
        return Decimal("0")


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    name: str
    category: str
    amount: Decimal
    date: date
    kind: Optional[TransactionKind] = TransactionKind.EXPENSE
    linked_goal_id: Optional[int] = None

    @property
    def is_expense(self) -> bool:
        """Kind-less transactions count as expenses."""
        return self.kind is None or self.kind == TransactionKind.EXPENSE


@dataclass(frozen=True)
class BudgetBucket:
    """A named share of income mapped to spending categories."""

    id: int
    label: str
    pct: Decimal
    color: str = ""
    categories: tuple[str, ...] = ()


@dataclass(frozen=True)
class RecurringExpense:
    """Monthly recurring bill."""

    id: int
    name: str
    category: str
    amount: Decimal
    day_of_month: int = 1


@dataclass(frozen=True)
class Goal:
    """Savings goal funded by transfers and investments."""

    id: int
    name: str
    target: Decimal
    current: Decimal = Decimal("0")


@dataclass(frozen=True)
class WishlistItem:
    """Something wanted but not bought yet."""

    id: int
    name: str
    price: Decimal
    category: str
    days_wanted: int = 0
    quiz_score: Optional[float] = None
    last_quiz_answers: Optional[Mapping[int, str]] = None


@dataclass(frozen=True)
class QuizQuestion:
    """Wishlist quiz question with a signed weight."""

    text: str
    weight: int


@dataclass(frozen=True)
class PayPeriod:
    """One-month window ending on a payday (end date inclusive)."""

    label: str
    start_date: Optional[date]
    end_date: Optional[date]
    items: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class BucketStatus:
    """Ideal vs. actual spend for one bucket in a period."""

    bucket: BudgetBucket
    ideal: Decimal
    actual: Decimal
    over: bool
    used_pct: Decimal


@dataclass(frozen=True)
class AllocationStatus:
    """Warning state of the bucket allocation as a whole."""

    total_pct: Decimal
    balanced: bool
    empty_bucket_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class ImpulseVerdict:
    """Impulse score and label for a wishlist item."""

    item: WishlistItem
    score: float
    label: str
    work_hours: Optional[Decimal] = None


@dataclass(frozen=True)
class Overview:
    """Dashboard snapshot computed from the current records."""

    today: date
    next_payday: date
    days_until_payday: int
    periods: tuple[PayPeriod, ...]
    period: PayPeriod
    period_expense_total: Decimal
    recurring_total: Decimal
    free_to_spend: Decimal
    remaining: Decimal
    category_totals: dict[str, Decimal] = field(default_factory=dict)
    bucket_statuses: tuple[BucketStatus, ...] = ()
    allocation: Optional[AllocationStatus] = None
