"""Default records used on first run and after clearing all data."""

from decimal import Decimal

from mefirst.domain.entities import BudgetBucket, PaySettings

DEFAULT_SPEND_CATEGORIES: tuple[str, ...] = (
    "Groceries",
    "Transport",
    "Dining",
    "Beauty",
    "Home",
    "Entertainment",
    "Clothing",
    "Health",
    "Travel",
    "Other",
)

WISHLIST_CATEGORIES: tuple[str, ...] = (
    "Fashion",
    "Beauty",
    "Tech",
    "Travel",
    "Home",
    "Wellness",
    "Other",
)

BUDGET_COLORS: tuple[str, ...] = (
    "#7a9e7e",
    "#c4a882",
    "#b8796a",
    "#a8b5c8",
    "#c4a0b0",
    "#7a9ea0",
    "#b5a0c4",
    "#a0b8b5",
    "#c4b5a0",
    "#8a9eb5",
)

DEFAULT_BUCKETS: tuple[BudgetBucket, ...] = (
    BudgetBucket(1, "Savings", Decimal("20"), BUDGET_COLORS[0], ()),
    BudgetBucket(2, "Home & Bills", Decimal("30"), BUDGET_COLORS[1], ("Home",)),
    BudgetBucket(3, "Transport", Decimal("10"), BUDGET_COLORS[2], ("Transport",)),
    BudgetBucket(4, "Groceries", Decimal("15"), BUDGET_COLORS[3], ("Groceries",)),
    BudgetBucket(
        5,
        "Personal & Fun",
        Decimal("15"),
        BUDGET_COLORS[4],
        ("Beauty", "Entertainment", "Clothing", "Dining"),
    ),
    BudgetBucket(6, "Investments", Decimal("10"), BUDGET_COLORS[5], ()),
)

DEFAULT_PAY_SETTINGS = PaySettings(
    monthly_income=Decimal("0"),
    monthly_hours=Decimal("160"),
    payday_day_of_month=1,
)
