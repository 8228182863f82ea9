"""Budget bucket allocation.

A category belongs to at most one bucket. Every update returns a new list of
buckets; the input list is never modified.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Iterable, Sequence

from mefirst.domain.entities import (
    AllocationStatus,
    BudgetBucket,
    BucketStatus,
    PaySettings,
    Transaction,
)

FULL_ALLOCATION = Decimal("100")


def ideal_spend(bucket: BudgetBucket, pay_settings: PaySettings) -> Decimal:
    """Share of monthly income this bucket is meant to receive."""
    return pay_settings.monthly_income * Decimal(bucket.pct) / FULL_ALLOCATION


def actual_spend(bucket: BudgetBucket, transactions: Iterable[Transaction]) -> Decimal:
    """Sum of expenses whose category is in the bucket."""
    categories = set(bucket.categories)
    return sum(
        (txn.amount for txn in transactions if txn.is_expense and txn.category in categories),
        Decimal("0"),
    )


def is_over(
    bucket: BudgetBucket,
    pay_settings: PaySettings,
    transactions: Iterable[Transaction],
) -> bool:
    """True when actual spend exceeds the ideal share."""
    return actual_spend(bucket, transactions) > ideal_spend(bucket, pay_settings)


def bucket_status(
    bucket: BudgetBucket,
    pay_settings: PaySettings,
    transactions: Iterable[Transaction],
) -> BucketStatus:
    """Ideal, actual, over flag and used percentage (capped at 100) for one bucket."""
    ideal = ideal_spend(bucket, pay_settings)
    actual = actual_spend(bucket, transactions)
    used_pct = min(actual / ideal * 100, FULL_ALLOCATION) if ideal > 0 else Decimal("0")
    return BucketStatus(
        bucket=bucket,
        ideal=ideal,
        actual=actual,
        over=actual > ideal,
        used_pct=used_pct,
    )


def category_index(buckets: Iterable[BudgetBucket]) -> dict[str, int]:
    """Map each assigned category to the id of the bucket holding it."""
    index: dict[str, int] = {}
    for bucket in buckets:
        for category in bucket.categories:
            index.setdefault(category, bucket.id)
    return index


def assign_category(
    buckets: Sequence[BudgetBucket], target_bucket_id: int, category: str
) -> list[BudgetBucket]:
    """Put a category in a bucket, taking it out of whichever bucket had it.

    Assigning a category to the bucket that already holds it changes nothing.
    An unknown target id leaves the buckets as they are.
    """
    buckets = list(buckets)
    target = next((b for b in buckets if b.id == target_bucket_id), None)
    if target is None or category in target.categories:
        return buckets

    updated = []
    for bucket in buckets:
        if bucket.id == target_bucket_id:
            bucket = replace(bucket, categories=bucket.categories + (category,))
        elif category in bucket.categories:
            bucket = replace(
                bucket,
                categories=tuple(c for c in bucket.categories if c != category),
            )
        updated.append(bucket)
    return updated


def unassign_category(
    buckets: Sequence[BudgetBucket], bucket_id: int, category: str
) -> list[BudgetBucket]:
    """Remove a category from one bucket only."""
    return [
        replace(bucket, categories=tuple(c for c in bucket.categories if c != category))
        if bucket.id == bucket_id
        else bucket
        for bucket in buckets
    ]


def remove_category_everywhere(
    buckets: Sequence[BudgetBucket], category: str
) -> list[BudgetBucket]:
    """Drop a deleted category from every bucket."""
    return [
        replace(bucket, categories=tuple(c for c in bucket.categories if c != category))
        for bucket in buckets
    ]


def allocation_status(buckets: Iterable[BudgetBucket]) -> AllocationStatus:
    """Report whether percentages add up to 100 and which buckets are empty.

    This is a warning state for display; nothing is rejected.
    """
    buckets = list(buckets)
    total = sum((Decimal(b.pct) for b in buckets), Decimal("0"))
    return AllocationStatus(
        total_pct=total,
        balanced=total == FULL_ALLOCATION,
        empty_bucket_ids=tuple(b.id for b in buckets if not b.categories),
    )
