"""Budget bucket domain service."""

from typing import Iterable, Optional

from mefirst.database.base import Store
from mefirst.database.records import Records
from mefirst.domain import allocation
from mefirst.domain.entities import AllocationStatus, BudgetBucket, BucketStatus, Transaction
from mefirst.domain.errors import NotFoundError, ValidationError, bucket_not_found
from mefirst.domain.validation import require_known_category, require_name, to_decimal
from mefirst.logging_setup import get_logger

logger = get_logger("mefirst.domain.budget")


class BudgetService:
    """Service for budget buckets and their category assignments."""

    def __init__(self, store: Store):
        """Initialize budget service.

        Args:
            store: Store instance
        """
        self.store = store
        self.records = Records(store)

    def list_buckets(self) -> list[BudgetBucket]:
        return self.records.load_buckets()

    def get_bucket(self, bucket_id: int) -> Optional[BudgetBucket]:
        return next((b for b in self.records.load_buckets() if b.id == bucket_id), None)

    def _require_bucket(self, buckets: list[BudgetBucket], bucket_id: int) -> BudgetBucket:
        bucket = next((b for b in buckets if b.id == bucket_id), None)
        if bucket is None:
            raise NotFoundError(bucket_not_found(bucket_id))
        return bucket

    def assign_category(self, bucket_id: int, category: str) -> list[BudgetBucket]:
        """Move a category into a bucket.

        The category leaves any bucket it was in before, so its spend is never
        counted twice.

        Raises:
            NotFoundError: If the bucket doesn't exist
            ValidationError: If the category is not configured
        """
        buckets = self.records.load_buckets(strict=True)
        self._require_bucket(buckets, bucket_id)
        require_known_category(category, self.records.load_categories())

        previous = allocation.category_index(buckets).get(category)
        updated = allocation.assign_category(buckets, bucket_id, category)
        if updated != buckets:
            self.records.save_buckets(updated)
            if previous is not None and previous != bucket_id:
                logger.info("Moved '%s' from bucket %s to %s", category, previous, bucket_id)
        return updated

    def unassign_category(self, bucket_id: int, category: str) -> list[BudgetBucket]:
        """Take a category out of one bucket.

        Raises:
            NotFoundError: If the bucket doesn't exist
        """
        buckets = self.records.load_buckets(strict=True)
        self._require_bucket(buckets, bucket_id)
        updated = allocation.unassign_category(buckets, bucket_id, category)
        self.records.save_buckets(updated)
        return updated

    def update_bucket(
        self, bucket_id: int, label: Optional[str] = None, pct=None
    ) -> BudgetBucket:
        """Change a bucket's label and/or percentage of income.

        Percentages need not add up to 100; see allocation_status.

        Raises:
            NotFoundError: If the bucket doesn't exist
            ValidationError: If the label is empty or pct is outside 0-100
        """
        buckets = self.records.load_buckets(strict=True)
        bucket = self._require_bucket(buckets, bucket_id)

        new_label = bucket.label if label is None else require_name(label, "Bucket")
        new_pct = bucket.pct
        if pct is not None:
            new_pct = to_decimal(pct, "Percentage")
            if not 0 <= new_pct <= 100:
                raise ValidationError("Percentage must be between 0 and 100")

        updated = BudgetBucket(
            id=bucket.id,
            label=new_label,
            pct=new_pct,
            color=bucket.color,
            categories=bucket.categories,
        )
        self.records.save_buckets([updated if b.id == bucket_id else b for b in buckets])
        return updated

    def set_percentage(self, bucket_id: int, pct) -> BudgetBucket:
        return self.update_bucket(bucket_id, pct=pct)

    def bucket_statuses(self, transactions: Iterable[Transaction]) -> list[BucketStatus]:
        """Ideal vs. actual spend per bucket for the given period transactions."""
        transactions = list(transactions)
        pay_settings = self.records.load_pay_settings()
        return [
            allocation.bucket_status(bucket, pay_settings, transactions)
            for bucket in self.records.load_buckets()
        ]

    def allocation_status(self) -> AllocationStatus:
        return allocation.allocation_status(self.records.load_buckets())
