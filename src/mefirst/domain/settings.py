"""Pay settings and spending category service."""

from typing import Optional

from mefirst.database.base import Store
from mefirst.database.records import Records
from mefirst.domain.allocation import remove_category_everywhere
from mefirst.domain.entities import PaySettings
from mefirst.domain.errors import ConflictError, NotFoundError, unknown_category
from mefirst.domain.validation import require_name, require_non_negative
from mefirst.logging_setup import get_logger

logger = get_logger("mefirst.domain.settings")


class SettingsService:
    """Service for pay settings, spending categories and data reset."""

    def __init__(self, store: Store):
        """Initialize settings service.

        Args:
            store: Store instance
        """
        self.store = store
        self.records = Records(store)

    def get_pay_settings(self) -> PaySettings:
        return self.records.load_pay_settings()

    def update_pay_settings(
        self,
        monthly_income=None,
        monthly_hours=None,
        payday_day_of_month: Optional[int] = None,
    ) -> PaySettings:
        """Update any of the pay settings, keeping the others.

        The payday day is clamped to 1-28.

        Raises:
            ValidationError: If income or hours are negative
        """
        current = self.records.load_pay_settings(strict=True)
        settings = PaySettings(
            monthly_income=(
                current.monthly_income
                if monthly_income is None
                else require_non_negative(monthly_income, "Monthly income")
            ),
            monthly_hours=(
                current.monthly_hours
                if monthly_hours is None
                else require_non_negative(monthly_hours, "Monthly hours")
            ),
            payday_day_of_month=(
                current.payday_day_of_month
                if payday_day_of_month is None
                else payday_day_of_month
            ),
        )
        self.records.save_pay_settings(settings)
        return settings

    def list_categories(self) -> list[str]:
        return self.records.load_categories()

    def add_category(self, name: str) -> str:
        """Add a spending category.

        Raises:
            ValidationError: If the name is empty
            ConflictError: If the category already exists
        """
        name = require_name(name, "Category")
        categories = self.records.load_categories(strict=True)
        if name in categories:
            raise ConflictError(f"Category '{name}' already exists")
        self.records.save_categories([*categories, name])
        return name

    def remove_category(self, name: str) -> None:
        """Remove a spending category and take it out of every bucket.

        Existing transactions keep their category name.

        Raises:
            NotFoundError: If the category doesn't exist
        """
        categories = self.records.load_categories(strict=True)
        if name not in categories:
            raise NotFoundError(unknown_category(name))
        buckets = self.records.load_buckets(strict=True)
        self.records.save_categories([c for c in categories if c != name])
        self.records.save_buckets(remove_category_everywhere(buckets, name))

    def clear_all(self) -> None:
        """Delete every record and go back to the defaults."""
        self.records.clear()
        logger.info("Cleared all data")