"""Typed access to the record collections kept in a Store.

Each collection lives under one key. A missing key always gives the
defaults. Otherwise loads come in two flavours: lenient loads, used for
display, fall back to the defaults when the value has the wrong shape or the
store is unavailable; strict loads, used before a collection is rewritten,
raise StoreError instead so that a fallback never gets saved over real data.
"""

from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar

from mefirst.database import mappers
from mefirst.database.base import Store, StoreError
from mefirst.domain.defaults import (
    DEFAULT_BUCKETS,
    DEFAULT_PAY_SETTINGS,
    DEFAULT_SPEND_CATEGORIES,
)
from mefirst.domain.entities import (
    BudgetBucket,
    Goal,
    PaySettings,
    RecurringExpense,
    Transaction,
    WishlistItem,
)
from mefirst.logging_setup import get_logger

logger = get_logger("mefirst.database.records")

T = TypeVar("T")

SETTINGS_KEY = "settings"
CATEGORIES_KEY = "categories"
TRANSACTIONS_KEY = "transactions"
RECURRING_KEY = "recurring"
BUCKETS_KEY = "budget"
GOALS_KEY = "goals"
WISHLIST_KEY = "wishlist"

ALL_KEYS = (
    SETTINGS_KEY,
    CATEGORIES_KEY,
    TRANSACTIONS_KEY,
    RECURRING_KEY,
    BUCKETS_KEY,
    GOALS_KEY,
    WISHLIST_KEY,
)


def next_id(items: Iterable[Any]) -> int:
    """Next free integer id for a collection."""
    return max((item.id for item in items), default=0) + 1


class Records:
    """Load and save record collections through a Store."""

    def __init__(self, store: Store):
        """Initialize record access.

        Args:
            store: Store instance
        """
        self.store = store

    def _read(self, key: str, strict: bool = False) -> Optional[Any]:
        try:
            return self.store.get(key)
        except StoreError as e:
            if strict:
                raise
            logger.warning("Store unavailable for '%s', using defaults: %s", key, e)
            return None

    def _fallback(self, key: str, reason: str, strict: bool) -> None:
        if strict:
            raise StoreError(f"Stored '{key}' is malformed, refusing to overwrite it: {reason}")
        logger.warning("Malformed '%s', using defaults: %s", key, reason)

    def _load_list(
        self,
        key: str,
        to_domain: Callable[[dict[str, Any]], T],
        default: Sequence[T],
        strict: bool = False,
    ) -> list[T]:
        raw = self._read(key, strict)
        if raw is None:
            return list(default)
        if not isinstance(raw, list):
            self._fallback(key, "expected a list", strict)
            return list(default)
        try:
            return [to_domain(entry) for entry in raw]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            self._fallback(key, str(e), strict)
            return list(default)

    def _save_list(
        self, key: str, items: Iterable[T], to_json: Callable[[T], dict[str, Any]]
    ) -> None:
        self.store.set(key, [to_json(item) for item in items])

    def load_pay_settings(self, strict: bool = False) -> PaySettings:
        raw = self._read(SETTINGS_KEY, strict)
        if raw is None:
            return DEFAULT_PAY_SETTINGS
        try:
            return mappers.pay_settings_to_domain(raw)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            self._fallback(SETTINGS_KEY, str(e), strict)
            return DEFAULT_PAY_SETTINGS

    def save_pay_settings(self, settings: PaySettings) -> None:
        self.store.set(SETTINGS_KEY, mappers.pay_settings_to_json(settings))

    def load_categories(self, strict: bool = False) -> list[str]:
        raw = self._read(CATEGORIES_KEY, strict)
        if raw is None:
            return list(DEFAULT_SPEND_CATEGORIES)
        if not isinstance(raw, list) or not all(isinstance(c, str) for c in raw):
            self._fallback(CATEGORIES_KEY, "expected a list of names", strict)
            return list(DEFAULT_SPEND_CATEGORIES)
        return list(raw)

    def save_categories(self, categories: Iterable[str]) -> None:
        self.store.set(CATEGORIES_KEY, list(categories))

    def load_transactions(self, strict: bool = False) -> list[Transaction]:
        return self._load_list(TRANSACTIONS_KEY, mappers.transaction_to_domain, (), strict)

    def save_transactions(
        self, transactions: Iterable[Transaction], goals: Optional[Iterable[Goal]] = None
    ) -> None:
        """Save transactions, and the goals they fund in the same write when given."""
        payload = {
            TRANSACTIONS_KEY: [mappers.transaction_to_json(t) for t in transactions]
        }
        if goals is not None:
            payload[GOALS_KEY] = [mappers.goal_to_json(g) for g in goals]
        self.store.set_many(payload)

    def load_recurring(self, strict: bool = False) -> list[RecurringExpense]:
        return self._load_list(RECURRING_KEY, mappers.recurring_to_domain, (), strict)

    def save_recurring(self, recurring: Iterable[RecurringExpense]) -> None:
        self._save_list(RECURRING_KEY, recurring, mappers.recurring_to_json)

    def load_buckets(self, strict: bool = False) -> list[BudgetBucket]:
        return self._load_list(BUCKETS_KEY, mappers.bucket_to_domain, DEFAULT_BUCKETS, strict)

    def save_buckets(self, buckets: Iterable[BudgetBucket]) -> None:
        self._save_list(BUCKETS_KEY, buckets, mappers.bucket_to_json)

    def load_goals(self, strict: bool = False) -> list[Goal]:
        return self._load_list(GOALS_KEY, mappers.goal_to_domain, (), strict)

    def save_goals(self, goals: Iterable[Goal]) -> None:
        self._save_list(GOALS_KEY, goals, mappers.goal_to_json)

    def load_wishlist(self, strict: bool = False) -> list[WishlistItem]:
        return self._load_list(WISHLIST_KEY, mappers.wishlist_item_to_domain, (), strict)

    def save_wishlist(self, items: Iterable[WishlistItem]) -> None:
        self._save_list(WISHLIST_KEY, items, mappers.wishlist_item_to_json)

    def clear(self) -> None:
        """Delete every collection key."""
        for key in ALL_KEYS:
            self.store.delete(key)
