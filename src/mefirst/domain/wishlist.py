"""Wishlist domain service."""

from dataclasses import replace
from typing import Mapping, Optional, Sequence

from mefirst.database.base import Store
from mefirst.database.records import Records, next_id
from mefirst.domain.defaults import WISHLIST_CATEGORIES
from mefirst.domain.entities import ImpulseVerdict, QuizQuestion, WishlistItem
from mefirst.domain.errors import NotFoundError, ValidationError, wishlist_item_not_found
from mefirst.domain.impulse import DEFAULT_QUIZ, evaluate, quiz_complete, quiz_verdict
from mefirst.domain.validation import require_name, require_positive


class WishlistService:
    """Service for wishlist items, their quiz and impulse verdicts."""

    def __init__(self, store: Store):
        """Initialize wishlist service.

        Args:
            store: Store instance
        """
        self.store = store
        self.records = Records(store)

    def _require_item(self, items: list[WishlistItem], item_id: int) -> WishlistItem:
        item = next((i for i in items if i.id == item_id), None)
        if item is None:
            raise NotFoundError(wishlist_item_not_found(item_id))
        return item

    def _replace(self, items: list[WishlistItem], updated: WishlistItem) -> None:
        self.records.save_wishlist([updated if i.id == updated.id else i for i in items])

    def add_item(self, name: str, price, category: str = "Other") -> WishlistItem:
        """Add something to the wishlist.

        New items start at zero days wanted and without a quiz score.

        Raises:
            ValidationError: If the name is empty, the price is not positive or
                the category is unknown
        """
        name = require_name(name, "Wishlist item")
        price = require_positive(price, "Price")
        if category not in WISHLIST_CATEGORIES:
            raise ValidationError(f"Wishlist category '{category}' not found")

        items = self.records.load_wishlist(strict=True)
        item = WishlistItem(id=next_id(items), name=name, price=price, category=category)
        self.records.save_wishlist([*items, item])
        return item

    def get_item(self, item_id: int) -> Optional[WishlistItem]:
        return next((i for i in self.records.load_wishlist() if i.id == item_id), None)

    def list_items(self) -> list[WishlistItem]:
        return self.records.load_wishlist()

    def set_days_wanted(self, item_id: int, days: int) -> WishlistItem:
        """Record how many days the item has been wanted.

        Raises:
            NotFoundError: If the item doesn't exist
            ValidationError: If days is negative
        """
        days = int(round(days))
        if days < 0:
            raise ValidationError("Days wanted cannot be negative")
        items = self.records.load_wishlist(strict=True)
        updated = replace(self._require_item(items, item_id), days_wanted=days)
        self._replace(items, updated)
        return updated

    def submit_quiz(
        self,
        item_id: int,
        answers: Mapping[int, str],
        questions: Sequence[QuizQuestion] = DEFAULT_QUIZ,
    ) -> WishlistItem:
        """Score the quiz and store the verdict on the item.

        Every question must be answered before a verdict is stored.

        Raises:
            NotFoundError: If the item doesn't exist
            ValidationError: If any question is unanswered
        """
        items = self.records.load_wishlist(strict=True)
        item = self._require_item(items, item_id)
        if not quiz_complete(answers, questions):
            raise ValidationError("Answer every quiz question before submitting")

        updated = replace(
            item,
            quiz_score=float(quiz_verdict(answers, questions)),
            last_quiz_answers=dict(answers),
        )
        self._replace(items, updated)
        return updated

    def delete_item(self, item_id: int) -> None:
        """Delete a wishlist item.

        Raises:
            NotFoundError: If the item doesn't exist
        """
        items = self.records.load_wishlist(strict=True)
        self._require_item(items, item_id)
        self.records.save_wishlist([i for i in items if i.id != item_id])

    def evaluate_items(self) -> list[ImpulseVerdict]:
        """Impulse verdict for every item, with its price in hours of work."""
        pay_settings = self.records.load_pay_settings()
        return [evaluate(item, pay_settings) for item in self.records.load_wishlist()]
