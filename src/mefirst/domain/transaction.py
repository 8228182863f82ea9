"""Transaction domain service."""

from datetime import date
from typing import Optional, Union

from mefirst.database.base import Store
from mefirst.database.records import Records, next_id
from mefirst.domain.aggregates import filter_transactions
from mefirst.domain.entities import Goal, Transaction, TransactionKind
from mefirst.domain.errors import (
    NotFoundError,
    ValidationError,
    goal_link_required,
    transaction_not_found,
)
from mefirst.domain.goal import (
    apply_contribution,
    replace_contribution,
    revert_contribution,
)
from mefirst.domain.validation import require_known_category, require_positive
from mefirst.logging_setup import get_logger
from mefirst.utils.date_parser import parse_local_date

logger = get_logger("mefirst.domain.transaction")


class TransactionService:
    """Service for recording spending, transfers and investments."""

    def __init__(self, store: Store):
        """Initialize transaction service.

        Args:
            store: Store instance
        """
        self.store = store
        self.records = Records(store)

    def _build(
        self,
        transaction_id: int,
        name: Optional[str],
        category: str,
        amount,
        txn_date: Union[str, date],
        kind: Union[str, TransactionKind, None],
        linked_goal_id: Optional[int],
        goals: list[Goal],
    ) -> Transaction:
        amount = require_positive(amount)
        require_known_category(category, self.records.load_categories())
        try:
            txn_date = parse_local_date(txn_date)
        except ValueError as e:
            raise ValidationError(str(e))
        try:
            kind = TransactionKind(kind) if kind is not None else TransactionKind.EXPENSE
        except ValueError:
            raise ValidationError(f"Unknown transaction kind '{kind}'")

        if kind == TransactionKind.EXPENSE:
            linked_goal_id = None
        elif linked_goal_id is None and goals:
            raise ValidationError(goal_link_required(kind.name.lower().replace("_", " ")))

        return Transaction(
            id=transaction_id,
            name=(name or "").strip() or category,
            category=category,
            amount=amount,
            date=txn_date,
            kind=kind,
            linked_goal_id=linked_goal_id,
        )

    def add_transaction(
        self,
        category: str,
        amount,
        date: Union[str, date],
        name: Optional[str] = None,
        kind: Union[str, TransactionKind, None] = TransactionKind.EXPENSE,
        linked_goal_id: Optional[int] = None,
    ) -> Transaction:
        """Record a transaction.

        Transfers and investments add their amount to the linked goal. When the
        link does not resolve to an existing goal the transaction is still
        recorded and no goal changes.

        Args:
            category: Spending category (must be configured)
            amount: Positive amount
            date: Transaction date (date or YYYY-MM-DD)
            name: Optional description, defaults to the category
            kind: Expense, transfer or investment
            linked_goal_id: Goal funded by a transfer or investment

        Returns:
            Created transaction

        Raises:
            ValidationError: If any input is invalid
            StoreError: If stored transactions or goals are malformed
        """
        goals = self.records.load_goals(strict=True)
        transactions = self.records.load_transactions(strict=True)
        txn = self._build(
            next_id(transactions), name, category, amount, date, kind, linked_goal_id, goals
        )

        if txn.is_expense:
            self.records.save_transactions([*transactions, txn])
        else:
            self.records.save_transactions([*transactions, txn], apply_contribution(goals, txn))
        logger.info("Recorded %s %s of %s in %s", txn.kind.value, txn.id, txn.amount, txn.category)
        return txn

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return next(
            (t for t in self.records.load_transactions() if t.id == transaction_id), None
        )

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category: Optional[str] = None,
        kind: Optional[TransactionKind] = None,
    ) -> list[Transaction]:
        """List transactions, newest first, with optional filters."""
        transactions = filter_transactions(
            self.records.load_transactions(),
            kind=kind,
            category=category,
            start=start_date,
            end=end_date,
        )
        return sorted(transactions, key=lambda t: (t.date, t.id), reverse=True)

    def update_transaction(
        self,
        transaction_id: int,
        category: str,
        amount,
        date: Union[str, date],
        name: Optional[str] = None,
        kind: Union[str, TransactionKind, None] = TransactionKind.EXPENSE,
        linked_goal_id: Optional[int] = None,
    ) -> Transaction:
        """Replace a transaction with a new full record.

        The old record's goal contribution is replaced by the new one as a
        single net change, written together with the transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If any input is invalid
        """
        transactions = self.records.load_transactions(strict=True)
        old = next((t for t in transactions if t.id == transaction_id), None)
        if old is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        goals = self.records.load_goals(strict=True)
        txn = self._build(
            transaction_id, name, category, amount, date, kind, linked_goal_id, goals
        )

        updated = [txn if t.id == transaction_id else t for t in transactions]
        if old.is_expense and txn.is_expense:
            self.records.save_transactions(updated)
        else:
            self.records.save_transactions(updated, replace_contribution(goals, old, txn))
        return txn

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction and take back its goal contribution.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        transactions = self.records.load_transactions(strict=True)
        old = next((t for t in transactions if t.id == transaction_id), None)
        if old is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        remaining = [t for t in transactions if t.id != transaction_id]
        if old.is_expense:
            self.records.save_transactions(remaining)
        else:
            self.records.save_transactions(
                remaining, revert_contribution(self.records.load_goals(strict=True), old)
            )
