"""Shared pytest fixtures for mefirst tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from mefirst.database.factories import create_sqlite_store
from mefirst.domain.budget import BudgetService
from mefirst.domain.entities import Transaction, TransactionKind
from mefirst.domain.goal import GoalService
from mefirst.domain.overview import OverviewService
from mefirst.domain.recurring import RecurringService
from mefirst.domain.settings import SettingsService
from mefirst.domain.transaction import TransactionService
from mefirst.domain.wishlist import WishlistService


@pytest.fixture
def temp_store():
    """Create a temporary store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def settings_service(temp_store):
    """Create a SettingsService with a temporary store."""
    return SettingsService(temp_store)


@pytest.fixture
def transaction_service(temp_store):
    """Create a TransactionService with a temporary store."""
    return TransactionService(temp_store)


@pytest.fixture
def recurring_service(temp_store):
    """Create a RecurringService with a temporary store."""
    return RecurringService(temp_store)


@pytest.fixture
def budget_service(temp_store):
    """Create a BudgetService with a temporary store."""
    return BudgetService(temp_store)


@pytest.fixture
def goal_service(temp_store):
    """Create a GoalService with a temporary store."""
    return GoalService(temp_store)


@pytest.fixture
def wishlist_service(temp_store):
    """Create a WishlistService with a temporary store."""
    return WishlistService(temp_store)


@pytest.fixture
def overview_service(temp_store):
    """Create an OverviewService with a temporary store."""
    return OverviewService(temp_store)


@pytest.fixture
def make_transaction():
    """Build Transaction entities without touching a store."""

    def _make(
        txn_date,
        amount="10",
        category="Groceries",
        kind=TransactionKind.EXPENSE,
        txn_id=1,
        linked_goal_id=None,
    ):
        return Transaction(
            id=txn_id,
            name=category,
            category=category,
            amount=Decimal(amount),
            date=txn_date,
            kind=kind,
            linked_goal_id=linked_goal_id,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def today():
    """Fixed "today" so pay periods are reproducible (a Monday)."""
    return date(2026, 10, 19)
