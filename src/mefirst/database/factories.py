"""Store factory functions for creating store instances."""

import os
from pathlib import Path
from typing import Optional

from mefirst.database.sqlalchemy_store import SQLAlchemyStore


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyStore:
    """Create a SQLite-backed store.

    Args:
        database_path: Path to SQLite database file. If None, checks MEFIRST_DB_PATH
            environment variable, then defaults to ~/.mefirst/mefirst.db

    Returns:
        SQLAlchemyStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("MEFIRST_DB_PATH")

    if database_path is None:
        db_dir = Path.home() / ".mefirst"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "mefirst.db")

    return SQLAlchemyStore(f"sqlite:///{database_path}")
