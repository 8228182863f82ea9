"""Storage layer for mefirst."""

from mefirst.database.base import Store, StoreError
from mefirst.database.factories import create_sqlite_store
from mefirst.database.records import Records

__all__ = ["Store", "StoreError", "create_sqlite_store", "Records"]
