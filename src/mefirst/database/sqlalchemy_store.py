"""Generic SQLAlchemy store implementation."""

import json
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mefirst.database.base import Store, StoreError
from mefirst.database.models import Record, create_session_factory
from mefirst.logging_setup import get_logger

logger = get_logger("mefirst.database.sqlalchemy_store")


class SQLAlchemyStore(Store):
    """SQLAlchemy-based implementation of the Store interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        try:
            self.session_factory = create_session_factory(database_url)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not open store at {database_url}: {e}") from e
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the store."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the store."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def get(self, key: str) -> Optional[Any]:
        """Get the JSON value stored under key."""
        session = self._get_session()
        try:
            record = session.get(Record, key)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not read '{key}': {e}") from e
        if record is None:
            return None
        try:
            return json.loads(record.value)
        except json.JSONDecodeError as e:
            raise StoreError(f"Stored value for '{key}' is not valid JSON: {e}") from e

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under key."""
        self.set_many({key: value})

    def set_many(self, values: dict[str, Any]) -> None:
        """Store several keys in a single commit."""
        payloads = {key: json.dumps(value) for key, value in values.items()}
        session = self._get_session()
        try:
            for key, payload in payloads.items():
                record = session.get(Record, key)
                if record is None:
                    session.add(Record(key=key, value=payload))
                else:
                    record.value = payload
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Could not write {', '.join(payloads)}: {e}") from e
        logger.debug("Saved %s", ", ".join(payloads))

    def delete(self, key: str) -> None:
        """Delete key if present."""
        session = self._get_session()
        try:
            record = session.get(Record, key)
            if record is not None:
                session.delete(record)
                session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Could not delete '{key}': {e}") from e

    def keys(self) -> list[str]:
        """List stored keys in name order."""
        session = self._get_session()
        try:
            return [row.key for row in session.query(Record).order_by(Record.key).all()]
        except SQLAlchemyError as e:
            raise StoreError(f"Could not list keys: {e}") from e
