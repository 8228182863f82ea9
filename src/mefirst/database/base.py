"""Abstract key/value store interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class StoreError(Exception):
    """The store could not be read or written."""


class Store(ABC):
    """Key/value store holding one JSON-serializable value per record collection."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the JSON value stored under key, or None when absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under key."""
        pass

    @abstractmethod
    def set_many(self, values: dict[str, Any]) -> None:
        """Store several keys together; either all are written or none."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete key. Deleting a missing key is not an error."""
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys."""
        pass
