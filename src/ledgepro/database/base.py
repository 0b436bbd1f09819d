"""Abstract persistence interface."""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional


class KeyValueStore(ABC):
    """Abstract durable key-value store for ledgepro.

    Values are JSON-serializable structures. Keys are scoped to the store's
    namespace; ``clear`` never touches keys outside it. A store instance
    assumes a single writer and must not be shared across concurrent callers.
    """

    namespace: str

    @abstractmethod
    def connect(self) -> None:
        """Connect to the backing medium."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the backing medium."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the value stored under key, or None if absent.

        Raises:
            ValueError: If the stored value cannot be decoded
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Durably store value under key, replacing any previous value."""
        pass

    def set_many(self, items: Iterable[tuple[str, Any]]) -> None:
        """Store several keys. Implementations may commit them together."""
        for key, value in items:
            self.set(key, value)

    @abstractmethod
    def clear(self) -> None:
        """Remove every key in this store's namespace."""
        pass
