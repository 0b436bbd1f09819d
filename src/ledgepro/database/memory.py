"""In-memory key-value store."""

import copy
from typing import Any, Optional

from ledgepro.database.base import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Dict-backed KeyValueStore for tests and throwaway sessions.

    Values are deep-copied on the way in and out so callers never share
    structure with the stored state.
    """

    def __init__(self, namespace: str = "ledgepro"):
        self.namespace = namespace
        self._data: dict[str, Any] = {}

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def get(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def clear(self) -> None:
        self._data.clear()
