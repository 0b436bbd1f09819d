"""Persistence layer for ledgepro application."""

from ledgepro.database.base import KeyValueStore
from ledgepro.database.memory import InMemoryStore
from ledgepro.database.factories import create_sqlite_store

__all__ = ["KeyValueStore", "InMemoryStore", "create_sqlite_store"]
