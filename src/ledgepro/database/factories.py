"""Store factory functions for creating persistence adapter instances."""

import os
from pathlib import Path
from typing import Optional

from ledgepro.database.sqlalchemy_db import DEFAULT_NAMESPACE, SQLAlchemyStore


def create_sqlite_store(
    database_path: Optional[str] = None, namespace: str = DEFAULT_NAMESPACE
) -> SQLAlchemyStore:
    """Create a SQLite-backed store instance.

    Args:
        database_path: Path to SQLite database file. If None, checks LEDGEPRO_DB_PATH
            environment variable, then defaults to ~/.ledgepro/ledgepro.db
        namespace: Key namespace owned by this application

    Returns:
        SQLAlchemyStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("LEDGEPRO_DB_PATH")

    if database_path is None:
        # Default to ~/.ledgepro/ledgepro.db
        home = Path.home()
        db_dir = home / ".ledgepro"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "ledgepro.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyStore(database_url, namespace=namespace)
