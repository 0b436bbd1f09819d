"""Shared pytest fixtures for ledgepro tests."""

import itertools
import os
import tempfile

import pytest

from ledgepro.database.factories import create_sqlite_store
from ledgepro.domain.backup import BackupService
from ledgepro.domain.balance import BalanceService
from ledgepro.domain.store import EntityStore


@pytest.fixture
def temp_db():
    """Create a temporary SQLite-backed store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def id_factory():
    """Deterministic identifier factory: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def store(temp_db, id_factory):
    """Create a loaded EntityStore over the temporary database."""
    entity_store = EntityStore(temp_db, id_factory=id_factory)
    entity_store.load()
    return entity_store


@pytest.fixture
def balance_service(store):
    """Create a BalanceService over the test store."""
    return BalanceService(store)


@pytest.fixture
def backup_service(store):
    """Create a BackupService over the test store."""
    return BackupService(store)


@pytest.fixture
def sample_company(store):
    """Create a sample company for testing."""
    return store.add_company(name="Acme Traders", address="1 Market Rd", gst_number="27AAAAA0000A1Z5")


@pytest.fixture
def sample_customer(store, sample_company):
    """Create a sample customer with an opening balance of 1000."""
    return store.add_customer(
        company_id=sample_company.id, name="Ravi Kumar", phone="9876543210", opening_balance_text="1000"
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
