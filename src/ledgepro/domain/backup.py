"""Backup and restore domain service."""

import json
import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, date, datetime
from typing import Any, Callable, Optional

from ledgepro.database.mappers import (
    company_from_record,
    company_to_record,
    customer_from_record,
    customer_to_record,
    transaction_from_record,
    transaction_to_record,
)
from ledgepro.domain.errors import (
    ParseError,
    ValidationError,
    duplicate_backup_ids,
    missing_backup_collections,
)
from ledgepro.domain.store import (
    COMPANIES_KEY,
    CUSTOMERS_KEY,
    TRANSACTIONS_KEY,
    EntityStore,
)

logger = logging.getLogger(__name__)

BACKUP_FORMAT_VERSION = "1.0"
REQUIRED_COLLECTIONS = (COMPANIES_KEY, CUSTOMERS_KEY, TRANSACTIONS_KEY)


def utc_now() -> datetime:
    return datetime.now(UTC)


def _duplicate_ids(items: Sequence[Any]) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for item in items:
        if item.id in seen and item.id not in duplicates:
            duplicates.append(item.id)
        seen.add(item.id)
    return duplicates


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class BackupService:
    """Export the whole ledger to a snapshot and restore it all-or-nothing."""

    def __init__(self, store: EntityStore, clock: Optional[Callable[[], datetime]] = None):
        """Initialize backup service.

        Args:
            store: EntityStore instance
            clock: Callable returning the current time, used for ``exportedAt``
        """
        self.store = store
        self.clock = clock or utc_now

    def export(self) -> dict[str, Any]:
        """Build a snapshot of every company, customer and transaction.

        Returns:
            Dict with ``companies``, ``customers``, ``transactions`` (in
            insertion order), ``exportedAt`` and ``version``
        """
        exported_at = self.clock().astimezone(UTC)
        return {
            COMPANIES_KEY: [company_to_record(c) for c in self.store.companies],
            CUSTOMERS_KEY: [customer_to_record(c) for c in self.store.customers],
            TRANSACTIONS_KEY: [transaction_to_record(t) for t in self.store.transactions],
            "exportedAt": exported_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "version": BACKUP_FORMAT_VERSION,
        }

    def export_json(self) -> str:
        """Serialize a snapshot as pretty-printed JSON."""
        return json.dumps(self.export(), indent=2)

    def default_filename(self, today: Optional[date] = None) -> str:
        """Suggested file name for a backup taken on ``today``."""
        if today is None:
            today = self.clock().date()
        return f"ledgepro_backup_{today.isoformat()}.json"

    def import_snapshot(self, snapshot: Mapping[str, Any]) -> bool:
        """Replace the whole ledger with the contents of a snapshot.

        The three collections must be present and be lists. Every record is
        converted before anything is committed, so on any error the current
        ledger is left exactly as it was. ``version`` is not interpreted.

        Args:
            snapshot: Parsed backup document

        Returns:
            True if the ledger was replaced, False if the confirmation
            callable declined

        Raises:
            ValidationError: If a collection is missing, a record is malformed or
                a collection repeats an ID
        """
        if not isinstance(snapshot, Mapping):
            raise ValidationError("Invalid backup file format: expected an object")

        missing = [key for key in REQUIRED_COLLECTIONS if not _is_list(snapshot.get(key))]
        if missing:
            raise ValidationError(missing_backup_collections(missing))

        companies = [company_from_record(r) for r in snapshot[COMPANIES_KEY]]
        customers = [customer_from_record(r) for r in snapshot[CUSTOMERS_KEY]]
        transactions = [transaction_from_record(r) for r in snapshot[TRANSACTIONS_KEY]]

        for key, items in (
            (COMPANIES_KEY, companies),
            (CUSTOMERS_KEY, customers),
            (TRANSACTIONS_KEY, transactions),
        ):
            duplicates = _duplicate_ids(items)
            if duplicates:
                raise ValidationError(duplicate_backup_ids(key, duplicates))

        if not self.store.confirm("This will replace all your current data. Do you want to continue?"):
            return False

        self.store.replace_all(companies, customers, transactions)
        logger.info(
            "Restored backup exported at %s (version %s)",
            snapshot.get("exportedAt"),
            snapshot.get("version"),
        )
        return True

    def import_json(self, text: str | bytes) -> bool:
        """Parse a JSON backup document and restore it.

        Args:
            text: Document as text, or as raw UTF-8 bytes read from a file

        Raises:
            ParseError: If the content is not a JSON object
            ValidationError: If a collection is missing or a record is malformed
        """
        try:
            if isinstance(text, (bytes, bytearray)):
                text = text.decode("utf-8-sig")
            snapshot = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError, TypeError) as e:
            raise ParseError(f"Error reading backup file: {e}") from e
        if not isinstance(snapshot, dict):
            raise ParseError("Error reading backup file: top level is not an object")
        return self.import_snapshot(snapshot)
