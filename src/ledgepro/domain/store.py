"""Entity store: owns companies, customers and transactions."""

import logging
import uuid
from datetime import date
from typing import Any, Callable, Optional, Sequence

from ledgepro.database.base import KeyValueStore
from ledgepro.database.mappers import (
    company_from_record,
    company_to_record,
    customer_from_record,
    customer_to_record,
    transaction_from_record,
    transaction_to_record,
)
from ledgepro.domain.entities import (
    DEFAULT_FINANCIAL_YEAR,
    Company,
    Customer,
    Transaction,
    TransactionType,
)
from ledgepro.domain.errors import (
    UnresolvedReferenceError,
    ValidationError,
    company_not_found,
    customer_not_found,
    invalid_transaction_amount,
)
from ledgepro.utils.amount_parser import parse_amount, parse_amount_or_zero
from ledgepro.utils.date_parser import coerce_calendar_date

logger = logging.getLogger(__name__)

COMPANIES_KEY = "companies"
CUSTOMERS_KEY = "customers"
TRANSACTIONS_KEY = "transactions"

IdFactory = Callable[[], str]
Confirm = Callable[[str], bool]


def uuid_id_factory() -> str:
    """Return a fresh random identifier."""
    return str(uuid.uuid4())


def always_confirm(action: str) -> bool:
    """Confirmation callable that approves every action."""
    return True


class EntityStore:
    """Owns the three collections and writes every change through to storage.

    Callers receive tuples, never the internal lists. Each mutation builds the
    new collection, persists it, then swaps it in, so a failure at any step
    leaves in-memory state unchanged.
    """

    def __init__(
        self,
        db: KeyValueStore,
        id_factory: Optional[IdFactory] = None,
        confirm: Optional[Confirm] = None,
    ):
        """Initialize entity store.

        Args:
            db: Persistence adapter; this store is its only caller
            id_factory: Callable returning fresh unique identifiers
            confirm: Callable asked before destructive actions; returns
                True to proceed
        """
        self.db = db
        self.id_factory = id_factory or uuid_id_factory
        self.confirm = confirm or always_confirm
        self._companies: list[Company] = []
        self._customers: list[Customer] = []
        self._transactions: list[Transaction] = []

    # Loading

    def load(self) -> None:
        """Hydrate all collections from storage.

        A missing or malformed value for a key yields an empty collection for
        that key.
        """
        self._companies = self._load_collection(COMPANIES_KEY, company_from_record)
        self._customers = self._load_collection(CUSTOMERS_KEY, customer_from_record)
        self._transactions = self._load_collection(TRANSACTIONS_KEY, transaction_from_record)
        logger.info(
            "Loaded %d companies, %d customers, %d transactions",
            len(self._companies),
            len(self._customers),
            len(self._transactions),
        )

    def _load_collection(self, key: str, from_record: Callable[[Any], Any]) -> list:
        try:
            raw = self.db.get(key)
        except ValueError as e:
            logger.warning("Could not read '%s', starting empty: %s", key, e)
            return []
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Stored '%s' is not a list, starting empty", key)
            return []
        try:
            return [from_record(record) for record in raw]
        except ValidationError as e:
            logger.warning("Stored '%s' has a malformed record, starting empty: %s", key, e)
            return []

    # Read side

    @property
    def companies(self) -> tuple[Company, ...]:
        return tuple(self._companies)

    @property
    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def get_company(self, company_id: str) -> Optional[Company]:
        """Get company by ID, or None if not found."""
        for company in self._companies:
            if company.id == company_id:
                return company
        return None

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID, or None if not found."""
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID, or None if not found."""
        for txn in self._transactions:
            if txn.id == transaction_id:
                return txn
        return None

    def require_customer(self, customer_id: str) -> Customer:
        """Get customer by ID.

        Raises:
            UnresolvedReferenceError: If the customer does not exist
        """
        customer = self.get_customer(customer_id)
        if customer is None:
            raise UnresolvedReferenceError(customer_not_found(customer_id))
        return customer

    def list_companies(self) -> tuple[Company, ...]:
        """List all companies in insertion order."""
        return self.companies

    def list_customers(self, company_id: Optional[str] = None) -> tuple[Customer, ...]:
        """List customers in insertion order, optionally for one company."""
        if company_id is None:
            return self.customers
        return tuple(c for c in self._customers if c.company_id == company_id)

    def list_transactions(self, customer_id: Optional[str] = None) -> tuple[Transaction, ...]:
        """List transactions in insertion order, optionally for one customer."""
        if customer_id is None:
            return self.transactions
        return tuple(t for t in self._transactions if t.customer_id == customer_id)

    # Mutations

    def _new_id(self, existing: Sequence[Any]) -> str:
        taken = {item.id for item in existing}
        new_id = self.id_factory()
        if new_id in taken:
            raise ValidationError(f"Identifier '{new_id}' is already in use")
        return new_id

    def add_company(
        self,
        name: str,
        address: str = "",
        gst_number: Optional[str] = None,
        financial_year: str = DEFAULT_FINANCIAL_YEAR,
    ) -> Company:
        """Create a company.

        Args:
            name: Company name (required)
            address: Optional address
            gst_number: Optional GST registration number
            financial_year: Financial year label, e.g. "2024-25"

        Returns:
            The new Company

        Raises:
            ValidationError: If name is empty
        """
        if not name or not name.strip():
            raise ValidationError("Company name is required")

        company = Company(
            id=self._new_id(self._companies),
            name=name.strip(),
            address=address or "",
            gst_number=gst_number or None,
            financial_year=financial_year or DEFAULT_FINANCIAL_YEAR,
        )
        companies = [*self._companies, company]
        self.db.set(COMPANIES_KEY, [company_to_record(c) for c in companies])
        self._companies = companies
        logger.info("Added company %s (%s)", company.id, company.name)
        return company

    def add_customer(
        self,
        company_id: str,
        name: str,
        phone: str = "",
        opening_balance_text: str = "",
        address: str = "",
    ) -> Customer:
        """Create a customer under a company.

        Args:
            company_id: Owning company ID
            name: Customer name (required)
            phone: Optional phone number
            opening_balance_text: Opening balance as text; unparsable input
                becomes 0
            address: Optional address

        Returns:
            The new Customer

        Raises:
            ValidationError: If name is empty
            UnresolvedReferenceError: If the company does not exist
        """
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        if self.get_company(company_id) is None:
            raise UnresolvedReferenceError(company_not_found(company_id))

        customer = Customer(
            id=self._new_id(self._customers),
            company_id=company_id,
            name=name.strip(),
            phone=phone or "",
            address=address or "",
            opening_balance=parse_amount_or_zero(opening_balance_text),
        )
        customers = [*self._customers, customer]
        self.db.set(CUSTOMERS_KEY, [customer_to_record(c) for c in customers])
        self._customers = customers
        logger.info("Added customer %s (%s) to company %s", customer.id, customer.name, company_id)
        return customer

    def add_transaction(
        self,
        customer_id: str,
        date: date | str,
        description: str,
        type: TransactionType | str,
        amount_text: str,
    ) -> Transaction:
        """Record a transaction for a customer.

        Args:
            customer_id: Customer ID
            date: Calendar date or ISO "YYYY-MM-DD" string
            description: Free text
            type: DEBIT or CREDIT
            amount_text: Amount as text; must be a positive number

        Returns:
            The new Transaction

        Raises:
            UnresolvedReferenceError: If the customer does not exist
            ValidationError: If amount, type or date is invalid
        """
        self.require_customer(customer_id)

        try:
            amount = parse_amount(amount_text)
        except ValueError as e:
            raise ValidationError(invalid_transaction_amount(amount_text)) from e
        if amount <= 0:
            raise ValidationError(invalid_transaction_amount(amount_text))

        try:
            txn_type = TransactionType(type.upper() if isinstance(type, str) else type)
        except ValueError as e:
            raise ValidationError(f"Transaction type must be DEBIT or CREDIT, got '{type}'") from e

        try:
            txn_date = coerce_calendar_date(date)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        txn = Transaction(
            id=self._new_id(self._transactions),
            customer_id=customer_id,
            date=txn_date,
            description=description or "",
            type=txn_type,
            amount=amount,
        )
        transactions = [*self._transactions, txn]
        self._persist_transactions(transactions)
        self._transactions = transactions
        logger.info(
            "Added %s %s on %s for customer %s", txn.type.value, txn.amount, txn.date, customer_id
        )
        return txn

    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction if the confirmation callable approves.

        Deleting an unknown ID is a no-op.

        Returns:
            True if a transaction was removed
        """
        if self.get_transaction(transaction_id) is None:
            return False
        if not self.confirm("Are you sure you want to delete this transaction?"):
            return False

        transactions = [t for t in self._transactions if t.id != transaction_id]
        self._persist_transactions(transactions)
        self._transactions = transactions
        logger.info("Deleted transaction %s", transaction_id)
        return True

    def wipe(self) -> bool:
        """Delete every company, customer and transaction.

        Returns:
            True if the wipe was confirmed and performed
        """
        if not self.confirm("DELETE ALL DATA? This cannot be undone."):
            return False
        self.db.clear()
        self._companies, self._customers, self._transactions = [], [], []
        logger.info("Wiped all ledger data")
        return True

    def replace_all(
        self,
        companies: Sequence[Company],
        customers: Sequence[Customer],
        transactions: Sequence[Transaction],
    ) -> None:
        """Replace all three collections in one step and persist them."""
        companies, customers, transactions = list(companies), list(customers), list(transactions)
        self.db.set_many(
            [
                (COMPANIES_KEY, [company_to_record(c) for c in companies]),
                (CUSTOMERS_KEY, [customer_to_record(c) for c in customers]),
                (TRANSACTIONS_KEY, [transaction_to_record(t) for t in transactions]),
            ]
        )
        self._companies, self._customers, self._transactions = companies, customers, transactions
        logger.info(
            "Replaced ledger with %d companies, %d customers, %d transactions",
            len(companies),
            len(customers),
            len(transactions),
        )

    def _persist_transactions(self, transactions: Sequence[Transaction]) -> None:
        self.db.set(TRANSACTIONS_KEY, [transaction_to_record(t) for t in transactions])
