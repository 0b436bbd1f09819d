"""Balance domain service: running ledgers, balances, totals and trends."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from ledgepro.domain.entities import (
    AggregateStats,
    CustomerTotals,
    LedgerEntry,
    Transaction,
    TransactionType,
    TrendBucket,
)
from ledgepro.domain.errors import ValidationError
from ledgepro.domain.store import EntityStore

DEFAULT_TREND_DAYS = 7


def sum_by_type(transactions: Iterable[Transaction], txn_type: TransactionType) -> Decimal:
    """Sum the amounts of transactions of one type."""
    return sum((t.amount for t in transactions if t.type == txn_type), Decimal("0"))


class BalanceService:
    """Read-only computations over an EntityStore.

    Holds no state of its own; every call reads the store's current
    collections.
    """

    def __init__(self, store: EntityStore):
        """Initialize balance service.

        Args:
            store: EntityStore instance
        """
        self.store = store

    def running_ledger(self, customer_id: str) -> list[LedgerEntry]:
        """Build a customer's ledger with the balance after each transaction.

        Transactions are ordered by date. Transactions on the same date keep
        the order in which they were added.

        Args:
            customer_id: Customer ID

        Returns:
            List of LedgerEntry, oldest first

        Raises:
            UnresolvedReferenceError: If the customer does not exist
        """
        customer = self.store.require_customer(customer_id)
        # sorted() is stable, so equal dates stay in insertion order
        ordered = sorted(self.store.list_transactions(customer_id), key=lambda t: t.date)

        balance = customer.opening_balance
        entries = []
        for txn in ordered:
            balance += txn.signed_amount
            entries.append(LedgerEntry(transaction=txn, balance_after=balance))
        return entries

    def customer_balance(self, customer_id: str) -> Decimal:
        """Return opening balance plus credits minus debits for a customer.

        Raises:
            UnresolvedReferenceError: If the customer does not exist
        """
        return self.customer_totals(customer_id).balance

    def customer_totals(self, customer_id: str) -> CustomerTotals:
        """Return debit and credit totals and the current balance for a customer.

        Raises:
            UnresolvedReferenceError: If the customer does not exist
        """
        customer = self.store.require_customer(customer_id)
        transactions = self.store.list_transactions(customer_id)
        total_debit = sum_by_type(transactions, TransactionType.DEBIT)
        total_credit = sum_by_type(transactions, TransactionType.CREDIT)
        return CustomerTotals(
            customer_id=customer_id,
            opening_balance=customer.opening_balance,
            total_debit=total_debit,
            total_credit=total_credit,
            balance=customer.opening_balance + total_credit - total_debit,
        )

    def aggregate_stats(self) -> AggregateStats:
        """Totals across all transactions regardless of customer.

        Opening balances are not part of ``total_balance``.
        """
        transactions = self.store.transactions
        total_debit = sum_by_type(transactions, TransactionType.DEBIT)
        total_credit = sum_by_type(transactions, TransactionType.CREDIT)
        return AggregateStats(
            total_balance=total_credit - total_debit,
            total_debit=total_debit,
            total_credit=total_credit,
            company_count=len(self.store.companies),
            customer_count=len(self.store.customers),
        )

    def trend(
        self, window_days: int = DEFAULT_TREND_DAYS, reference_date: Optional[date] = None
    ) -> list[TrendBucket]:
        """Daily debit/credit totals for the window ending on reference_date.

        Args:
            window_days: Number of days in the window (at least 1)
            reference_date: Last day of the window; defaults to today

        Returns:
            One TrendBucket per day, oldest first. Days without transactions
            have zero totals.

        Raises:
            ValidationError: If window_days is less than 1
        """
        if window_days < 1:
            raise ValidationError(f"Trend window must be at least 1 day, got {window_days}")
        if reference_date is None:
            reference_date = date.today()

        days = [reference_date - timedelta(days=k) for k in range(window_days - 1, -1, -1)]
        by_day: dict[date, list[Transaction]] = {day: [] for day in days}
        for txn in self.store.transactions:
            if txn.date in by_day:
                by_day[txn.date].append(txn)

        return [
            TrendBucket(
                date=day,
                debit=sum_by_type(by_day[day], TransactionType.DEBIT),
                credit=sum_by_type(by_day[day], TransactionType.CREDIT),
            )
            for day in days
        ]
