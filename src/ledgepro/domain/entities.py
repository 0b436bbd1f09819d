"""Domain model entities for ledgepro.

These are pure data classes representing business concepts, independent of
how the persistence adapter stores them. Mapping to and from the persisted
record shape lives in ``ledgepro.database.mappers``.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


DEFAULT_FINANCIAL_YEAR = "2024-25"


class TransactionType(str, Enum):
    """Direction of a transaction. CREDIT increases a balance, DEBIT decreases it."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


@dataclass(frozen=True)
class Company:
    """Company (organization) domain entity."""

    id: str
    name: str
    address: str = ""
    gst_number: Optional[str] = None
    financial_year: str = DEFAULT_FINANCIAL_YEAR


@dataclass(frozen=True)
class Customer:
    """Customer domain entity, owned by a company."""

    id: str
    company_id: str
    name: str
    phone: str = ""
    address: str = ""
    opening_balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: str
    customer_id: str
    date: date
    description: str
    type: TransactionType
    amount: Decimal

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to a balance."""
        if self.type == TransactionType.CREDIT:
            return self.amount
        return -self.amount


@dataclass(frozen=True)
class LedgerEntry:
    """A transaction together with the customer's balance after applying it."""

    transaction: Transaction
    balance_after: Decimal


@dataclass(frozen=True)
class CustomerTotals:
    """Debit/credit totals and current balance for one customer."""

    customer_id: str
    opening_balance: Decimal
    total_debit: Decimal
    total_credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AggregateStats:
    """Totals across every company, customer and transaction."""

    total_balance: Decimal
    total_debit: Decimal
    total_credit: Decimal
    company_count: int
    customer_count: int


@dataclass(frozen=True)
class TrendBucket:
    """Debit and credit totals for a single calendar day."""

    date: date
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")

    @property
    def label(self) -> str:
        """Short day/month label, e.g. ``10/03`` for 2024-03-10."""
        return self.date.strftime("%d/%m")
