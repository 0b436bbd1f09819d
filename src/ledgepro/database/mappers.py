"""Mapper functions to convert between domain entities and persisted records.

Records are plain JSON-compatible dicts using the camelCase field names of the
storage and backup formats. Money is written as a JSON number (an integer when
whole) so other readers of the format see numbers; values are read back
through ``str`` so two-decimal amounts come back exactly.
"""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from ledgepro.domain import entities as domain
from ledgepro.domain.errors import ValidationError
from ledgepro.utils.date_parser import coerce_calendar_date


def _require(record: Mapping[str, Any], key: str, kind: str) -> Any:
    if not isinstance(record, Mapping):
        raise ValidationError(f"{kind} record must be an object, got {type(record).__name__}")
    if key not in record or record[key] is None:
        raise ValidationError(f"{kind} record is missing '{key}'")
    return record[key]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _decimal(value: Any, field: str, kind: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{kind} field '{field}' is not a number: {value!r}")
    try:
        result = Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(f"{kind} field '{field}' is not a number: {value!r}") from e
    if not result.is_finite():
        raise ValidationError(f"{kind} field '{field}' is not a finite number: {value!r}")
    return result


def _number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def company_to_record(company: domain.Company) -> dict[str, Any]:
    """Convert a domain Company to its persisted record."""
    return {
        "id": company.id,
        "name": company.name,
        "address": company.address,
        "gstNumber": company.gst_number,
        "financialYear": company.financial_year,
    }


def company_from_record(record: Mapping[str, Any]) -> domain.Company:
    """Convert a persisted record to a domain Company.

    Accepts the older ``gst`` key as an alias for ``gstNumber``.
    """
    gst_number = record.get("gstNumber", record.get("gst")) if isinstance(record, Mapping) else None
    return domain.Company(
        id=_text(_require(record, "id", "Company")),
        name=_text(_require(record, "name", "Company")),
        address=_text(record.get("address")),
        gst_number=gst_number or None,
        financial_year=_text(record.get("financialYear", domain.DEFAULT_FINANCIAL_YEAR)),
    )


def customer_to_record(customer: domain.Customer) -> dict[str, Any]:
    """Convert a domain Customer to its persisted record."""
    return {
        "id": customer.id,
        "companyId": customer.company_id,
        "name": customer.name,
        "phone": customer.phone,
        "address": customer.address,
        "openingBalance": _number(customer.opening_balance),
    }


def customer_from_record(record: Mapping[str, Any]) -> domain.Customer:
    """Convert a persisted record to a domain Customer."""
    opening = record.get("openingBalance", 0) if isinstance(record, Mapping) else 0
    return domain.Customer(
        id=_text(_require(record, "id", "Customer")),
        company_id=_text(_require(record, "companyId", "Customer")),
        name=_text(_require(record, "name", "Customer")),
        phone=_text(record.get("phone")),
        address=_text(record.get("address")),
        opening_balance=_decimal(opening if opening is not None else 0, "openingBalance", "Customer"),
    )


def transaction_to_record(transaction: domain.Transaction) -> dict[str, Any]:
    """Convert a domain Transaction to its persisted record."""
    return {
        "id": transaction.id,
        "customerId": transaction.customer_id,
        "date": transaction.date.isoformat(),
        "description": transaction.description,
        "type": transaction.type.value,
        "amount": _number(transaction.amount),
    }


def transaction_from_record(record: Mapping[str, Any]) -> domain.Transaction:
    """Convert a persisted record to a domain Transaction."""
    raw_type = _text(_require(record, "type", "Transaction")).upper()
    try:
        txn_type = domain.TransactionType(raw_type)
    except ValueError as e:
        raise ValidationError(f"Transaction type must be DEBIT or CREDIT, got '{raw_type}'") from e

    raw_date = _require(record, "date", "Transaction")
    try:
        txn_date = coerce_calendar_date(raw_date)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    amount = _decimal(_require(record, "amount", "Transaction"), "amount", "Transaction")
    if amount <= 0:
        raise ValidationError(f"Transaction field 'amount' must be positive, got {amount}")

    return domain.Transaction(
        id=_text(_require(record, "id", "Transaction")),
        customer_id=_text(_require(record, "customerId", "Transaction")),
        date=txn_date,
        description=_text(record.get("description")),
        type=txn_type,
        amount=amount,
    )
