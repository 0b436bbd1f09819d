"""Utility for resolving company and customer names to entities."""

from typing import Optional

from ledgepro.domain.entities import Company, Customer
from ledgepro.domain.errors import (
    UnresolvedReferenceError,
    ValidationError,
    company_not_found,
    customer_not_found,
)
from ledgepro.domain.store import EntityStore


def resolve_company(store: EntityStore, company: str) -> Company:
    """Resolve company ID or name to a Company.

    Args:
        store: EntityStore instance
        company: Company ID or exact company name

    Returns:
        Company entity

    Raises:
        UnresolvedReferenceError: If no company matches
        ValidationError: If the name matches more than one company
    """
    found = store.get_company(company)
    if found is not None:
        return found

    matches = [c for c in store.list_companies() if c.name == company]
    if len(matches) > 1:
        raise ValidationError(
            f"Company name '{company}' is ambiguous ({len(matches)} matches); use the ID"
        )
    if not matches:
        raise UnresolvedReferenceError(company_not_found(company))
    return matches[0]


def resolve_customer(
    store: EntityStore, customer: str, company_id: Optional[str] = None
) -> Customer:
    """Resolve customer ID or name to a Customer.

    Args:
        store: EntityStore instance
        customer: Customer ID or exact customer name
        company_id: Optional company ID to restrict name lookups to

    Returns:
        Customer entity

    Raises:
        UnresolvedReferenceError: If no customer matches
        ValidationError: If the name matches more than one customer
    """
    found = store.get_customer(customer)
    if found is not None:
        return found

    matches = [c for c in store.list_customers(company_id) if c.name == customer]
    if len(matches) > 1:
        raise ValidationError(
            f"Customer name '{customer}' is ambiguous ({len(matches)} matches); use the ID"
        )
    if not matches:
        raise UnresolvedReferenceError(customer_not_found(customer))
    return matches[0]
