"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ParseError(DomainError):
    """Backup content is not a well-formed structured document."""


class UnresolvedReferenceError(DomainError):
    """A company or customer ID does not resolve to an existing record."""


def company_not_found(company_id: str) -> str:
    """Return message for missing company."""
    return f"Company {company_id} not found"


def customer_not_found(customer_id: str) -> str:
    """Return message for missing customer."""
    return f"Customer {customer_id} not found"


def missing_backup_collections(missing: list[str]) -> str:
    """Return message for a backup that lacks required collections."""
    return f"Invalid backup file format: missing or non-list {', '.join(missing)}"


def invalid_transaction_amount(amount_text: str) -> str:
    """Return message for a non-numeric or non-positive transaction amount."""
    return f"Transaction amount must be a positive number, got '{amount_text}'"


def duplicate_backup_ids(collection: str, ids: list[str]) -> str:
    """Return message for a backup collection that repeats record IDs."""
    return f"Invalid backup file format: duplicate {collection} id(s) {', '.join(ids)}"
