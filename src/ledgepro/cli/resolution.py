"""CLI helpers for company/customer resolution and error handling."""

from __future__ import annotations

from typing import Optional

import click
from ledgepro.domain.entities import Company, Customer
from ledgepro.domain.errors import DomainError
from ledgepro.domain.store import EntityStore
from ledgepro.utils.resolver import resolve_company, resolve_customer
from ledgepro.cli.error_handling import handle_domain_error


def resolve_company_or_exit(ctx: click.Context, store: EntityStore, company: str) -> Company:
    """Resolve company name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_company(store, company)
    except DomainError as exc:
        handle_domain_error(ctx, exc)


def resolve_customer_or_exit(
    ctx: click.Context, store: EntityStore, customer: str, company_id: Optional[str] = None
) -> Customer:
    """Resolve customer name or ID, or exit with a CLI error."""
    try:
        return resolve_customer(store, customer, company_id=company_id)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
