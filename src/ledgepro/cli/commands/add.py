"""Add transaction command."""

import click
from ledgepro.domain.errors import DomainError
from ledgepro.cli.error_handling import handle_domain_error
from ledgepro.cli.formatting import format_balance, format_money
from ledgepro.cli.resolution import resolve_customer_or_exit
from ledgepro.domain.balance import BalanceService
from ledgepro.utils.date_parser import parse_date


@click.command("add")
@click.option("--customer", required=True, help="Customer name or ID")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option(
    "--type",
    "txn_type",
    type=click.Choice(["debit", "credit"], case_sensitive=False),
    default="credit",
    show_default=True,
    help="Debit decreases the balance, credit increases it",
)
@click.option("--amount", required=True, help="Transaction amount (positive, e.g. 500 or 1,250.50)")
@click.option("--description", default="", help="Transaction description")
@click.pass_context
def add_transaction(ctx, customer: str, date: str, txn_type: str, amount: str, description: str):
    """Record a transaction for a customer.

    Examples:
        ledgepro add --customer "Ravi Kumar" --type credit --amount 500 --description "Payment"
        ledgepro add --customer "Ravi Kumar" --date 2024-01-02 --type debit --amount 200
    """
    store = ctx.obj["store"]
    customer_obj = resolve_customer_or_exit(ctx, store, customer)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = store.add_transaction(
            customer_id=customer_obj.id,
            date=txn_date,
            description=description,
            type=txn_type.upper(),
            amount_text=amount,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Customer: {customer_obj.name}")
    click.echo(f"  Date: {txn.date.isoformat()}")
    click.echo(f"  {txn.type.value.title()}: {format_money(txn.amount)}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")
    balance = BalanceService(store).customer_balance(customer_obj.id)
    click.echo(f"  Balance: {format_balance(balance)}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
