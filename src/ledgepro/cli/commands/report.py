"""Ledger, statistics and trend commands."""

import click
from ledgepro.domain.balance import BalanceService, DEFAULT_TREND_DAYS
from ledgepro.domain.entities import TransactionType
from ledgepro.domain.errors import DomainError
from ledgepro.cli.error_handling import handle_domain_error
from ledgepro.cli.formatting import format_balance, format_money
from ledgepro.cli.resolution import resolve_customer_or_exit
from ledgepro.utils.date_parser import parse_date


@click.command("ledger")
@click.argument("customer", metavar="CUSTOMER")
@click.pass_context
def show_ledger(ctx, customer: str):
    """Show a customer's running ledger.

    CUSTOMER can be a customer name or ID. Transactions are listed by date
    with the balance after each one.
    """
    store = ctx.obj["store"]
    service = BalanceService(store)
    customer_obj = resolve_customer_or_exit(ctx, store, customer)

    entries = service.running_ledger(customer_obj.id)
    totals = service.customer_totals(customer_obj.id)

    click.echo(f"\nLedger: {customer_obj.name}")
    click.echo(f"{'Date':10s} | {'Description':24s} | {'Debit':>12s} | {'Credit':>12s} | {'Balance':>16s}")
    click.echo("-" * 86)
    click.echo(
        f"{'':10s} | {'Opening balance':24s} | {'':>12s} | {'':>12s} "
        f"| {format_balance(totals.opening_balance):>16s}"
    )
    for entry in entries:
        txn = entry.transaction
        debit = format_money(txn.amount) if txn.type == TransactionType.DEBIT else "-"
        credit = format_money(txn.amount) if txn.type == TransactionType.CREDIT else "-"
        click.echo(
            f"{txn.date.isoformat()} | {txn.description[:24]:24s} | {debit:>12s} | {credit:>12s} "
            f"| {format_balance(entry.balance_after):>16s}"
        )
    click.echo("-" * 86)
    click.echo(f"Debits:  {format_money(totals.total_debit)}")
    click.echo(f"Credits: {format_money(totals.total_credit)}")
    click.echo(f"Balance: {format_balance(totals.balance)}")


@click.command("stats")
@click.pass_context
def show_stats(ctx):
    """Show totals across all companies and customers."""
    stats = BalanceService(ctx.obj["store"]).aggregate_stats()

    click.echo(f"Companies:    {stats.company_count}")
    click.echo(f"Customers:    {stats.customer_count}")
    click.echo(f"Total debit:  {format_money(stats.total_debit)}")
    click.echo(f"Total credit: {format_money(stats.total_credit)}")
    click.echo(f"Net balance:  {format_balance(stats.total_balance)}")


@click.command("trend")
@click.option("--days", default=DEFAULT_TREND_DAYS, show_default=True, type=int, help="Number of days")
@click.option("--as-of", help="Last day of the window (YYYY-MM-DD or relative); defaults to today")
@click.pass_context
def show_trend(ctx, days: int, as_of: str | None):
    """Show daily debit and credit totals for recent days."""
    reference_date = None
    if as_of:
        try:
            reference_date = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        buckets = BalanceService(ctx.obj["store"]).trend(days, reference_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"{'Day':10s} | {'Debit':>12s} | {'Credit':>12s}")
    click.echo("-" * 40)
    for bucket in buckets:
        click.echo(
            f"{bucket.date.isoformat()} | {format_money(bucket.debit):>12s} "
            f"| {format_money(bucket.credit):>12s}"
        )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(show_ledger)
    cli.add_command(show_stats)
    cli.add_command(show_trend)
