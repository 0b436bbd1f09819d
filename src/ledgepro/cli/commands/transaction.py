"""Transaction management commands."""

import click
from ledgepro.cli.formatting import format_money
from ledgepro.cli.resolution import resolve_customer_or_exit


@click.group("transaction")
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.pass_context
def delete_transaction(ctx, transaction_id: str) -> None:
    """Delete a transaction.

    Asks for confirmation unless --yes was given.

    Examples:
        ledgepro transaction delete 3f2b...
        ledgepro --yes transaction delete 3f2b...
    """
    store = ctx.obj["store"]

    if store.get_transaction(transaction_id) is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if store.delete_transaction(transaction_id):
        click.echo(f"Deleted transaction {transaction_id}")
    else:
        click.echo("Cancelled.")


@transaction_group.command("list")
@click.option("--customer", help="Customer name or ID")
@click.pass_context
def list_transactions(ctx, customer: str | None) -> None:
    """List transactions in the order they were recorded."""
    store = ctx.obj["store"]

    customer_id = None
    if customer is not None:
        customer_id = resolve_customer_or_exit(ctx, store, customer).id

    transactions = store.list_transactions(customer_id)
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\n{'ID':36s} | {'Date':10s} | {'Type':6s} | {'Amount':>12s} | Description")
    click.echo("-" * 90)
    for txn in transactions:
        click.echo(
            f"{txn.id:36s} | {txn.date.isoformat()} | {txn.type.value:6s} "
            f"| {format_money(txn.amount):>12s} | {txn.description}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group)
