"""Customer management commands."""

import click
from ledgepro.domain.balance import BalanceService
from ledgepro.domain.errors import DomainError
from ledgepro.cli.error_handling import handle_domain_error
from ledgepro.cli.formatting import format_balance
from ledgepro.cli.resolution import resolve_company_or_exit


@click.group("customer")
def customer_group():
    """Manage customers."""
    pass


@customer_group.command("add")
@click.argument("name", metavar="CUSTOMER_NAME")
@click.option("--company", required=True, help="Company name or ID")
@click.option("--phone", default="", help="Phone number")
@click.option("--address", default="", help="Address")
@click.option(
    "--opening-balance",
    default="",
    help="Opening balance (negative for amounts owed); invalid values become 0",
)
@click.pass_context
def add_customer(ctx, name: str, company: str, phone: str, address: str, opening_balance: str):
    """Add a customer to a company.

    Examples:
        ledgepro customer add "Ravi Kumar" --company "Acme Traders" --opening-balance 1000
    """
    store = ctx.obj["store"]
    company_obj = resolve_company_or_exit(ctx, store, company)

    try:
        customer = store.add_customer(
            company_id=company_obj.id,
            name=name,
            phone=phone,
            opening_balance_text=opening_balance,
            address=address,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created customer '{customer.name}' (ID: {customer.id})")
    click.echo(f"  Company: {company_obj.name}")
    click.echo(f"  Opening balance: {format_balance(customer.opening_balance)}")


@customer_group.command("list")
@click.option("--company", help="Company name or ID")
@click.pass_context
def list_customers(ctx, company: str | None):
    """List customers with their current balances."""
    store = ctx.obj["store"]
    balance_service = BalanceService(store)

    company_id = None
    if company is not None:
        company_id = resolve_company_or_exit(ctx, store, company).id

    customers = store.list_customers(company_id)
    if not customers:
        click.echo("No customers found.")
        return

    click.echo("\nCustomers:")
    click.echo("-" * 80)
    for customer in customers:
        balance = balance_service.customer_balance(customer.id)
        click.echo(
            f"{customer.id} | {customer.name:20s} | {customer.phone:12s} "
            f"| Balance: {format_balance(balance)}"
        )


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group)
