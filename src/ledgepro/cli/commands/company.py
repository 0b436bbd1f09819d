"""Company management commands."""

import click
from ledgepro.domain.entities import DEFAULT_FINANCIAL_YEAR
from ledgepro.domain.errors import DomainError
from ledgepro.cli.error_handling import handle_domain_error


@click.group("company")
def company_group():
    """Manage companies."""
    pass


@company_group.command("add")
@click.argument("name", metavar="COMPANY_NAME")
@click.option("--address", default="", help="Company address")
@click.option("--gst", help="GST registration number")
@click.option("--fy", default=DEFAULT_FINANCIAL_YEAR, show_default=True, help="Financial year label")
@click.pass_context
def add_company(ctx, name: str, address: str, gst: str | None, fy: str):
    """Create a new company.

    Examples:
        ledgepro company add "Acme Traders"
        ledgepro company add "Acme Traders" --gst 27AAAAA0000A1Z5 --fy 2025-26
    """
    store = ctx.obj["store"]

    try:
        company = store.add_company(name=name, address=address, gst_number=gst, financial_year=fy)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created company '{company.name}' (ID: {company.id})")


@company_group.command("list")
@click.pass_context
def list_companies(ctx):
    """List all companies."""
    store = ctx.obj["store"]

    companies = store.list_companies()
    if not companies:
        click.echo("No companies found.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 80)
    for company in companies:
        customers = len(store.list_customers(company.id))
        gst = f" | GST: {company.gst_number}" if company.gst_number else ""
        click.echo(
            f"{company.id} | {company.name:20s} | FY {company.financial_year} "
            f"| {customers} customer{'s' if customers != 1 else ''}{gst}"
        )


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group)
