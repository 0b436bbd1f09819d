"""Main CLI entry point."""

import logging

import click
from ledgepro.database.factories import create_sqlite_store
from ledgepro.domain.store import EntityStore, always_confirm

# Import and register all commands at module level
from ledgepro.cli.commands import (
    company,
    customer,
    add,
    transaction,
    report,
    backup,
)


def _confirm_with_prompt(action: str) -> bool:
    return click.confirm(action, default=False)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGEPRO_DB_PATH environment variable)",
    envvar="LEDGEPRO_DB_PATH",
)
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Answer yes to confirmation prompts")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, assume_yes: bool, verbose: bool):
    """LedgePro - Company and customer ledger.

    Record debit and credit transactions per customer, view running
    ledgers and totals, and back up or restore the whole book.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_store(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)

        store = EntityStore(db, confirm=always_confirm if assume_yes else _confirm_with_prompt)
        store.load()
        ctx.obj["db"] = db
        ctx.obj["store"] = store


# Register all commands
company.register_commands(cli)
customer.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
report.register_commands(cli)
backup.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
