"""Backup, restore and wipe commands."""

from pathlib import Path

import click
from ledgepro.domain.backup import BackupService
from ledgepro.domain.errors import DomainError
from ledgepro.cli.error_handling import handle_domain_error


@click.group("backup")
def backup_group():
    """Export or restore the whole ledger."""
    pass


@backup_group.command("export")
@click.argument("output", required=False, type=click.Path(dir_okay=False))
@click.pass_context
def export_backup(ctx, output: str | None):
    """Write a JSON backup of all data.

    OUTPUT defaults to ledgepro_backup_<today>.json in the current directory.
    Use "-" to write to standard output.
    """
    service = BackupService(ctx.obj["store"])
    content = service.export_json()

    if output == "-":
        click.echo(content)
        return

    path = Path(output or service.default_filename())
    path.write_text(content, encoding="utf-8")
    click.echo(f"Backup written to {path}")


@backup_group.command("import")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_backup(ctx, backup_file: str):
    """Replace all data with the contents of a JSON backup.

    The import is all-or-nothing: an invalid file leaves the ledger unchanged.
    """
    service = BackupService(ctx.obj["store"])
    content = Path(backup_file).read_bytes()

    try:
        restored = service.import_json(content)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if restored:
        click.echo("Backup restored successfully!")
    else:
        click.echo("Cancelled.")


@click.command("wipe")
@click.pass_context
def wipe(ctx):
    """Delete all companies, customers and transactions."""
    if ctx.obj["store"].wipe():
        click.echo("All data deleted.")
    else:
        click.echo("Cancelled.")


def register_commands(cli):
    """Register backup commands with main CLI."""
    cli.add_command(backup_group)
    cli.add_command(wipe)
