"""Bank statement import command."""

import click

from finansync.cli.error_handling import handle_domain_error
from finansync.cli.user_resolution import resolve_user_or_exit
from finansync.domain.errors import DomainError
from finansync.domain.statement_import import StatementImportService
from finansync.domain.user import UserService


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--user", "email", required=True, help="Email of the user who owns the transactions")
@click.pass_context
def import_statement(ctx, csv_file: str, email: str):
    """Import transactions from a bank statement CSV file."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx, UserService(db), email)
    service = StatementImportService(db)

    try:
        result = service.import_file(csv_file, user_id)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result['imported']} transactions")
    click.echo(f"  Skipped: {result['skipped']} lines")
    for error in result["errors"]:
        click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_statement)
