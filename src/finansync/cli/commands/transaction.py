"""Transaction commands."""

import click

from finansync.cli.error_handling import handle_domain_error
from finansync.cli.user_resolution import resolve_user_or_exit
from finansync.domain.errors import DomainError
from finansync.domain.transaction import TransactionService
from finansync.domain.user import UserService


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--user", "email", required=True, help="Email of the owning user")
@click.option("--description", help="Case-insensitive text to search for in descriptions")
@click.option("--page", type=int, default=0, show_default=True, help="Zero-based page index")
@click.option("--size", type=int, default=10, show_default=True, help="Transactions per page")
@click.pass_context
def list_transactions(ctx, email: str, description: str | None, page: int, size: int):
    """List a user's transactions, newest first."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx, UserService(db), email)
    service = TransactionService(db)

    try:
        result = service.list_transactions(
            user_id=user_id, description=description, page=page, size=size
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not result.items:
        click.echo("No transactions found.")
        return

    click.echo(
        f"\nPage {result.page + 1} of {result.total_pages} ({result.total} transaction(s)):"
    )
    click.echo(f"{'ID':<6} {'Date':<12} {'Type':<8} {'Amount':>14}  Description")
    click.echo("-" * 80)
    for txn in result.items:
        click.echo(
            f"{txn.id:<6} {txn.date.isoformat():<12} {txn.type.value:<8} "
            f"{txn.amount:>14,.2f}  {txn.description}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
