"""User management commands."""

import click

from finansync.cli.error_handling import handle_domain_error
from finansync.domain.errors import DomainError
from finansync.domain.user import UserService


@click.group()
def user_group():
    """Manage users."""
    pass


@user_group.command("create")
@click.argument("email")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password (prompted when omitted)",
)
@click.pass_context
def create_user(ctx, email: str, password: str):
    """Register a new user."""
    service = UserService(ctx.obj["db"])

    try:
        user = service.register(email, password)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created user '{user.email}' (ID: {user.id})")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
