"""Category management commands."""

import click

from finansync.cli.user_resolution import resolve_user_or_exit
from finansync.domain.category import CategoryService
from finansync.domain.user import UserService


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option("--user", "email", help="Include this user's own categories")
@click.pass_context
def list_categories(ctx, email: str | None):
    """List categories, grouped by type."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    user_id = None
    if email:
        user_id = resolve_user_or_exit(ctx, UserService(db), email)

    categories = service.list_categories(user_id=user_id)
    if not categories:
        click.echo("No categories found. Run 'init-categories' to create default categories.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        marker = " [default]" if cat.is_default else ""
        click.echo(f"  {cat.name} ({cat.type.value}, ID: {cat.id}){marker}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
