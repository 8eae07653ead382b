"""Initialize default categories."""

import click

from finansync.domain.category import DEFAULT_CATEGORIES, CategoryService
from finansync.domain.errors import ConflictError


@click.command("init-categories")
@click.pass_context
def init_categories(ctx):
    """Create the system default categories shared by all users."""
    service = CategoryService(ctx.obj["db"])

    created = 0
    existing = 0
    for name, category_type in DEFAULT_CATEGORIES:
        try:
            service.create_default_category(name, category_type)
            created += 1
        except ConflictError:
            existing += 1

    if existing == 0:
        click.echo(f"Successfully created {created} categories.")
    else:
        click.echo(f"Created {created} categories ({existing} already existed).")


def register_commands(cli):
    """Register init-categories command with main CLI."""
    cli.add_command(init_categories)
