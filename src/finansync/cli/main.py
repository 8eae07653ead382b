"""Main CLI entry point."""

import click
from finansync.database.factories import create_sqlite_database
from finansync.logging_config import setup_logging

# Import and register all commands at module level
from finansync.cli.commands import (
    category,
    import_cmd,
    init_categories,
    serve,
    transaction,
    user,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINANSYNC_DB_PATH environment variable)",
    envvar="FINANSYNC_DB_PATH",
)
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    envvar="FINANSYNC_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """finansync - personal finance tracking.

    Import bank statements, manage transactions and categories, and serve
    the HTTP API.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
user.register_commands(cli)
import_cmd.register_commands(cli)
init_categories.register_commands(cli)
category.register_commands(cli)
transaction.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
