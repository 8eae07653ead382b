"""HTTP server command."""

import click
import uvicorn
from pydantic import ValidationError

from finansync.api.app import create_app
from finansync.config import Settings


@click.command("serve")
@click.option("--host", help="Bind address (overrides FINANSYNC_HOST)")
@click.option("--port", type=int, help="Bind port (overrides FINANSYNC_PORT)")
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Run the HTTP API."""
    try:
        settings = Settings()
    except ValidationError as e:
        click.echo(f"Error: invalid configuration:\n{e}", err=True)
        ctx.exit(1)
        return

    app = create_app(settings, db=ctx.obj["db"])
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
