"""CLI helpers for resolving a user from the command line."""

from __future__ import annotations

import click

from finansync.cli.error_handling import handle_domain_error
from finansync.domain.errors import NotFoundError, user_email_not_found
from finansync.domain.user import UserService


def resolve_user_or_exit(ctx: click.Context, user_service: UserService, email: str) -> int:
    """Resolve a user email to a user ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    user = user_service.get_user_by_email(email)
    if user is None:
        handle_domain_error(ctx, NotFoundError(user_email_not_found(email)))
    return user.id
