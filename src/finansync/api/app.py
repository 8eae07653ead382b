"""
FastAPI application factory.

Builds the app around an explicit Settings object and Database instance so
that tests and the CLI can each supply their own.
"""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from finansync import __version__
from finansync.api import auth, categories, transactions
from finansync.api.schemas import ApiResponse
from finansync.api.security import AccessControl
from finansync.config import Settings
from finansync.database.base import Database
from finansync.database.factories import create_sqlite_database
from finansync.domain.errors import (
    AuthenticationError,
    ConflictError,
    DependencyError,
    DomainError,
    NotFoundError,
    StatementReadError,
    ValidationError,
)
from finansync.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

# First match wins, so subclasses come before their bases
ERROR_STATUS = [
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
    (DependencyError, 409),
    (StatementReadError, 400),
    (ValidationError, 400),
]


def status_for_error(error: DomainError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return 400


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with the standard response envelope."""
    status_code = status_for_error(exc)
    logger.info(
        "Request %s %s rejected (%d): %s",
        request.method,
        request.url.path,
        status_code,
        exc,
    )

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    body = ApiResponse.failure(error=str(exc))
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )


def create_app(settings: Settings, db: Optional[Database] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings
        db: Database to use. If None, a SQLite database is opened at
            ``settings.db_path``.

    Returns:
        Configured FastAPI app
    """
    setup_logging(settings.log_level, settings.log_file)

    if db is None:
        db = create_sqlite_database(database_path=settings.db_path)
        db.connect()
        db.initialize_schema()

    app = FastAPI(
        title=settings.app_name,
        description="Personal finance tracking: transactions, categories and bank statement import",
        version=__version__,
    )
    app.state.settings = settings
    app.state.db = db
    app.state.access_control = AccessControl(settings)

    app.include_router(auth.router)
    app.include_router(transactions.router)
    app.include_router(categories.router)
    app.add_exception_handler(DomainError, handle_domain_error)

    @app.get("/health", response_model=ApiResponse, response_model_exclude_none=True)
    def health_check():
        """Health check endpoint."""
        return ApiResponse.ok(
            data={"status": "healthy", "service": settings.app_name, "version": __version__}
        )

    logger.info("Application '%s' configured", settings.app_name)
    return app
