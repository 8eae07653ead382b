"""FastAPI dependency providers backed by ``app.state``."""

from fastapi import Depends, Request

from finansync.config import Settings
from finansync.database.base import Database
from finansync.domain.category import CategoryService
from finansync.domain.statement_import import StatementImportService
from finansync.domain.transaction import TransactionService
from finansync.domain.user import UserService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_transaction_service(db: Database = Depends(get_db)) -> TransactionService:
    return TransactionService(db)


def get_category_service(db: Database = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_user_service(db: Database = Depends(get_db)) -> UserService:
    return UserService(db)


def get_import_service(db: Database = Depends(get_db)) -> StatementImportService:
    return StatementImportService(db)
