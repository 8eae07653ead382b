"""Database layer for finansync application."""

from finansync.database.base import Database
from finansync.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
