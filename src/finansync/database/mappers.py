"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so that services never hold a
session-bound ORM object.
"""

from finansync.domain import entities as domain
from finansync.database.models import (
    User as ORMUser,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        email=orm_user.email,
        password_hash=orm_user.password_hash,
        created_at=orm_user.created_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        type=orm_category.type,
        user_id=orm_category.user_id,
        is_default=bool(orm_category.is_default),
        created_at=orm_category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        description=orm_transaction.description,
        amount=orm_transaction.amount,
        date=orm_transaction.date,
        type=orm_transaction.type,
        user_id=orm_transaction.user_id,
        category_id=orm_transaction.category_id,
        created_at=orm_transaction.created_at,
    )
