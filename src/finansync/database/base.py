"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from finansync.domain.entities import (
    Category,
    Page,
    Transaction,
    TransactionType,
    User,
)


class Database(ABC):
    """Abstract database interface for finansync.

    Transaction operations take an optional ``user_id``. When given, the
    record must belong to that user; otherwise it is treated as missing.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, email: str, password_hash: str) -> int:
        """Create a user. Returns user ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self,
        name: str,
        category_type: TransactionType,
        user_id: Optional[int] = None,
        is_default: bool = False,
    ) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str, user_id: Optional[int]) -> Optional[Category]:
        """Get a category by name for an owner (None for system defaults)."""
        pass

    @abstractmethod
    def list_categories(
        self,
        user_id: Optional[int] = None,
        category_type: Optional[TransactionType] = None,
    ) -> list[Category]:
        """List a user's categories plus the defaults, ordered by name.

        With no user_id only the defaults are listed.
        """
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category."""
        pass

    @abstractmethod
    def count_transactions_by_category(self, category_id: int) -> int:
        """Count transactions that reference a category."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        description: str,
        amount: Decimal,
        date: date,
        transaction_type: TransactionType,
        user_id: Optional[int] = None,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(
        self, transaction_id: int, user_id: Optional[int] = None
    ) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        page: int,
        size: int,
        description: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> Page[Transaction]:
        """List transactions by date descending, optionally filtered by description."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        description: str,
        amount: Decimal,
        date: date,
        transaction_type: TransactionType,
        category_id: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> Transaction:
        """Replace all mutable fields of a transaction."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int, user_id: Optional[int] = None) -> None:
        """Delete a transaction."""
        pass
