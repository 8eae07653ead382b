"""Transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal

from finansync.database.base import Database
from finansync.domain.entities import Page, Transaction, TransactionType
from finansync.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    transaction_not_found,
    user_not_found,
)
from finansync.logging_config import get_logger

logger = get_logger(__name__)


class TransactionService:
    """Service for managing a user's transactions.

    Every operation is scoped to the owning user: another user's transaction
    is reported as not found.
    """

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _check_description(description: Optional[str]) -> str:
        # Descriptions are stored verbatim
        if not description or not description.strip():
            raise ValidationError("Description must not be empty")
        return description

    @staticmethod
    def _check_amount(amount: Decimal) -> Decimal:
        if not isinstance(amount, Decimal) or not amount.is_finite():
            raise ValidationError(f"Invalid amount '{amount}'")
        return amount

    def _check_category(self, user_id: int, category_id: Optional[int]) -> None:
        if category_id is None:
            return
        category = self.db.get_category(category_id)
        if category is None or not (category.is_default or category.user_id == user_id):
            raise NotFoundError(category_not_found(category_id))

    def create_transaction(
        self,
        user_id: int,
        description: str,
        amount: Decimal,
        date: date,
        transaction_type: TransactionType,
        category_id: Optional[int] = None,
    ) -> Transaction:
        """Create a transaction.

        Args:
            user_id: Owning user ID
            description: Transaction description
            amount: Signed transaction amount
            date: Transaction date
            transaction_type: INCOME or EXPENSE
            category_id: Optional category ID

        Returns:
            The persisted transaction, with its assigned ID

        Raises:
            NotFoundError: If user or category doesn't exist
            ValidationError: If description is blank or amount is not a finite Decimal
        """
        description = self._check_description(description)
        self._check_amount(amount)

        # Verify user exists
        if self.db.get_user(user_id) is None:
            raise NotFoundError(user_not_found(user_id))

        self._check_category(user_id, category_id)

        transaction_id = self.db.create_transaction(
            description=description,
            amount=amount,
            date=date,
            transaction_type=transaction_type,
            user_id=user_id,
            category_id=category_id,
        )
        logger.info("Created transaction %d for user %d", transaction_id, user_id)
        return self.db.get_transaction(transaction_id)

    def get_transaction(self, user_id: int, transaction_id: int) -> Transaction:
        """Get one of the user's transactions.

        Raises:
            NotFoundError: If the transaction doesn't exist or isn't the user's
        """
        txn = self.db.get_transaction(transaction_id, user_id=user_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def list_transactions(
        self,
        user_id: int,
        description: Optional[str] = None,
        page: int = 0,
        size: int = 10,
    ) -> Page[Transaction]:
        """List the user's transactions, newest first.

        Args:
            user_id: Owning user ID
            description: Optional case-insensitive substring filter
            page: Zero-based page index
            size: Page size

        Returns:
            Page of transaction entities

        Raises:
            ValidationError: If page is negative or size is not positive
        """
        if page < 0:
            raise ValidationError("Page index must not be negative")
        if size < 1:
            raise ValidationError("Page size must be at least 1")

        description = description.strip() if description else None
        return self.db.list_transactions(
            page=page,
            size=size,
            description=description or None,
            user_id=user_id,
        )

    def update_transaction(
        self,
        user_id: int,
        transaction_id: int,
        description: str,
        amount: Decimal,
        date: date,
        transaction_type: TransactionType,
        category_id: Optional[int] = None,
    ) -> Transaction:
        """Replace description, amount, date, type and category of a transaction.

        Type is stored as given; it is not re-derived from the amount.

        Raises:
            NotFoundError: If the transaction doesn't exist or isn't the user's,
                or the category isn't visible to the user
            ValidationError: If description is blank or amount is invalid
        """
        # Verify transaction exists
        txn = self.db.get_transaction(transaction_id, user_id=user_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        description = self._check_description(description)
        self._check_amount(amount)
        self._check_category(user_id, category_id)

        updated = self.db.update_transaction(
            transaction_id=transaction_id,
            description=description,
            amount=amount,
            date=date,
            transaction_type=transaction_type,
            category_id=category_id,
            user_id=user_id,
        )
        logger.info("Updated transaction %d for user %d", transaction_id, user_id)
        return updated

    def delete_transaction(self, user_id: int, transaction_id: int) -> None:
        """Delete one of the user's transactions.

        Raises:
            NotFoundError: If the transaction doesn't exist or isn't the user's
        """
        # Verify transaction exists
        txn = self.db.get_transaction(transaction_id, user_id=user_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        self.db.delete_transaction(transaction_id, user_id=user_id)
        logger.info("Deleted transaction %d for user %d", transaction_id, user_id)
