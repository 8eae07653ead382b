"""Category domain service."""

from typing import Optional

from finansync.database.base import Database
from finansync.domain.entities import Category, TransactionType
from finansync.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    category_delete_blocked,
    category_not_found,
    duplicate_category_name,
    user_not_found,
)
from finansync.logging_config import get_logger

logger = get_logger(__name__)

# System categories available to every user
DEFAULT_CATEGORIES = [
    ("Salary", TransactionType.INCOME),
    ("Investments", TransactionType.INCOME),
    ("Other Income", TransactionType.INCOME),
    ("Groceries", TransactionType.EXPENSE),
    ("Restaurants", TransactionType.EXPENSE),
    ("Housing", TransactionType.EXPENSE),
    ("Utilities", TransactionType.EXPENSE),
    ("Transportation", TransactionType.EXPENSE),
    ("Health", TransactionType.EXPENSE),
    ("Education", TransactionType.EXPENSE),
    ("Entertainment", TransactionType.EXPENSE),
    ("Shopping", TransactionType.EXPENSE),
    ("Other Expenses", TransactionType.EXPENSE),
]


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _clean_name(name: str) -> str:
        name = name.strip() if name else ""
        if not name:
            raise ValidationError("Category name must not be empty")
        return name

    def create_category(
        self, user_id: int, name: str, category_type: TransactionType
    ) -> Category:
        """Create a category owned by a user.

        Args:
            user_id: Owning user ID
            name: Category name, unique per user
            category_type: INCOME or EXPENSE

        Returns:
            The created category

        Raises:
            NotFoundError: If the user doesn't exist
            ConflictError: If the user already has a category with this name
            ValidationError: If the name is blank
        """
        name = self._clean_name(name)
        if self.db.get_user(user_id) is None:
            raise NotFoundError(user_not_found(user_id))
        if self.db.get_category_by_name(name, user_id) is not None:
            raise ConflictError(duplicate_category_name(name))

        category_id = self.db.create_category(
            name=name, category_type=category_type, user_id=user_id
        )
        logger.info("Created category %d for user %d", category_id, user_id)
        return self.db.get_category(category_id)

    def create_default_category(self, name: str, category_type: TransactionType) -> Category:
        """Create a system default category.

        Raises:
            ConflictError: If a default category with this name exists
        """
        name = self._clean_name(name)
        if self.db.get_category_by_name(name, None) is not None:
            raise ConflictError(duplicate_category_name(name))

        category_id = self.db.create_category(
            name=name, category_type=category_type, user_id=None, is_default=True
        )
        return self.db.get_category(category_id)

    def get_category(self, user_id: int, category_id: int) -> Category:
        """Get a category visible to a user (own or default).

        Raises:
            NotFoundError: If the category doesn't exist or belongs to someone else
        """
        category = self.db.get_category(category_id)
        if category is None or not (category.is_default or category.user_id == user_id):
            raise NotFoundError(category_not_found(category_id))
        return category

    def list_categories(
        self, user_id: Optional[int] = None, category_type: Optional[TransactionType] = None
    ) -> list[Category]:
        """List a user's categories plus system defaults, ordered by name.

        Args:
            user_id: Owning user ID, or None for system defaults only
            category_type: Optional type filter
        """
        return self.db.list_categories(user_id=user_id, category_type=category_type)

    def count_transactions(self, category_id: int) -> int:
        """Count transactions that use a category."""
        return self.db.count_transactions_by_category(category_id)

    def delete_category(self, user_id: int, category_id: int) -> None:
        """Delete one of the user's categories.

        Raises:
            NotFoundError: If the category isn't owned by the user (defaults
                included)
            DependencyError: If transactions still reference the category
        """
        category = self.db.get_category(category_id)
        if category is None or category.user_id != user_id:
            raise NotFoundError(category_not_found(category_id))

        transaction_count = self.count_transactions(category_id)
        if transaction_count > 0:
            raise DependencyError(category_delete_blocked(category_id, transaction_count))

        self.db.delete_category(category_id)
        logger.info("Deleted category %d for user %d", category_id, user_id)
