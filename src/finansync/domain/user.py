"""User domain service."""

import re
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from finansync.database.base import Database
from finansync.domain.entities import User
from finansync.domain.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_user_email,
    user_not_found,
)
from finansync.logging_config import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 8
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
INVALID_CREDENTIALS = "Invalid email or password"


def normalize_email(email: str) -> str:
    """Return the canonical (trimmed, lower-cased) form of an email."""
    return email.strip().lower()


class UserService:
    """Service for registering and authenticating users."""

    def __init__(self, db: Database):
        """Initialize user service.

        Args:
            db: Database instance
        """
        self.db = db

    def register(self, email: str, password: str) -> User:
        """Register a new user.

        Args:
            email: Login email, compared case-insensitively
            password: Plain-text password; only its hash is stored

        Returns:
            The created user

        Raises:
            ValidationError: If the email is malformed or the password too short
            ConflictError: If the email is already registered
        """
        email = normalize_email(email)
        if not EMAIL_RE.match(email):
            raise ValidationError(f"Invalid email address '{email}'")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if self.db.get_user_by_email(email) is not None:
            raise ConflictError(duplicate_user_email(email))

        user_id = self.db.create_user(
            email=email, password_hash=generate_password_hash(password)
        )
        logger.info("Registered user %d", user_id)
        return self.db.get_user(user_id)

    def authenticate(self, email: str, password: str) -> User:
        """Check a user's credentials.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = self.db.get_user_by_email(normalize_email(email))
        if user is None or not check_password_hash(user.password_hash, password):
            raise AuthenticationError(INVALID_CREDENTIALS)
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return self.db.get_user(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return self.db.get_user_by_email(normalize_email(email))

    def require_user(self, user_id: int) -> User:
        """Get user by ID or raise NotFoundError."""
        user = self.db.get_user(user_id)
        if user is None:
            raise NotFoundError(user_not_found(user_id))
        return user
