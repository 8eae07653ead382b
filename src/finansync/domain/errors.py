"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only care that the input was rejected.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ParseError(ValidationError):
    """A single bank-statement line could not be normalized."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist or is not visible to the owner."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class AuthenticationError(DomainError):
    """Credentials or bearer token were rejected."""


class StatementReadError(DomainError):
    """The statement stream could not be read or decoded."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def user_not_found(user_id: int) -> str:
    """Return message for missing user by ID."""
    return f"User {user_id} not found"


def user_email_not_found(email: str) -> str:
    """Return message for missing user by email."""
    return f"User '{email}' not found"


def duplicate_user_email(email: str) -> str:
    """Return message for an email that is already registered."""
    return f"User with email '{email}' already exists"


def duplicate_category_name(name: str) -> str:
    """Return message for a category name the user already has."""
    return f"Category '{name}' already exists"


def category_delete_blocked(category_id: int, transaction_count: int) -> str:
    """Return message when a category still has transactions."""
    return (
        f"Cannot delete category {category_id}: it has {transaction_count} "
        f"transaction{'s' if transaction_count != 1 else ''}. "
        "Please reassign or delete them first."
    )
