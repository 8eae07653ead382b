"""Domain layer for finansync application.

Services live in their own modules (``finansync.domain.transaction`` and
friends) and are imported from there; this package only re-exports the
plain entities so the database layer can depend on them without a cycle.
"""

from finansync.domain.entities import (
    Category,
    NormalizedTransaction,
    Page,
    SkippedLine,
    StatementParseResult,
    Transaction,
    TransactionType,
    User,
)

__all__ = [
    "Category",
    "NormalizedTransaction",
    "Page",
    "SkippedLine",
    "StatementParseResult",
    "Transaction",
    "TransactionType",
    "User",
]
