"""Domain model entities for finansync.

These are pure data classes representing business concepts, independent of
database schema. Services and the HTTP layer only ever see these types; the
SQLAlchemy models stay behind the database package.
"""

import math
from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class TransactionType(str, Enum):
    """Direction of a financial movement."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class User:
    """Registered user domain entity."""

    id: int
    email: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True)
class Category:
    """Category domain entity.

    System defaults have ``is_default`` set and no owning user.
    """

    id: int
    name: str
    type: TransactionType
    user_id: Optional[int]
    is_default: bool
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    description: str
    amount: Decimal
    date: date
    type: TransactionType
    user_id: Optional[int]
    category_id: Optional[int]
    created_at: datetime


@dataclass(frozen=True)
class NormalizedTransaction:
    """Transaction produced from one statement line, not yet persisted."""

    description: str
    amount: Decimal
    date: date
    type: TransactionType
    id: Optional[int] = None


@dataclass(frozen=True)
class SkippedLine:
    """Diagnostic for a statement line that did not produce a transaction."""

    line_number: int
    line: str
    reason: str


@dataclass(frozen=True)
class StatementParseResult:
    """All outcomes of one statement scan, in input order."""

    accepted: list[NormalizedTransaction]
    skipped: list[SkippedLine]


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a sorted result set."""

    items: list[T]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold ``total`` items."""
        if self.size <= 0:
            return 0
        return math.ceil(self.total / self.size)
