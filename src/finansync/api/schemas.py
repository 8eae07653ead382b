"""Request and response bodies for the HTTP API."""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from finansync.domain.entities import (
    Category,
    Page,
    SkippedLine,
    Transaction,
    TransactionType,
)

SUCCESS_MESSAGE = "Operation completed successfully"


class ApiResponse(BaseModel):
    """Envelope used for errors, health checks and import summaries."""

    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    error: Optional[str] = None
    timestamp: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.UTC))

    @classmethod
    def ok(cls, data: Any = None, message: str = SUCCESS_MESSAGE) -> "ApiResponse":
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(cls, error: str, message: Optional[str] = None) -> "ApiResponse":
        return cls(success=False, message=message, error=error)


class TransactionIn(BaseModel):
    """Body for creating or fully replacing a transaction."""

    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., allow_inf_nan=False)
    date: dt.date
    type: TransactionType
    category_id: Optional[int] = None


class TransactionOut(BaseModel):
    id: int
    description: str
    amount: Decimal
    date: dt.date
    type: TransactionType
    category_id: Optional[int] = None

    @classmethod
    def from_entity(cls, txn: Transaction) -> "TransactionOut":
        return cls(
            id=txn.id,
            description=txn.description,
            amount=txn.amount,
            date=txn.date,
            type=txn.type,
            category_id=txn.category_id,
        )


class TransactionPage(BaseModel):
    items: list[TransactionOut]
    page: int
    size: int
    total: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page[Transaction]) -> "TransactionPage":
        return cls(
            items=[TransactionOut.from_entity(txn) for txn in page.items],
            page=page.page,
            size=page.size,
            total=page.total,
            total_pages=page.total_pages,
        )


class SkippedLineOut(BaseModel):
    line_number: int
    line: str
    reason: str

    @classmethod
    def from_entity(cls, skipped: SkippedLine) -> "SkippedLineOut":
        return cls(line_number=skipped.line_number, line=skipped.line, reason=skipped.reason)


class ImportSummary(BaseModel):
    imported: int
    skipped: int
    transactions: list[TransactionOut]
    skipped_lines: list[SkippedLineOut]


class CategoryIn(BaseModel):
    name: str = Field(..., min_length=1)
    type: TransactionType


class CategoryOut(BaseModel):
    id: int
    name: str
    type: TransactionType
    is_default: bool

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryOut":
        return cls(
            id=category.id,
            name=category.name,
            type=category.type,
            is_default=category.is_default,
        )


class Credentials(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
