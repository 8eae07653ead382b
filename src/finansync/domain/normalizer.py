"""Normalization of bank-statement fields into transactions."""

from decimal import Decimal
from typing import Sequence

from finansync.domain.entities import NormalizedTransaction, TransactionType
from finansync.domain.errors import ParseError
from finansync.utils.amount_parser import parse_amount
from finansync.utils.date_parser import parse_date

MIN_FIELDS = 5
DESCRIPTION_SEPARATOR = " - "


def derive_transaction_type(amount: Decimal) -> TransactionType:
    """Return INCOME for non-negative amounts and EXPENSE otherwise."""
    return TransactionType.INCOME if amount >= 0 else TransactionType.EXPENSE


def build_description(memo: str, description: str) -> str:
    """Join the memo and free-text description columns."""
    return f"{memo.strip()}{DESCRIPTION_SEPARATOR}{description.strip()}"


def normalize_fields(fields: Sequence[str]) -> NormalizedTransaction:
    """Map one statement field-tuple into a normalized transaction.

    Fields are ``(date, memo, description, amount, balance, ...)``; the
    balance and anything after it are ignored.

    Args:
        fields: Raw fields of one statement line

    Returns:
        Normalized transaction without an id

    Raises:
        ParseError: If the line has too few fields or the date or amount
            cannot be parsed
    """
    if len(fields) < MIN_FIELDS:
        raise ParseError(f"Expected at least {MIN_FIELDS} fields, got {len(fields)}")

    date_str, memo, description, amount_str = fields[0], fields[1], fields[2], fields[3]

    try:
        txn_date = parse_date(date_str)
        amount = parse_amount(amount_str)
    except ValueError as e:
        raise ParseError(str(e)) from e

    return NormalizedTransaction(
        description=build_description(memo, description),
        amount=amount,
        date=txn_date,
        type=derive_transaction_type(amount),
    )
