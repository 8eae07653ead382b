"""Tests for domain entities."""

import dataclasses
from datetime import datetime, date, UTC
from decimal import Decimal

import pytest

from finansync.domain.entities import (
    Category,
    NormalizedTransaction,
    Page,
    Transaction,
    TransactionType,
    User,
)


def test_transaction_type_values():
    """Test transaction types serialize as their names."""
    assert TransactionType.INCOME.value == "INCOME"
    assert TransactionType.EXPENSE.value == "EXPENSE"
    assert TransactionType("EXPENSE") is TransactionType.EXPENSE


def test_user_entity():
    """Test creating a User entity."""
    now = datetime.now(UTC)
    user = User(id=1, email="alice@example.com", password_hash="hash", created_at=now)

    assert user.id == 1
    assert user.email == "alice@example.com"


def test_category_entity():
    """Test creating a default Category entity."""
    category = Category(
        id=1,
        name="Groceries",
        type=TransactionType.EXPENSE,
        user_id=None,
        is_default=True,
        created_at=datetime.now(UTC),
    )

    assert category.is_default
    assert category.user_id is None


def test_transaction_entity_is_immutable():
    """Test Transaction entities cannot be modified in place."""
    txn = Transaction(
        id=1,
        description="PIX RECEBIDO - Salario",
        amount=Decimal("2500.00"),
        date=date(2023, 12, 25),
        type=TransactionType.INCOME,
        user_id=1,
        category_id=None,
        created_at=datetime.now(UTC),
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        txn.amount = Decimal("0")


def test_normalized_transaction_has_no_id():
    txn = NormalizedTransaction(
        description="A - B",
        amount=Decimal("1.00"),
        date=date(2024, 1, 1),
        type=TransactionType.INCOME,
    )

    assert txn.id is None


class TestPage:
    """Tests for the Page entity."""

    def test_total_pages(self):
        assert Page(items=[], page=0, size=10, total=0).total_pages == 0
        assert Page(items=[], page=0, size=10, total=10).total_pages == 1
        assert Page(items=[], page=0, size=10, total=11).total_pages == 2
        assert Page(items=[], page=0, size=3, total=7).total_pages == 3

    def test_total_pages_with_non_positive_size(self):
        assert Page(items=[], page=0, size=0, total=5).total_pages == 0
