"""SQLAlchemy models for finansync database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Boolean,
    Enum,
    UniqueConstraint,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session
from sqlalchemy.types import TypeDecorator

from finansync.domain.entities import TransactionType

Base = declarative_base()


class ExactDecimal(TypeDecorator):
    """Decimal stored as its text form so no precision is lost.

    SQLite has no exact numeric type; ``Numeric`` round-trips through float.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class User(Base):
    """Registered user model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="user")
    categories = relationship("Category", back_populates="user")


class Category(Base):
    """Category model, either owned by a user or a system default."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    type = Column(Enum(TransactionType, name="transaction_type"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    is_default = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Name is unique per owner
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_category_user_name"),)

    # Relationships
    user = relationship("User", back_populates="categories")
    transactions = relationship("Transaction", back_populates="category")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    amount = Column(ExactDecimal, nullable=False)
    date = Column(Date, nullable=False, index=True)
    type = Column(Enum(TransactionType, name="transaction_type"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    user = relationship("User", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")


def create_database_engine(database_url: str) -> Engine:
    """Create an engine and make sure all tables exist."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Request handlers run on a threadpool
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    if database_url.startswith("sqlite"):
        event.listen(engine, "connect", _register_sqlite_functions)
    Base.metadata.create_all(engine)
    return engine


def _casefold(value):
    return value.casefold() if value is not None else None


def _register_sqlite_functions(dbapi_connection, connection_record):
    # SQLite's lower() only folds ASCII
    dbapi_connection.create_function("casefold", 1, _casefold, deterministic=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    return sessionmaker(bind=engine, expire_on_commit=False)
