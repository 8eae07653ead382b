"""Shared pytest fixtures for finansync tests."""

import base64
import tempfile
import os
from pathlib import Path
import pytest

from finansync.database.factories import create_sqlite_database
from finansync.domain.category import CategoryService
from finansync.domain.statement_import import StatementImportService
from finansync.domain.transaction import TransactionService
from finansync.domain.user import UserService

TEST_PASSWORD = "correct-horse-battery"
TEST_JWT_SECRET = base64.b64encode(b"finansync-test-signing-key-32byt").decode("ascii")

STATEMENT_PREAMBLE = (
    "Extrato Conta Corrente\n"
    "Conta;12345-6\n"
    "Agencia;0001\n"
    "Periodo;01/12/2023 a 31/12/2023\n"
    "\n"
    "Data Lançamento;Histórico;Descrição;Valor;Saldo\n"
)


def make_statement(*lines: str) -> bytes:
    """Build statement bytes with the standard preamble followed by lines."""
    body = "".join(f"{line}\n" for line in lines)
    return (STATEMENT_PREAMBLE + body).encode("utf-8")


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_service(temp_db):
    """Create a UserService with a temporary database."""
    return UserService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a StatementImportService with a temporary database."""
    return StatementImportService(temp_db)


@pytest.fixture
def sample_user(user_service):
    """Register a sample user."""
    return user_service.register("alice@example.com", TEST_PASSWORD)


@pytest.fixture
def other_user(user_service):
    """Register a second user for ownership tests."""
    return user_service.register("bob@example.com", TEST_PASSWORD)


@pytest.fixture
def settings(temp_db):
    """Settings pointing at the temporary database."""
    from finansync.config import Settings

    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        db_path=temp_db.database_path,
        log_level="WARNING",
    )


@pytest.fixture
def client(settings, temp_db):
    """Create a FastAPI test client bound to the temporary database."""
    from fastapi.testclient import TestClient
    from finansync.api.app import create_app

    app = create_app(settings, db=temp_db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(settings, sample_user):
    """Authorization header carrying a valid token for the sample user."""
    from finansync.api.security import AccessControl

    token = AccessControl(settings).issue_token(sample_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def statement_bytes():
    """Return the statement builder."""
    return make_statement


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
