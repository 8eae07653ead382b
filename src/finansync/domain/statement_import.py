"""Bank-statement import domain service."""

from pathlib import Path
from typing import Any, BinaryIO

from finansync.database.base import Database
from finansync.domain.entities import SkippedLine, Transaction
from finansync.domain.errors import NotFoundError, user_not_found
from finansync.domain.statement import iter_statement
from finansync.domain.transaction import TransactionService
from finansync.logging_config import get_logger

logger = get_logger(__name__)


class StatementImportService:
    """Service for importing bank statements."""

    def __init__(self, db: Database):
        """Initialize statement import service.

        Args:
            db: Database instance
        """
        self.db = db
        self.transaction_service = TransactionService(db)

    def import_statement(self, stream: BinaryIO, user_id: int) -> dict[str, Any]:
        """Import transactions from a statement stream.

        Lines are parsed and persisted one at a time; a rejected line is
        reported and the scan continues.

        Args:
            stream: Binary stream with the statement contents
            user_id: Owner of the imported transactions

        Returns:
            Dict with import statistics:
            - imported: number of transactions imported
            - skipped: number of lines skipped
            - transactions: the persisted transactions, in line order
            - skipped_details: SkippedLine diagnostics, in line order
            - errors: one "Line N: reason" message per skipped line

        Raises:
            NotFoundError: If the user doesn't exist
            StatementReadError: If the stream cannot be read or decoded
        """
        if self.db.get_user(user_id) is None:
            raise NotFoundError(user_not_found(user_id))

        transactions: list[Transaction] = []
        skipped_details: list[SkippedLine] = []

        for outcome in iter_statement(stream):
            if isinstance(outcome, SkippedLine):
                skipped_details.append(outcome)
                continue

            transactions.append(
                self.transaction_service.create_transaction(
                    user_id=user_id,
                    description=outcome.description,
                    amount=outcome.amount,
                    date=outcome.date,
                    transaction_type=outcome.type,
                )
            )

        logger.info(
            "Imported statement for user %d: %d imported, %d skipped",
            user_id,
            len(transactions),
            len(skipped_details),
        )
        return {
            "imported": len(transactions),
            "skipped": len(skipped_details),
            "transactions": transactions,
            "skipped_details": skipped_details,
            "errors": [f"Line {s.line_number}: {s.reason}" for s in skipped_details],
        }

    def import_file(self, statement_path: str, user_id: int) -> dict[str, Any]:
        """Import transactions from a statement file on disk.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(statement_path)
        if not path.exists():
            raise FileNotFoundError(f"Statement file not found: {statement_path}")

        with open(path, "rb") as f:
            return self.import_statement(f, user_id)
