"""Transaction routes."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile

from finansync.api.dependencies import (
    get_import_service,
    get_settings,
    get_transaction_service,
)
from finansync.api.schemas import (
    ApiResponse,
    ImportSummary,
    SkippedLineOut,
    TransactionIn,
    TransactionOut,
    TransactionPage,
)
from finansync.api.security import get_current_user_id
from finansync.config import Settings
from finansync.domain.statement_import import StatementImportService
from finansync.domain.transaction import TransactionService
from finansync.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", status_code=201, response_model=TransactionOut)
def create_transaction(
    payload: TransactionIn,
    user_id: int = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
):
    """Create a transaction for the authenticated user."""
    txn = service.create_transaction(
        user_id=user_id,
        description=payload.description,
        amount=payload.amount,
        date=payload.date,
        transaction_type=payload.type,
        category_id=payload.category_id,
    )
    return TransactionOut.from_entity(txn)


@router.get("", response_model=TransactionPage)
def list_transactions(
    description: str = "",
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    user_id: int = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
    service: TransactionService = Depends(get_transaction_service),
):
    """List the user's transactions, newest first.

    ``size`` defaults to the configured page size and is capped at the
    configured maximum.
    """
    page_size = min(size or settings.default_page_size, settings.max_page_size)
    result = service.list_transactions(
        user_id=user_id, description=description, page=page, size=page_size
    )
    return TransactionPage.from_page(result)


@router.post(
    "/import",
    response_model=ApiResponse,
    response_model_exclude_none=True,
)
def import_statement(
    file: UploadFile = File(...),
    user_id: int = Depends(get_current_user_id),
    service: StatementImportService = Depends(get_import_service),
):
    """Import a bank statement CSV for the authenticated user."""
    logger.info("Received statement upload '%s' from user %d", file.filename, user_id)
    result = service.import_statement(file.file, user_id)
    summary = ImportSummary(
        imported=result["imported"],
        skipped=result["skipped"],
        transactions=[TransactionOut.from_entity(t) for t in result["transactions"]],
        skipped_lines=[SkippedLineOut.from_entity(s) for s in result["skipped_details"]],
    )
    return ApiResponse.ok(
        data=summary,
        message=f"Imported {summary.imported} transactions, skipped {summary.skipped} lines",
    )


@router.get("/{transaction_id}", response_model=TransactionOut)
def get_transaction(
    transaction_id: int,
    user_id: int = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
):
    """Get one of the user's transactions."""
    return TransactionOut.from_entity(service.get_transaction(user_id, transaction_id))


@router.put("/{transaction_id}", response_model=TransactionOut)
def update_transaction(
    transaction_id: int,
    payload: TransactionIn,
    user_id: int = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
):
    """Replace all fields of one of the user's transactions."""
    txn = service.update_transaction(
        user_id=user_id,
        transaction_id=transaction_id,
        description=payload.description,
        amount=payload.amount,
        date=payload.date,
        transaction_type=payload.type,
        category_id=payload.category_id,
    )
    return TransactionOut.from_entity(txn)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: int,
    user_id: int = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
):
    """Delete one of the user's transactions."""
    service.delete_transaction(user_id, transaction_id)
    return Response(status_code=204)
