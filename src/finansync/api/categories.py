"""Category routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from finansync.api.dependencies import get_category_service
from finansync.api.schemas import CategoryIn, CategoryOut
from finansync.api.security import get_current_user_id
from finansync.domain.category import CategoryService
from finansync.domain.entities import TransactionType

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryOut])
def list_categories(
    type: Optional[TransactionType] = None,
    user_id: int = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    """List the user's categories and the system defaults."""
    categories = service.list_categories(user_id=user_id, category_type=type)
    return [CategoryOut.from_entity(c) for c in categories]


@router.post("", status_code=201, response_model=CategoryOut)
def create_category(
    payload: CategoryIn,
    user_id: int = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    category = service.create_category(user_id, payload.name, payload.type)
    return CategoryOut.from_entity(category)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: int,
    user_id: int = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    """Delete one of the user's categories if no transaction uses it."""
    service.delete_category(user_id, category_id)
    return Response(status_code=204)
