"""Authentication routes. These are public."""

from fastapi import APIRouter, Depends

from finansync.api.dependencies import get_user_service
from finansync.api.schemas import Credentials, TokenOut, UserOut
from finansync.api.security import AccessControl, get_access_control
from finansync.domain.user import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201, response_model=UserOut)
def register(
    payload: Credentials,
    service: UserService = Depends(get_user_service),
):
    user = service.register(payload.email, payload.password)
    return UserOut.model_validate(user)


@router.post("/login", response_model=TokenOut)
def login(
    payload: Credentials,
    service: UserService = Depends(get_user_service),
    access_control: AccessControl = Depends(get_access_control),
):
    """Exchange email and password for a bearer token."""
    user = service.authenticate(payload.email, payload.password)
    return TokenOut(
        access_token=access_control.issue_token(user.id),
        expires_in=int(access_control.expiration.total_seconds()),
    )
