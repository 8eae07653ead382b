"""Bearer-token access control.

Tokens are JWTs signed with HMAC-SHA-256. The key is configured as base64
and decoded to raw bytes before use. The subject claim carries the user id.
"""

from datetime import datetime, timedelta, UTC
from typing import Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from finansync.config import Settings
from finansync.domain.errors import AuthenticationError
from finansync.logging_config import get_logger

logger = get_logger(__name__)

ALGORITHM = "HS256"


class AccessControl:
    """Issues and validates bearer tokens."""

    def __init__(self, settings: Settings):
        """Initialize access control.

        Args:
            settings: Application settings holding the signing key
        """
        self._key = settings.jwt_key
        self.expiration = timedelta(minutes=settings.jwt_expiration_minutes)

    def issue_token(self, user_id: int, now: Optional[datetime] = None) -> str:
        """Return a signed token for a user."""
        issued_at = now or datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.expiration,
        }
        return jwt.encode(payload, self._key, algorithm=ALGORITHM)

    def verify_token(self, token: str) -> int:
        """Validate a token and return its user id.

        Raises:
            AuthenticationError: If the signature, expiry or subject is invalid
        """
        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise AuthenticationError("Invalid token")

        try:
            return int(claims["sub"])
        except (TypeError, ValueError):
            raise AuthenticationError("Invalid token subject")


bearer_scheme = HTTPBearer(auto_error=False)


def get_access_control(request: Request) -> AccessControl:
    """Return the access control component bound to the running app."""
    return request.app.state.access_control


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    access_control: AccessControl = Depends(get_access_control),
) -> int:
    """Resolve the authenticated user id from the Authorization header.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if credentials is None:
        raise AuthenticationError("Missing bearer token")
    return access_control.verify_token(credentials.credentials)
