"""
Authentication Dependencies

Provides the bearer-token gate for protected endpoints.

For every request ``get_current_user``:
1. Extracts the bearer token from the Authorization header (401 if absent)
2. Verifies it with the application's TokenService (403 if expired or invalid)
3. Confirms the referenced user still exists (401 if it does not)
4. Attaches the resolved identity to ``request.state.user``

Any unexpected failure while verifying or looking up the user is a 500.
"""

import logging
from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.errors import (
    InternalError,
    InvalidTokenError,
    MissingTokenError,
    TokenExpiredError,
    UserGoneError,
)
from app.core.security import ExpiredTokenError, TokenError, TokenService
from app.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our own 401 envelope
security = HTTPBearer(
    auto_error=False,
    description="JWT Bearer token obtained from /auth/login",
)


@dataclass
class CurrentUser:
    """
    Represents the authenticated user of a request.

    Attributes:
        user_id: User's numeric identifier (from the token)
        email: User's email address (from the token)
        name: User's display name (from the database)
    """

    user_id: int
    email: str
    name: str

    def __str__(self) -> str:
        return f"CurrentUser(id={self.user_id}, email={self.email})"


def get_token_service(request: Request) -> TokenService:
    """Token service created by the application factory."""
    return request.app.state.token_service


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    token_service: TokenService = Depends(get_token_service),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """
    FastAPI dependency that validates the bearer token and returns the user.

    Usage:
        @router.get("/protected")
        async def protected(user: CurrentUser = Depends(get_current_user)):
            # user.user_id, user.email, user.name are available

    Raises:
        MissingTokenError: No bearer token was sent (401)
        TokenExpiredError: The token has expired (403)
        InvalidTokenError: The token is malformed or fails verification (403)
        UserGoneError: The token's user no longer exists (401)
        InternalError: Unexpected failure during verification (500)
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    try:
        claims = token_service.verify(credentials.credentials)
    except ExpiredTokenError as e:
        logger.info("Rejected expired token")
        raise TokenExpiredError() from e
    except TokenError as e:
        logger.warning(f"Rejected invalid token: {e.message}")
        raise InvalidTokenError() from e
    except Exception as e:
        logger.exception("Token verification failed unexpectedly")
        raise InternalError("Token verification failed") from e

    try:
        user = await UserRepository.get_by_id(db, claims.user_id)
    except Exception as e:
        logger.exception(f"User lookup failed for token user {claims.user_id}")
        raise InternalError("Token verification failed") from e

    if user is None:
        logger.warning(f"Token references missing user {claims.user_id}")
        raise UserGoneError()

    current_user = CurrentUser(user_id=claims.user_id, email=claims.email, name=user.name)
    request.state.user = current_user
    logger.debug(f"Authenticated {current_user}")
    return current_user


__all__ = [
    "CurrentUser",
    "get_current_user",
    "get_token_service",
    "security",
]
