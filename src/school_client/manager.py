"""
Client token manager.

Holds the access token between runs and answers "is this client logged
in?" from the token alone. Outgoing requests get the bearer header through
``BearerAuth``, which asks the manager on every request, so storing or
clearing the token takes effect immediately without touching client
defaults.
"""

import logging
import time
from collections.abc import Callable, Generator
from typing import Any

import httpx

from school_client.storage import MemoryTokenStorage, TokenStorage
from school_client.tokens import (
    Claims,
    TimeRemaining,
    decode_token,
    is_expiring_soon,
    is_token_expired,
    time_remaining,
)

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"

# Cleared on logout alongside the token
SESSION_KEYS = ("user", "refreshToken", "tokenExpiry")

AUTH_ERROR_STATUSES = frozenset({401, 403})


class TokenManager:
    """Token lifecycle: store, decode, expiry checks and logout."""

    def __init__(
        self,
        storage: TokenStorage | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.storage = storage if storage is not None else MemoryTokenStorage()
        self._clock = clock

    def get_token(self) -> str | None:
        return self.storage.get(TOKEN_KEY)

    def store(self, token: str) -> None:
        """Persist a token; later requests carry it as the bearer header."""
        self.storage.set(TOKEN_KEY, token)

    @staticmethod
    def decode(token: str | None) -> Claims | None:
        return decode_token(token)

    def is_expired(self, claims: Claims | None) -> bool:
        return is_token_expired(claims, now=self._clock())

    def is_authenticated(self) -> Claims | None:
        """
        Claims of the stored token if it is present and unexpired.

        An expired token is cleared (automatic logout) before returning None.
        """
        token = self.get_token()
        if not token:
            return None

        claims = self.decode(token)
        if claims is None:
            return None

        if self.is_expired(claims):
            logger.info("Stored token has expired, logging out")
            self.logout()
            return None

        return claims

    def logout(self) -> None:
        """Forget the token and any cached session data."""
        self.storage.remove(TOKEN_KEY)
        for key in SESSION_KEYS:
            self.storage.remove(key)
        logger.info("User logged out")

    def get_user_info(self) -> dict[str, Any] | None:
        claims = self.is_authenticated()
        if claims is None:
            return None
        return {
            "userId": claims.get("userId"),
            "email": claims.get("email"),
            "exp": claims.get("exp"),
            "iat": claims.get("iat"),
        }

    def time_remaining(self) -> TimeRemaining | None:
        return time_remaining(self.is_authenticated(), now=self._clock())

    def is_expiring_soon(self, minutes: float = 5) -> bool:
        return is_expiring_soon(self.is_authenticated(), minutes, now=self._clock())

    def auth_header(self) -> dict[str, str] | None:
        """``Authorization`` header for the stored token, or None when logged out."""
        token = self.get_token()
        if not token or self.is_authenticated() is None:
            return None
        return {"Authorization": f"Bearer {token}"}

    def handle_auth_error(self, status_code: int) -> bool:
        """
        React to an API status code.

        Returns:
            True if the status was an authentication failure and the user
            was logged out
        """
        if status_code not in AUTH_ERROR_STATUSES:
            return False
        logger.warning(f"Authentication failed ({status_code}), logging out user")
        self.logout()
        return True


class BearerAuth(httpx.Auth):
    """httpx auth flow that attaches the manager's current token."""

    def __init__(self, manager: TokenManager):
        self.manager = manager

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        header = self.manager.auth_header()
        if header is not None:
            request.headers.update(header)
        yield request
