"""
Security Utilities

Password hashing (bcrypt) and JWT issuance/verification (PyJWT, HS256).

Tokens carry ``userId``, ``email``, ``iat`` and ``exp`` claims and are never
stored server-side. Verification failures are reported through the
``TokenError`` family; translating them to HTTP responses is the job of
``app.core.auth``.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 10
DEFAULT_TOKEN_LIFETIME = timedelta(hours=24)


# ============================================
# Password hashing
# ============================================


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False


# ============================================
# Tokens
# ============================================


class TokenError(Exception):
    """Token could not be verified for a reason other than expiry or format."""

    def __init__(self, message: str = "Token verification failed"):
        self.message = message
        super().__init__(message)


class ExpiredTokenError(TokenError):
    """Token signature is valid but its expiry has passed."""

    def __init__(self):
        super().__init__("Token has expired")


class MalformedTokenError(TokenError):
    """Token cannot be parsed or its signature does not validate."""

    def __init__(self, message: str = "Token is malformed or invalid"):
        super().__init__(message)


@dataclass(frozen=True)
class TokenClaims:
    """Identity and lifetime carried by an access token."""

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime

    def to_payload(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "email": self.email,
            "iat": int(self.issued_at.timestamp()),
            "exp": int(self.expires_at.timestamp()),
        }


class TokenService:
    """Signs and verifies access tokens with a process-wide secret."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
    ):
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = lifetime

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, user_id: int, email: str, *, now: datetime | None = None) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: ID of the authenticated user
            email: User's email address
            now: Issue time (defaults to the current UTC time)

        Returns:
            Compact JWT string
        """
        issued_at = now or datetime.now(UTC)
        claims = TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=issued_at,
            expires_at=issued_at + self._lifetime,
        )
        return jwt.encode(claims.to_payload(), self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry and return its claims.

        Raises:
            ExpiredTokenError: The token's expiry has passed
            MalformedTokenError: The token cannot be parsed, its signature does
                not validate, or it lacks the identity claims
            TokenError: Any other verification failure
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.DecodeError as e:
            # InvalidSignatureError is a DecodeError subclass
            raise MalformedTokenError() from e
        except jwt.PyJWTError as e:
            logger.debug(f"Token rejected: {type(e).__name__}")
            raise TokenError(str(e)) from e

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            raise MalformedTokenError("Token is missing identity claims")

        return TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )
