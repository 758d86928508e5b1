"""
Unverified JWT helpers.

The client cannot check signatures (it never holds the secret); these
functions only read the payload so the UI can tell whether a stored token
is worth sending. The server remains the authority.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any

import jwt

logger = logging.getLogger(__name__)

Claims = dict[str, Any]

SECONDS_PER_DAY = 24 * 3600


@dataclass(frozen=True)
class TimeRemaining:
    days: int
    hours: int
    minutes: int
    seconds: int
    total_seconds: float


def decode_token(token: str | None) -> Claims | None:
    """
    Read a token's payload without verifying it.

    Returns:
        The claims, or None for anything that is not a well-formed JWT
    """
    if not token or not isinstance(token, str):
        return None

    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logger.debug(f"Error decoding token: {e}")
        return None

    return claims


def _expiry(claims: Claims | None) -> float | None:
    if not claims:
        return None
    exp = claims.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, int | float):
        return None
    return float(exp)


def is_token_expired(claims: Claims | None, *, now: float | None = None) -> bool:
    """True when claims are absent, carry no usable ``exp``, or ``exp <= now``."""
    exp = _expiry(claims)
    if exp is None:
        return True
    current = time.time() if now is None else now
    return exp <= current


def time_remaining(claims: Claims | None, *, now: float | None = None) -> TimeRemaining | None:
    """Breakdown of the time left before expiry, or None once expired."""
    exp = _expiry(claims)
    if exp is None:
        return None

    current = time.time() if now is None else now
    remaining = exp - current
    if remaining <= 0:
        return None

    whole = int(remaining)
    return TimeRemaining(
        days=whole // SECONDS_PER_DAY,
        hours=(whole % SECONDS_PER_DAY) // 3600,
        minutes=(whole % 3600) // 60,
        seconds=whole % 60,
        total_seconds=remaining,
    )


def is_expiring_soon(
    claims: Claims | None, minutes: float = 5, *, now: float | None = None
) -> bool:
    """True when the token expires within ``minutes``. Expired tokens are not "soon"."""
    remaining = time_remaining(claims, now=now)
    if remaining is None:
        return False
    return remaining.total_seconds / 60 <= minutes
