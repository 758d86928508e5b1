"""
User Service Layer

Credential store operations: registering users with hashed passwords and
verifying login credentials.

Security considerations:
- Passwords are bcrypt-hashed before storage and never returned
- Emails are normalised (trimmed, lower-cased) so lookups are case-insensitive
- A duplicate insert that races past the existence check is caught via the
  unique constraint and reported as a duplicate
- Unknown emails still pay for one bcrypt comparison, so response timing does
  not reveal which accounts exist
"""

import logging
from collections.abc import Sequence
from functools import lru_cache

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DuplicateUserError, NotFoundError
from app.core.security import DEFAULT_BCRYPT_ROUNDS, hash_password, verify_password
from app.modules.shared import normalize_email
from app.modules.users.models import User
from app.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)


class UserNotFoundError(NotFoundError):
    """Raised when no user matches an ID or email."""

    def __init__(self):
        super().__init__("User")


@lru_cache(maxsize=8)
def _dummy_hash(rounds: int) -> str:
    return hash_password("not-a-real-password", rounds=rounds)


async def register_user(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> User:
    """
    Register a new user.

    Args:
        db: Database session
        name: Display name
        email: Email address (normalised before storage)
        password: Plaintext password (hashed before storage)
        bcrypt_rounds: bcrypt cost factor

    Returns:
        The created User

    Raises:
        DuplicateUserError: If a user with this email already exists
    """
    normalized = normalize_email(email)

    if await UserRepository.email_exists(db, normalized):
        logger.warning(f"Registration rejected, email already registered: {normalized}")
        raise DuplicateUserError()

    password_hash = hash_password(password, rounds=bcrypt_rounds)

    try:
        user = await UserRepository.create(
            db,
            name=name.strip(),
            email=normalized,
            password_hash=password_hash,
        )
    except IntegrityError as e:
        logger.warning(f"Registration lost a race on email: {normalized}")
        raise DuplicateUserError() from e

    return user


async def verify_credentials(
    db: AsyncSession,
    *,
    email: str,
    password: str,
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> User | None:
    """
    Check a login attempt against the stored hash.

    Args:
        db: Database session
        email: Email address as entered
        password: Plaintext password as entered
        bcrypt_rounds: Cost factor for the comparison performed on unknown emails

    Returns:
        The User if the password matches, None if it does not

    Raises:
        UserNotFoundError: If no user has this email
    """
    user = await UserRepository.get_by_email(db, normalize_email(email))

    if user is None:
        verify_password(password, _dummy_hash(bcrypt_rounds))
        raise UserNotFoundError()

    if not verify_password(password, user.password_hash):
        return None

    return user


async def get_user(db: AsyncSession, user_id: int) -> User:
    """
    Get a user by ID.

    Raises:
        UserNotFoundError: If the user does not exist
    """
    user = await UserRepository.get_by_id(db, user_id)
    if user is None:
        raise UserNotFoundError()
    return user


async def list_users(db: AsyncSession) -> Sequence[User]:
    """All registered users."""
    return await UserRepository.list_all(db)
