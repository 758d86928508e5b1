"""
User Repository

Database operations for user accounts.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.users.models import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user database operations."""

    @staticmethod
    async def create(
        db: AsyncSession,
        *,
        name: str,
        email: str,
        password_hash: str,
    ) -> User:
        """
        Create a new user record.

        Args:
            db: Database session
            name: Display name
            email: Normalised email address (unique)
            password_hash: bcrypt hash of the password

        Returns:
            Created User instance

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already taken
        """
        user = User(
            name=name,
            email=email,
            password_hash=password_hash,
        )

        db.add(user)
        await db.flush()
        await db.refresh(user)

        logger.info(f"Created user: {user.id} - {user.email}")
        return user

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: int) -> User | None:
        """
        Get a user by ID.

        Args:
            db: Database session
            user_id: User ID

        Returns:
            User instance or None if not found
        """
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> User | None:
        """
        Get a user by email address.

        Args:
            db: Database session
            email: Normalised email address

        Returns:
            User instance or None if not found
        """
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    @staticmethod
    async def email_exists(db: AsyncSession, email: str) -> bool:
        """Check if an email address is already registered."""
        user = await UserRepository.get_by_email(db, email)
        return user is not None

    @staticmethod
    async def list_all(db: AsyncSession) -> Sequence[User]:
        """All users ordered by ID."""
        result = await db.execute(select(User).order_by(User.id))
        return result.scalars().all()
