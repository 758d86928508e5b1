"""
Teacher Repository

Database operations for teachers.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.shared import CrudRepository
from app.modules.teachers.models import Teacher


class TeacherRepository(CrudRepository[Teacher]):
    """Repository for teacher database operations."""

    model = Teacher

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Teacher | None:
        """Get a teacher by (normalised) email address."""
        result = await db.execute(select(Teacher).where(Teacher.email == email))
        return result.scalar_one_or_none()
