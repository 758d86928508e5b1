"""
Student Repository

Database operations for students.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.shared import CrudRepository
from app.modules.students.models import Student


class StudentRepository(CrudRepository[Student]):
    """Repository for student database operations."""

    model = Student

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Student | None:
        """Get a student by (normalised) email address."""
        result = await db.execute(select(Student).where(Student.email == email))
        return result.scalar_one_or_none()
