"""
Course Repository

Database operations for courses.
"""

import logging

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.courses.models import Course
from app.modules.shared import CrudRepository

logger = logging.getLogger(__name__)


class CourseRepository(CrudRepository[Course]):
    """Repository for course database operations."""

    model = Course

    @staticmethod
    async def unassign_teacher(db: AsyncSession, teacher_id: int) -> None:
        """
        Detach a teacher from all of their courses.

        Mirrors the ON DELETE SET NULL foreign key for databases that do not
        enforce it (SQLite without PRAGMA foreign_keys).
        """
        await db.execute(
            update(Course).where(Course.teacher_id == teacher_id).values(teacher_id=None)
        )
        logger.info(f"Unassigned teacher {teacher_id} from their courses")
