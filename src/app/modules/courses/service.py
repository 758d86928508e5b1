"""
Course Service Layer

Business rules for courses: an assigned teacher must exist.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AppError, NotFoundError
from app.modules.courses.models import Course
from app.modules.courses.repository import CourseRepository
from app.modules.courses.schemas import CourseCreate, CourseUpdate
from app.modules.shared import changed_fields
from app.modules.teachers.repository import TeacherRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = frozenset({"title", "credits"})


class CourseNotFoundError(NotFoundError):
    """Raised when a course does not exist."""

    def __init__(self):
        super().__init__("Course")


class UnknownTeacherError(AppError):
    """Raised when a course is assigned to a teacher that does not exist."""

    def __init__(self, teacher_id: int):
        super().__init__(
            message="Teacher not found",
            error_code="UNKNOWN_TEACHER",
            status_code=400,
            error=f"No teacher with id {teacher_id}",
        )


async def list_courses(db: AsyncSession) -> Sequence[Course]:
    return await CourseRepository.list_all(db)


async def get_course(db: AsyncSession, course_id: int) -> Course:
    course = await CourseRepository.get_by_id(db, course_id)
    if course is None:
        raise CourseNotFoundError()
    return course


async def _ensure_teacher_exists(db: AsyncSession, teacher_id: int | None) -> None:
    if teacher_id is None:
        return
    if await TeacherRepository.get_by_id(db, teacher_id) is None:
        raise UnknownTeacherError(teacher_id)


async def create_course(db: AsyncSession, data: CourseCreate) -> Course:
    """
    Create a course.

    Raises:
        UnknownTeacherError: If ``teacher_id`` does not reference a teacher
    """
    await _ensure_teacher_exists(db, data.teacher_id)

    return await CourseRepository.create(
        db,
        title=data.title,
        description=data.description,
        credits=data.credits,
        teacher_id=data.teacher_id,
    )


async def update_course(db: AsyncSession, course_id: int, data: CourseUpdate) -> Course:
    """
    Apply a partial update to a course.

    Raises:
        CourseNotFoundError: If the course does not exist
        UnknownTeacherError: If the new ``teacher_id`` does not reference a teacher
        ValidationError: If title or credits is sent as null
    """
    course = await get_course(db, course_id)
    values = changed_fields(data, required=REQUIRED_FIELDS)

    if "teacher_id" in values:
        await _ensure_teacher_exists(db, values["teacher_id"])

    return await CourseRepository.update(db, course, **values)


async def delete_course(db: AsyncSession, course_id: int) -> None:
    course = await get_course(db, course_id)
    await CourseRepository.delete(db, course)
