"""
Teacher Service Layer

Business rules for teacher records. Deleting a teacher leaves their courses
in place without a teacher.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AppError, NotFoundError
from app.modules.courses.repository import CourseRepository
from app.modules.shared import changed_fields, normalize_email
from app.modules.teachers.models import Teacher
from app.modules.teachers.repository import TeacherRepository
from app.modules.teachers.schemas import TeacherCreate, TeacherUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = frozenset({"name", "email"})


class TeacherNotFoundError(NotFoundError):
    """Raised when a teacher does not exist."""

    def __init__(self):
        super().__init__("Teacher")


class DuplicateTeacherError(AppError):
    """Raised when another teacher already uses the email."""

    def __init__(self):
        super().__init__(
            message="Teacher already exists with this email",
            error_code="DUPLICATE_TEACHER",
            status_code=400,
        )


async def list_teachers(db: AsyncSession) -> Sequence[Teacher]:
    return await TeacherRepository.list_all(db)


async def get_teacher(db: AsyncSession, teacher_id: int) -> Teacher:
    teacher = await TeacherRepository.get_by_id(db, teacher_id)
    if teacher is None:
        raise TeacherNotFoundError()
    return teacher


async def _ensure_email_free(db: AsyncSession, email: str, teacher_id: int | None = None) -> None:
    existing = await TeacherRepository.get_by_email(db, email)
    if existing is not None and existing.id != teacher_id:
        raise DuplicateTeacherError()


async def create_teacher(db: AsyncSession, data: TeacherCreate) -> Teacher:
    """
    Create a teacher.

    Raises:
        DuplicateTeacherError: If the email is already used by another teacher
    """
    email = normalize_email(data.email)
    await _ensure_email_free(db, email)

    try:
        return await TeacherRepository.create(
            db,
            name=data.name,
            email=email,
            subject=data.subject,
        )
    except IntegrityError as e:
        raise DuplicateTeacherError() from e


async def update_teacher(db: AsyncSession, teacher_id: int, data: TeacherUpdate) -> Teacher:
    """
    Apply a partial update to a teacher.

    Raises:
        TeacherNotFoundError: If the teacher does not exist
        DuplicateTeacherError: If the new email belongs to another teacher
        ValidationError: If name or email is sent as null
    """
    teacher = await get_teacher(db, teacher_id)
    values = changed_fields(data, required=REQUIRED_FIELDS)

    if "email" in values:
        values["email"] = normalize_email(values["email"])
        await _ensure_email_free(db, values["email"], teacher_id)

    try:
        return await TeacherRepository.update(db, teacher, **values)
    except IntegrityError as e:
        raise DuplicateTeacherError() from e


async def delete_teacher(db: AsyncSession, teacher_id: int) -> None:
    """Delete a teacher and unassign them from their courses."""
    teacher = await get_teacher(db, teacher_id)
    await CourseRepository.unassign_teacher(db, teacher_id)
    await TeacherRepository.delete(db, teacher)
