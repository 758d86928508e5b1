"""
Student Service Layer

Business rules for student records: unique, case-insensitive emails and
partial updates.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AppError, NotFoundError
from app.modules.shared import changed_fields, normalize_email
from app.modules.students.models import Student
from app.modules.students.repository import StudentRepository
from app.modules.students.schemas import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = frozenset({"name", "email"})


class StudentNotFoundError(NotFoundError):
    """Raised when a student does not exist."""

    def __init__(self):
        super().__init__("Student")


class DuplicateStudentError(AppError):
    """Raised when another student already uses the email."""

    def __init__(self):
        super().__init__(
            message="Student already exists with this email",
            error_code="DUPLICATE_STUDENT",
            status_code=400,
        )


async def list_students(db: AsyncSession) -> Sequence[Student]:
    return await StudentRepository.list_all(db)


async def get_student(db: AsyncSession, student_id: int) -> Student:
    student = await StudentRepository.get_by_id(db, student_id)
    if student is None:
        raise StudentNotFoundError()
    return student


async def _ensure_email_free(db: AsyncSession, email: str, student_id: int | None = None) -> None:
    existing = await StudentRepository.get_by_email(db, email)
    if existing is not None and existing.id != student_id:
        raise DuplicateStudentError()


async def create_student(db: AsyncSession, data: StudentCreate) -> Student:
    """
    Create a student.

    Raises:
        DuplicateStudentError: If the email is already used by another student
    """
    email = normalize_email(data.email)
    await _ensure_email_free(db, email)

    try:
        return await StudentRepository.create(
            db,
            name=data.name,
            email=email,
            grade_level=data.grade_level,
        )
    except IntegrityError as e:
        raise DuplicateStudentError() from e


async def update_student(db: AsyncSession, student_id: int, data: StudentUpdate) -> Student:
    """
    Apply a partial update to a student.

    Raises:
        StudentNotFoundError: If the student does not exist
        DuplicateStudentError: If the new email belongs to another student
        ValidationError: If name or email is sent as null
    """
    student = await get_student(db, student_id)
    values = changed_fields(data, required=REQUIRED_FIELDS)

    if "email" in values:
        values["email"] = normalize_email(values["email"])
        await _ensure_email_free(db, values["email"], student_id)

    try:
        return await StudentRepository.update(db, student, **values)
    except IntegrityError as e:
        raise DuplicateStudentError() from e


async def delete_student(db: AsyncSession, student_id: int) -> None:
    student = await get_student(db, student_id)
    await StudentRepository.delete(db, student)
