"""
Students Router

CRUD endpoints for students. Every route requires a valid bearer token.

Endpoints:
- GET /students - List students
- POST /students - Create a student
- GET /students/{student_id} - Get a student
- PUT /students/{student_id} - Update a student
- DELETE /students/{student_id} - Delete a student
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import CurrentUser, get_current_user
from app.core.database import get_db
from app.modules.shared import ErrorResponse, MessageResponse, RecordId
from app.modules.shared.schemas import AUTH_ERROR_RESPONSES
from app.modules.students import service
from app.modules.students.schemas import StudentCreate, StudentResponse, StudentUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    dependencies=[Depends(get_current_user)],
    responses=AUTH_ERROR_RESPONSES,
)

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Student not found"}}


@router.get("", response_model=list[StudentResponse], summary="List students")
async def list_students(db: AsyncSession = Depends(get_db)) -> list[StudentResponse]:
    students = await service.list_students(db)
    return [StudentResponse.model_validate(student) for student in students]


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create student",
    responses={400: {"model": ErrorResponse, "description": "Validation error or duplicate email"}},
)
async def create_student(
    data: StudentCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> StudentResponse:
    student = await service.create_student(db, data)
    logger.info(f"Student {student.id} created by user {current_user.user_id}")
    return StudentResponse.model_validate(student)


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Get student",
    responses=NOT_FOUND_RESPONSE,
)
async def get_student(student_id: RecordId, db: AsyncSession = Depends(get_db)) -> StudentResponse:
    student = await service.get_student(db, student_id)
    return StudentResponse.model_validate(student)


@router.put(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Update student",
    responses=NOT_FOUND_RESPONSE,
)
async def update_student(
    student_id: RecordId,
    data: StudentUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> StudentResponse:
    student = await service.update_student(db, student_id, data)
    logger.info(f"Student {student_id} updated by user {current_user.user_id}")
    return StudentResponse.model_validate(student)


@router.delete(
    "/{student_id}",
    response_model=MessageResponse,
    summary="Delete student",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_student(
    student_id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await service.delete_student(db, student_id)
    logger.info(f"Student {student_id} deleted by user {current_user.user_id}")
    return MessageResponse(message="Student deleted successfully")
