"""
Teachers Router

CRUD endpoints for teachers. Every route requires a valid bearer token.

Endpoints:
- GET /teachers - List teachers
- POST /teachers - Create a teacher
- GET /teachers/{teacher_id} - Get a teacher
- PUT /teachers/{teacher_id} - Update a teacher
- DELETE /teachers/{teacher_id} - Delete a teacher
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import CurrentUser, get_current_user
from app.core.database import get_db
from app.modules.shared import ErrorResponse, MessageResponse, RecordId
from app.modules.shared.schemas import AUTH_ERROR_RESPONSES
from app.modules.teachers import service
from app.modules.teachers.schemas import TeacherCreate, TeacherResponse, TeacherUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    dependencies=[Depends(get_current_user)],
    responses=AUTH_ERROR_RESPONSES,
)

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Teacher not found"}}


@router.get("", response_model=list[TeacherResponse], summary="List teachers")
async def list_teachers(db: AsyncSession = Depends(get_db)) -> list[TeacherResponse]:
    teachers = await service.list_teachers(db)
    return [TeacherResponse.model_validate(teacher) for teacher in teachers]


@router.post(
    "",
    response_model=TeacherResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create teacher",
    responses={400: {"model": ErrorResponse, "description": "Validation error or duplicate email"}},
)
async def create_teacher(
    data: TeacherCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> TeacherResponse:
    teacher = await service.create_teacher(db, data)
    logger.info(f"Teacher {teacher.id} created by user {current_user.user_id}")
    return TeacherResponse.model_validate(teacher)


@router.get(
    "/{teacher_id}",
    response_model=TeacherResponse,
    summary="Get teacher",
    responses=NOT_FOUND_RESPONSE,
)
async def get_teacher(teacher_id: RecordId, db: AsyncSession = Depends(get_db)) -> TeacherResponse:
    teacher = await service.get_teacher(db, teacher_id)
    return TeacherResponse.model_validate(teacher)


@router.put(
    "/{teacher_id}",
    response_model=TeacherResponse,
    summary="Update teacher",
    responses=NOT_FOUND_RESPONSE,
)
async def update_teacher(
    teacher_id: RecordId,
    data: TeacherUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> TeacherResponse:
    teacher = await service.update_teacher(db, teacher_id, data)
    logger.info(f"Teacher {teacher_id} updated by user {current_user.user_id}")
    return TeacherResponse.model_validate(teacher)


@router.delete(
    "/{teacher_id}",
    response_model=MessageResponse,
    summary="Delete teacher",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_teacher(
    teacher_id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await service.delete_teacher(db, teacher_id)
    logger.info(f"Teacher {teacher_id} deleted by user {current_user.user_id}")
    return MessageResponse(message="Teacher deleted successfully")
