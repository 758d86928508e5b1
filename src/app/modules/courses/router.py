"""
Courses Router

CRUD endpoints for courses. Every route requires a valid bearer token.

Endpoints:
- GET /courses - List courses
- POST /courses - Create a course
- GET /courses/{course_id} - Get a course
- PUT /courses/{course_id} - Update a course
- DELETE /courses/{course_id} - Delete a course
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import CurrentUser, get_current_user
from app.core.database import get_db
from app.modules.courses import service
from app.modules.courses.schemas import CourseCreate, CourseResponse, CourseUpdate
from app.modules.shared import ErrorResponse, MessageResponse, RecordId
from app.modules.shared.schemas import AUTH_ERROR_RESPONSES

logger = logging.getLogger(__name__)

router = APIRouter(
    dependencies=[Depends(get_current_user)],
    responses=AUTH_ERROR_RESPONSES,
)

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Course not found"}}


@router.get("", response_model=list[CourseResponse], summary="List courses")
async def list_courses(db: AsyncSession = Depends(get_db)) -> list[CourseResponse]:
    courses = await service.list_courses(db)
    return [CourseResponse.model_validate(course) for course in courses]


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
    responses={400: {"model": ErrorResponse, "description": "Validation error or unknown teacher"}},
)
async def create_course(
    data: CourseCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> CourseResponse:
    course = await service.create_course(db, data)
    logger.info(f"Course {course.id} created by user {current_user.user_id}")
    return CourseResponse.model_validate(course)


@router.get(
    "/{course_id}",
    response_model=CourseResponse,
    summary="Get course",
    responses=NOT_FOUND_RESPONSE,
)
async def get_course(course_id: RecordId, db: AsyncSession = Depends(get_db)) -> CourseResponse:
    course = await service.get_course(db, course_id)
    return CourseResponse.model_validate(course)


@router.put(
    "/{course_id}",
    response_model=CourseResponse,
    summary="Update course",
    responses=NOT_FOUND_RESPONSE,
)
async def update_course(
    course_id: RecordId,
    data: CourseUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> CourseResponse:
    course = await service.update_course(db, course_id, data)
    logger.info(f"Course {course_id} updated by user {current_user.user_id}")
    return CourseResponse.model_validate(course)


@router.delete(
    "/{course_id}",
    response_model=MessageResponse,
    summary="Delete course",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_course(
    course_id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await service.delete_course(db, course_id)
    logger.info(f"Course {course_id} deleted by user {current_user.user_id}")
    return MessageResponse(message="Course deleted successfully")
