"""
Users Router

Read-only user endpoints. Every route requires a valid bearer token.

Endpoints:
- GET /users - List all users
- GET /users/profile - Current user's profile
- GET /users/{user_id} - Get a user by ID
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import CurrentUser, get_current_user
from app.core.database import get_db
from app.core.errors import InternalError, UserGoneError
from app.modules.shared.schemas import AUTH_ERROR_RESPONSES, ErrorResponse, RecordId
from app.modules.users import service
from app.modules.users.schemas import UserListResponse, UserPublic, UserResponse
from app.modules.users.service import UserNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(
    dependencies=[Depends(get_current_user)],
    responses=AUTH_ERROR_RESPONSES,
)


@router.get("", response_model=UserListResponse, summary="List users")
async def list_users(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UserListResponse:
    """Return every registered user (password hashes excluded)."""
    try:
        users = await service.list_users(db)
    except SQLAlchemyError as e:
        logger.exception("Failed to list users")
        raise InternalError(error="Could not load users") from e

    return UserListResponse(
        message="Users retrieved successfully",
        users=[UserPublic.model_validate(user) for user in users],
        requested_by=current_user.email,
    )


@router.get("/profile", response_model=UserResponse, summary="Current user profile")
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Return the profile of the user the token belongs to."""
    try:
        user = await service.get_user(db, current_user.user_id)
    except UserNotFoundError as e:
        # Deleted between the auth check and this query
        raise UserGoneError() from e
    except SQLAlchemyError as e:
        logger.exception(f"Failed to load profile for user {current_user.user_id}")
        raise InternalError(error="Could not load profile") from e

    return UserResponse(
        message="Profile retrieved successfully",
        user=UserPublic.model_validate(user),
    )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(
    user_id: RecordId,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Return a single user by numeric ID."""
    try:
        user = await service.get_user(db, user_id)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to load user {user_id}")
        raise InternalError(error="Could not load user") from e

    return UserResponse(
        message="User retrieved successfully",
        user=UserPublic.model_validate(user),
    )
