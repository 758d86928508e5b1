"""
Authentication Router

Public endpoints for creating accounts and obtaining access tokens.

Endpoints:
- POST /auth/register - Create a user account
- POST /auth/login - Exchange email and password for a JWT
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_token_service
from app.core.config import Settings
from app.core.database import get_db
from app.core.errors import InternalError, InvalidCredentialsError
from app.core.security import TokenService
from app.modules.auth.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.modules.shared.schemas import ErrorResponse
from app.modules.users import service as user_service
from app.modules.users.schemas import UserPublic, UserSummary
from app.modules.users.service import UserNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        400: {"model": ErrorResponse, "description": "User already exists or validation error"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def register(
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> RegisterResponse:
    """
    Create a user account.

    The password is bcrypt-hashed before storage and never returned.

    Raises:
        DuplicateUserError 400: Email already registered
        InternalError 500: Database failure
    """
    try:
        user = await user_service.register_user(
            db,
            name=data.name,
            email=data.email,
            password=data.password,
            bcrypt_rounds=settings.bcrypt_rounds,
        )
    except SQLAlchemyError as e:
        logger.exception("Registration failed")
        raise InternalError(error="Could not create user") from e

    logger.info(f"User registered: {user.id} - {user.email}")

    return RegisterResponse(
        message="User registered successfully",
        user=UserPublic.model_validate(user),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login user",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid credentials"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    token_service: TokenService = Depends(get_token_service),
) -> LoginResponse:
    """
    Authenticate a user and return a JWT valid for 24 hours.

    Unknown emails and wrong passwords produce the same response.

    Raises:
        InvalidCredentialsError 400: Email not registered or password wrong
        InternalError 500: Database failure
    """
    try:
        user = await user_service.verify_credentials(
            db,
            email=credentials.email,
            password=credentials.password,
            bcrypt_rounds=settings.bcrypt_rounds,
        )
    except UserNotFoundError as e:
        logger.warning(f"Login attempt for non-existent email: {credentials.email}")
        raise InvalidCredentialsError() from e
    except SQLAlchemyError as e:
        logger.exception("Login lookup failed")
        raise InternalError(error="Could not verify credentials") from e

    if user is None:
        logger.warning(f"Invalid password for user: {credentials.email}")
        raise InvalidCredentialsError()

    token = token_service.issue(user.id, user.email)

    logger.info(f"User logged in: {user.email}")

    return LoginResponse(
        message="Login successful",
        token=token,
        user=UserSummary.model_validate(user),
    )
