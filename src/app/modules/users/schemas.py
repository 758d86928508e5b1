"""User schemas."""

from datetime import datetime

from app.modules.shared import CamelModel


class UserSummary(CamelModel):
    """Public user fields returned at login."""

    id: int
    name: str
    email: str


class UserPublic(UserSummary):
    """Public user fields returned by registration and user queries."""

    created_at: datetime


class UserResponse(CamelModel):
    """Single user envelope."""

    message: str
    user: UserPublic


class UserListResponse(CamelModel):
    """User list envelope."""

    message: str
    users: list[UserPublic]
    requested_by: str
