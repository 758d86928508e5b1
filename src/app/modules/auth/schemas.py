"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.modules.users.schemas import UserPublic, UserSummary


class RegisterRequest(BaseModel):
    """Registration request schema."""

    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if len(value.strip()) < 2:
            raise ValueError("Name must contain at least 2 non-blank characters")
        return value

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only considers the first 72 bytes
        if len(value.encode()) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterResponse(BaseModel):
    """Registration response schema."""

    message: str
    user: UserPublic


class LoginResponse(BaseModel):
    """Login response schema."""

    message: str
    token: str
    user: UserSummary
