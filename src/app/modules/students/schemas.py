"""Student schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from app.modules.shared import CamelModel, NameStr


class StudentCreate(CamelModel):
    """Request body for POST /students."""

    name: NameStr
    email: EmailStr
    grade_level: int | None = Field(None, ge=1, le=12)


class StudentUpdate(CamelModel):
    """Request body for PUT /students/{id}. Omitted fields are left unchanged."""

    name: NameStr | None = None
    email: EmailStr | None = None
    grade_level: int | None = Field(None, ge=1, le=12)


class StudentResponse(CamelModel):
    """Student as returned by the API."""

    id: int
    name: str
    email: str
    grade_level: int | None
    created_at: datetime
    updated_at: datetime
