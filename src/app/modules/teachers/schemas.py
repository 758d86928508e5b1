"""Teacher schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from app.modules.shared import CamelModel, NameStr


class TeacherCreate(CamelModel):
    """Request body for POST /teachers."""

    name: NameStr
    email: EmailStr
    subject: str | None = Field(None, max_length=100)


class TeacherUpdate(CamelModel):
    """Request body for PUT /teachers/{id}. Omitted fields are left unchanged."""

    name: NameStr | None = None
    email: EmailStr | None = None
    subject: str | None = Field(None, max_length=100)


class TeacherResponse(CamelModel):
    """Teacher as returned by the API."""

    id: int
    name: str
    email: str
    subject: str | None
    created_at: datetime
    updated_at: datetime
