"""Course schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StringConstraints

from app.modules.shared import CamelModel
from app.modules.shared.schemas import MAX_RECORD_ID

CourseTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=200)]


class CourseCreate(CamelModel):
    """Request body for POST /courses."""

    title: CourseTitle
    description: str | None = None
    credits: int = Field(0, ge=0, le=30)
    teacher_id: int | None = Field(None, ge=1, le=MAX_RECORD_ID)


class CourseUpdate(CamelModel):
    """
    Request body for PUT /courses/{id}.

    Omitted fields are left unchanged; an explicit ``teacherId: null``
    unassigns the course.
    """

    title: CourseTitle | None = None
    description: str | None = None
    credits: int | None = Field(None, ge=0, le=30)
    teacher_id: int | None = Field(None, ge=1, le=MAX_RECORD_ID)


class CourseResponse(CamelModel):
    """Course as returned by the API."""

    id: int
    title: str
    description: str | None
    credits: int
    teacher_id: int | None
    created_at: datetime
    updated_at: datetime
