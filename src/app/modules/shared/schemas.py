"""Shared Pydantic schemas."""

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# Integer primary keys are 32-bit on every supported database
MAX_RECORD_ID = 2**31 - 1

RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]

# Whitespace is stripped before the length check
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]


class CamelModel(BaseModel):
    """
    Base schema serialised with camelCase keys.

    Request bodies accept both camelCase and snake_case field names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    message: str
    code: str
    error: str | None = None


# Documented on protected routers
AUTH_ERROR_RESPONSES: dict[int | str, dict] = {
    401: {"model": ErrorResponse, "description": "Missing token or user no longer exists"},
    403: {"model": ErrorResponse, "description": "Token expired or invalid"},
    500: {"model": ErrorResponse, "description": "Server error"},
}
