"""
Shared module - Base model, schemas and repository used by every feature module.
"""

from app.modules.shared.helpers import changed_fields, normalize_email
from app.modules.shared.models import BaseModel, utc_now
from app.modules.shared.repository import CrudRepository
from app.modules.shared.schemas import (
    CamelModel,
    ErrorResponse,
    MessageResponse,
    NameStr,
    RecordId,
)

__all__ = [
    "BaseModel",
    "utc_now",
    "changed_fields",
    "normalize_email",
    "CrudRepository",
    "CamelModel",
    "ErrorResponse",
    "MessageResponse",
    "NameStr",
    "RecordId",
]
