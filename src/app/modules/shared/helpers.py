"""
Shared Helpers

Small utilities used by more than one feature module.
"""

from typing import Any

from pydantic import BaseModel

from app.core.errors import ValidationError


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup (trimmed, lower-cased)."""
    return email.strip().lower()


def changed_fields(data: BaseModel, *, required: frozenset[str] = frozenset()) -> dict[str, Any]:
    """
    Fields explicitly sent in a partial-update body.

    Args:
        data: Parsed update schema
        required: Fields backed by NOT NULL columns; sending them as null is rejected

    Returns:
        Mapping of field name to new value

    Raises:
        ValidationError: If a required field was sent as null
    """
    values = data.model_dump(exclude_unset=True)
    nulled = sorted(field for field in required if field in values and values[field] is None)
    if nulled:
        raise ValidationError(error=f"Fields cannot be null: {', '.join(nulled)}")
    return values
