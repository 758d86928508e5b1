"""
Teacher Models

Database model for teaching staff.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.shared import BaseModel


class Teacher(BaseModel):
    """A teacher record. Email addresses are unique across teachers."""

    __tablename__ = "teachers"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    subject: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Teacher(id={self.id}, email={self.email})>"
