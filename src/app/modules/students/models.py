"""
Student Models

Database model for enrolled students.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.shared import BaseModel


class Student(BaseModel):
    """A student record. Email addresses are unique across students."""

    __tablename__ = "students"

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
    grade_level: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, email={self.email})>"
