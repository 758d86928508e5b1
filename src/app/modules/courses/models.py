"""
Course Models

Database model for courses, optionally taught by a teacher.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.shared import BaseModel


class Course(BaseModel):
    """
    A course offered by the school.

    ON DELETE SET NULL: deleting a teacher leaves their courses unassigned.
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    credits: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )
    teacher_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("teachers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Course(id={self.id}, title={self.title})>"
