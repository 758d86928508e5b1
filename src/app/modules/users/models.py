"""
User Models

Database model for user accounts and authentication.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.shared import BaseModel


class User(BaseModel):
    """
    User model for authentication.

    The password is stored only as a bcrypt hash and is never returned by
    any endpoint. Email addresses are stored lower-cased and are unique.
    """

    __tablename__ = "users"

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
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
