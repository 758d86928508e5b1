"""
Shared CRUD Repository

Generic database operations for the simple school records (students,
teachers, courses). Feature repositories subclass ``CrudRepository`` and set
``model``.
"""

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.shared.models import BaseModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class CrudRepository(Generic[ModelT]):
    """Repository for create/read/update/delete on a single model."""

    model: ClassVar[type[BaseModel]]

    @classmethod
    async def create(cls, db: AsyncSession, **values: Any) -> ModelT:
        """
        Create a new record.

        Args:
            db: Database session
            **values: Column values

        Returns:
            Created instance (flushed, so ``id`` is populated)
        """
        instance = cls.model(**values)
        db.add(instance)
        await db.flush()
        await db.refresh(instance)

        logger.info(f"Created {cls.model.__tablename__} record {instance.id}")
        return instance  # type: ignore[return-value]

    @classmethod
    async def get_by_id(cls, db: AsyncSession, record_id: int) -> ModelT | None:
        """Get a record by ID, or None if not found."""
        result = await db.execute(select(cls.model).where(cls.model.id == record_id))
        return result.scalar_one_or_none()  # type: ignore[return-value]

    @classmethod
    async def list_all(cls, db: AsyncSession) -> Sequence[ModelT]:
        """All records ordered by ID."""
        result = await db.execute(select(cls.model).order_by(cls.model.id))
        return result.scalars().all()  # type: ignore[return-value]

    @classmethod
    async def update(cls, db: AsyncSession, instance: ModelT, **values: Any) -> ModelT:
        """Apply the given column values to an existing record."""
        for field, value in values.items():
            setattr(instance, field, value)

        await db.flush()
        await db.refresh(instance)

        logger.info(f"Updated {cls.model.__tablename__} record {instance.id}")
        return instance

    @classmethod
    async def delete(cls, db: AsyncSession, instance: ModelT) -> None:
        """Delete a record."""
        record_id = instance.id
        await db.delete(instance)
        await db.flush()

        logger.info(f"Deleted {cls.model.__tablename__} record {record_id}")
