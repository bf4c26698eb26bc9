"""Base repository: generic primary-key lookup, upsert and delete for ORM models."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_orm_by_id, upsert and delete_orm.

    Subclasses map ORM rows to domain entities; callers above the
    infrastructure layer never see ORM objects.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_orm_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def upsert(self, obj: ModelType) -> ModelType:
        """Insert or update by primary key (merge) and flush."""
        merged = await self.db.merge(obj)
        await self.db.flush()
        return merged

    async def delete_orm(self, obj: ModelType) -> None:
        """Delete the record and flush."""
        await self.db.delete(obj)
        await self.db.flush()
