"""Base repository: generic lookups, partial updates and deletes by id."""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic helpers over one ORM model. Subclasses map rows to application DTOs.

    Subclasses list the columns callers may change in UPDATABLE_FIELDS; other
    keys passed to update_fields() raise ValueError.
    """

    UPDATABLE_FIELDS: frozenset[str] = frozenset()

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _add(self, obj: ModelType) -> ModelType:
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update_fields(self, entity_id: str, **fields: Any) -> ModelType | None:
        """Set the given columns on the row; None if it does not exist."""
        unknown = set(fields) - self.UPDATABLE_FIELDS
        if unknown:
            raise ValueError(
                f"Cannot update {self.model.__name__} field(s): {', '.join(sorted(unknown))}"
            )
        obj = await self._get(entity_id)
        if obj is None:
            return None
        for key, value in fields.items():
            setattr(obj, key, value)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete_by_id(self, entity_id: str) -> bool:
        model: Any = self.model
        result = await self.db.execute(delete(self.model).where(model.id == entity_id))
        return bool(result.rowcount)

    async def _count(self, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())
