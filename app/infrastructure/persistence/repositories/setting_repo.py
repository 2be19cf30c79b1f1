"""Site settings repository (key/value upserts)."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from app.infrastructure.persistence.models.setting import SiteSetting


class SettingRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> dict[str, str]:
        result = await self.db.execute(select(SiteSetting.key, SiteSetting.value))
        return dict(result.tuples().all())

    async def upsert_many(self, values: dict[str, str]) -> None:
        if not values:
            return
        stmt = insert(SiteSetting).values(
            [{"key": k, "value": v} for k, v in values.items()]
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[SiteSetting.key],
            set_={"value": stmt.excluded.value, "updated_at": func.now()},
        )
        await self.db.execute(stmt)

    async def delete_all(self) -> None:
        await self.db.execute(delete(SiteSetting))
