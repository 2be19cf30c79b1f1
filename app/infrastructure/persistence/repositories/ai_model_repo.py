"""AI model reference data repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.ai_model import AiModelResult
from app.infrastructure.persistence.models.ai_model import AiModel
from app.infrastructure.persistence.repositories.base import BaseRepository


def _model_to_result(m: AiModel) -> AiModelResult:
    return AiModelResult(id=m.id, name=m.name, version=m.version)


class AiModelRepository(BaseRepository[AiModel]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, AiModel)

    async def list_models(self) -> list[AiModelResult]:
        result = await self.db.execute(select(AiModel).order_by(AiModel.name))
        return [_model_to_result(m) for m in result.scalars().all()]

    async def create(self, name: str, version: str | None = None) -> AiModelResult:
        return _model_to_result(await self._add(AiModel(name=name, version=version)))
