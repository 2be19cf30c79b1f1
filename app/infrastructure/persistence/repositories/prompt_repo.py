"""Prompt repository. Interface methods return application DTOs."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.prompt import PromptCreate, PromptResult
from app.application.dtos.search import ContentSummary
from app.domain.enums import ContentStatus
from app.infrastructure.persistence.models.category import Category
from app.infrastructure.persistence.models.prompt import Prompt
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.search_repo import (
    published_prompts_stmt,
    published_slug_by_code_stmt,
    rows_to_summaries,
)


def _prompt_to_result(p: Prompt) -> PromptResult:
    return PromptResult(
        id=p.id,
        title=p.title,
        slug=p.slug,
        prompt_code=p.prompt_code,
        prompt_text=p.prompt_text,
        description=p.description,
        image_url=p.image_url,
        image_alt=p.image_alt,
        category_id=p.category_id,
        model_id=p.model_id,
        model_name=p.ai_model.name if p.ai_model is not None else None,
        aspect_ratio=p.aspect_ratio,
        style=p.style,
        status=p.status,
        view_count=p.view_count,
        like_count=p.like_count,
        meta_title=p.meta_title,
        meta_description=p.meta_description,
        meta_keywords=list(p.meta_keywords) if p.meta_keywords is not None else None,
        created_by=p.created_by,
        published_at=p.published_at,
        created_at=p.created_at,
        updated_at=p.updated_at,
    )


class PromptRepository(BaseRepository[Prompt]):
    """Prompt persistence. Public reads always filter on status 'published'."""

    UPDATABLE_FIELDS = frozenset(
        {
            "title", "slug", "prompt_text", "description", "image_url", "image_alt",
            "category_id", "model_id", "aspect_ratio", "style", "status",
            "meta_title", "meta_description", "meta_keywords", "published_at",
        }
    )

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Prompt)

    async def find_published(
        self, pattern: str, limit: int, order_by_popularity: bool = False
    ) -> list[ContentSummary]:
        result = await self.db.execute(
            published_prompts_stmt(pattern, limit, order_by_popularity)
        )
        return rows_to_summaries(result.mappings().all())

    async def get_published_slug_by_code(self, code: str) -> str | None:
        result = await self.db.execute(published_slug_by_code_stmt(code))
        return result.scalar_one_or_none()

    async def get_by_id(self, prompt_id: str) -> PromptResult | None:
        prompt = await self._get(prompt_id)
        return _prompt_to_result(prompt) if prompt else None

    async def get_published_by_slug(self, slug: str) -> PromptResult | None:
        result = await self.db.execute(
            select(Prompt).where(
                Prompt.slug == slug, Prompt.status == ContentStatus.PUBLISHED.value
            )
        )
        prompt = result.scalar_one_or_none()
        return _prompt_to_result(prompt) if prompt else None

    async def list_published(
        self,
        *,
        category_slug: str | None = None,
        model_id: str | None = None,
        popular: bool = False,
        skip: int = 0,
        limit: int = 24,
    ) -> list[PromptResult]:
        stmt = select(Prompt).where(Prompt.status == ContentStatus.PUBLISHED.value)
        if category_slug:
            stmt = stmt.join(Category, Prompt.category_id == Category.id).where(
                Category.slug == category_slug
            )
        if model_id:
            stmt = stmt.where(Prompt.model_id == model_id)
        if popular:
            stmt = stmt.order_by(Prompt.view_count.desc(), Prompt.published_at.desc())
        else:
            stmt = stmt.order_by(Prompt.published_at.desc().nulls_last(), Prompt.created_at.desc())
        result = await self.db.execute(stmt.offset(skip).limit(limit))
        return [_prompt_to_result(p) for p in result.scalars().all()]

    async def list_all(
        self, *, status: str | None = None, skip: int = 0, limit: int = 20
    ) -> tuple[list[PromptResult], int]:
        stmt = select(Prompt)
        criteria = [Prompt.status == status] if status else []
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(
            stmt.order_by(Prompt.created_at.desc()).offset(skip).limit(limit)
        )
        items = [_prompt_to_result(p) for p in result.scalars().all()]
        return items, await self._count(*criteria)

    async def slug_exists(self, slug: str, exclude_id: str | None = None) -> bool:
        criteria = [Prompt.slug == slug]
        if exclude_id:
            criteria.append(Prompt.id != exclude_id)
        return bool((await self.db.execute(select(exists().where(*criteria)))).scalar())

    async def code_exists(self, code: str) -> bool:
        result = await self.db.execute(select(exists().where(Prompt.prompt_code == code)))
        return bool(result.scalar())

    async def create(
        self,
        data: PromptCreate,
        slug: str,
        prompt_code: str,
        published_at: datetime | None,
    ) -> PromptResult:
        prompt = Prompt(
            title=data.title,
            slug=slug,
            prompt_code=prompt_code,
            prompt_text=data.prompt_text,
            description=data.description,
            image_url=data.image_url,
            image_alt=data.image_alt,
            category_id=data.category_id,
            model_id=data.model_id,
            aspect_ratio=data.aspect_ratio,
            style=data.style,
            status=data.status,
            meta_title=data.meta_title,
            meta_description=data.meta_description,
            meta_keywords=data.meta_keywords,
            created_by=data.created_by,
            published_at=published_at,
        )
        return _prompt_to_result(await self._add(prompt))

    async def update(self, prompt_id: str, **fields: Any) -> PromptResult | None:
        prompt = await self.update_fields(prompt_id, **fields)
        return _prompt_to_result(prompt) if prompt else None

    async def delete(self, prompt_id: str) -> bool:
        return await self.delete_by_id(prompt_id)

    async def increment_view_count(self, prompt_id: str) -> None:
        await self.db.execute(
            update(Prompt)
            .where(Prompt.id == prompt_id)
            .values(view_count=Prompt.view_count + 1)
        )

    async def increment_like_count(self, prompt_id: str) -> int:
        result = await self.db.execute(
            update(Prompt)
            .where(Prompt.id == prompt_id)
            .values(like_count=Prompt.like_count + 1)
            .returning(Prompt.like_count)
        )
        return int(result.scalar_one())

    async def count(self, status: str | None = None) -> int:
        if status:
            return await self._count(Prompt.status == status)
        return await self._count()
