"""Category repository. Ordered by sort_order everywhere."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.category import CategoryResult
from app.domain.enums import ContentStatus
from app.infrastructure.persistence.models.category import Category
from app.infrastructure.persistence.models.prompt import Prompt
from app.infrastructure.persistence.repositories.base import BaseRepository


def _category_to_result(c: Category, prompt_count: int | None = None) -> CategoryResult:
    return CategoryResult(
        id=c.id,
        name=c.name,
        slug=c.slug,
        icon=c.icon,
        image_url=c.image_url,
        description=c.description,
        show_in_header=c.show_in_header,
        show_in_footer=c.show_in_footer,
        show_in_showcase=c.show_in_showcase,
        show_in_featured=c.show_in_featured,
        sort_order=c.sort_order,
        prompt_count=prompt_count,
    )


class CategoryRepository(BaseRepository[Category]):
    UPDATABLE_FIELDS = frozenset(
        {
            "name", "slug", "icon", "image_url", "description", "show_in_header",
            "show_in_footer", "show_in_showcase", "show_in_featured", "sort_order",
        }
    )

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Category)

    async def get_by_id(self, category_id: str) -> CategoryResult | None:
        category = await self._get(category_id)
        return _category_to_result(category) if category else None

    async def get_by_slug(self, slug: str) -> CategoryResult | None:
        result = await self.db.execute(select(Category).where(Category.slug == slug))
        category = result.scalar_one_or_none()
        return _category_to_result(category) if category else None

    async def list_categories(
        self,
        *,
        header: bool | None = None,
        footer: bool | None = None,
        showcase: bool | None = None,
        featured: bool | None = None,
        limit: int | None = None,
        with_counts: bool = False,
    ) -> list[CategoryResult]:
        stmt = select(Category)
        for column, wanted in (
            (Category.show_in_header, header),
            (Category.show_in_footer, footer),
            (Category.show_in_showcase, showcase),
            (Category.show_in_featured, featured),
        ):
            if wanted is not None:
                stmt = stmt.where(column.is_(wanted))
        stmt = stmt.order_by(Category.sort_order, Category.name)
        if limit is not None:
            stmt = stmt.limit(limit)
        categories = list((await self.db.execute(stmt)).scalars().all())
        if not with_counts:
            return [_category_to_result(c) for c in categories]
        counts_stmt = (
            select(Prompt.category_id, func.count())
            .where(Prompt.status == ContentStatus.PUBLISHED.value)
            .group_by(Prompt.category_id)
        )
        counts = dict((await self.db.execute(counts_stmt)).tuples().all())
        return [_category_to_result(c, counts.get(c.id, 0)) for c in categories]

    async def create(self, **fields: Any) -> CategoryResult:
        """Insert at the end of the current ordering unless sort_order is given."""
        if fields.get("sort_order") is None:
            max_order = await self.db.execute(select(func.max(Category.sort_order)))
            current = max_order.scalar()
            fields["sort_order"] = (current if current is not None else -1) + 1
        return _category_to_result(await self._add(Category(**fields)))

    async def update(self, category_id: str, **fields: Any) -> CategoryResult | None:
        category = await self.update_fields(category_id, **fields)
        return _category_to_result(category) if category else None

    async def delete(self, category_id: str) -> bool:
        return await self.delete_by_id(category_id)

    async def swap_sort_order(self, first_id: str, second_id: str) -> None:
        first = await self._get(first_id)
        second = await self._get(second_id)
        if first is None or second is None:
            return
        first.sort_order, second.sort_order = second.sort_order, first.sort_order
        await self.db.flush()

    async def count(self) -> int:
        return await self._count()
