"""Category configuration: placement flags and manual ordering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from app.application.dtos.category import CategoryResult
from app.domain.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects import Slug, slugify

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ICategoryRepository


class CategoryService:
    def __init__(self, category_repo: "ICategoryRepository") -> None:
        self.category_repo = category_repo

    async def _checked_slug(self, slug: str, exclude_id: str | None = None) -> str:
        try:
            value = Slug(slug).value
        except ValueError as e:
            raise ValidationException(str(e), field="slug") from e
        other = await self.category_repo.get_by_slug(value)
        if other is not None and other.id != exclude_id:
            raise DuplicateResourceException("category", "slug", value)
        return value

    async def create_category(self, name: str, **fields: Any) -> CategoryResult:
        if not name.strip():
            raise ValidationException("Name is required", field="name")
        fields["slug"] = await self._checked_slug(fields.get("slug") or slugify(name))
        return await self.category_repo.create(name=name.strip(), **fields)

    async def update_category(self, category_id: str, **fields: Any) -> CategoryResult:
        if fields.get("slug"):
            fields["slug"] = await self._checked_slug(fields["slug"], category_id)
        updated = await self.category_repo.update(category_id, **fields)
        if updated is None:
            raise ResourceNotFoundException("category", category_id)
        return updated

    async def delete_category(self, category_id: str) -> None:
        if not await self.category_repo.delete(category_id):
            raise ResourceNotFoundException("category", category_id)

    async def get_by_slug(self, slug: str) -> CategoryResult:
        category = await self.category_repo.get_by_slug(slug)
        if category is None:
            raise ResourceNotFoundException("category", slug)
        return category

    async def move(
        self, category_id: str, direction: Literal["up", "down"]
    ) -> list[CategoryResult]:
        """Swap sort_order with the previous/next category. No-op at either end."""
        categories = await self.category_repo.list_categories()
        index = next((i for i, c in enumerate(categories) if c.id == category_id), None)
        if index is None:
            raise ResourceNotFoundException("category", category_id)
        target = index - 1 if direction == "up" else index + 1
        if 0 <= target < len(categories):
            await self.category_repo.swap_sort_order(category_id, categories[target].id)
            return await self.category_repo.list_categories()
        return categories
