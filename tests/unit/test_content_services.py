"""Blog, category, contact and site settings services with mocked repositories."""

from unittest.mock import AsyncMock

import pytest

from app.application.dtos.blog import BlogCreate
from app.application.dtos.category import CategoryResult
from app.application.services.blog_service import BlogService
from app.application.services.category_service import CategoryService
from app.application.services.contact_service import ContactService
from app.application.services.settings_service import DEFAULT_SETTINGS, SiteSettingsService
from app.domain.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)


def _category(id: str, sort_order: int) -> CategoryResult:
    return CategoryResult(
        id=id,
        name=id.title(),
        slug=id,
        icon=None,
        image_url=None,
        description=None,
        show_in_header=False,
        show_in_footer=False,
        show_in_showcase=False,
        show_in_featured=False,
        sort_order=sort_order,
    )


# ---- Blog ----


async def test_blog_content_is_sanitized_on_create() -> None:
    repo = AsyncMock()
    repo.slug_exists = AsyncMock(return_value=False)
    await BlogService(repo).create_blog(
        BlogCreate(
            title="Lighting Tips",
            content='<p onclick="x()">Hi<script>alert(1)</script></p>',
            status="draft",
        )
    )
    data, slug, published_at = repo.create.await_args.args
    assert slug == "lighting-tips"
    assert "<script>" not in data.content
    assert "onclick" not in data.content
    assert published_at is None


async def test_blog_explicit_slug_must_be_free() -> None:
    repo = AsyncMock()
    repo.slug_exists = AsyncMock(return_value=True)
    with pytest.raises(DuplicateResourceException):
        await BlogService(repo).create_blog(
            BlogCreate(title="Tips", content="<p>x</p>", status="draft", slug="tips")
        )


async def test_blog_invalid_slug_is_rejected() -> None:
    repo = AsyncMock()
    with pytest.raises(ValidationException):
        await BlogService(repo).create_blog(
            BlogCreate(title="Tips", content="x", status="draft", slug="Not A Slug")
        )


async def test_blog_view_missing_is_not_found() -> None:
    repo = AsyncMock()
    repo.get_published_by_slug = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException):
        await BlogService(repo).view_published("missing")
    repo.increment_view_count.assert_not_awaited()


# ---- Category ----


async def test_category_slug_defaults_from_name() -> None:
    repo = AsyncMock()
    repo.get_by_slug = AsyncMock(return_value=None)
    await CategoryService(repo).create_category("Product Shots", icon="box")
    assert repo.create.await_args.kwargs == {
        "name": "Product Shots",
        "icon": "box",
        "slug": "product-shots",
    }


async def test_category_duplicate_slug_is_rejected() -> None:
    repo = AsyncMock()
    repo.get_by_slug = AsyncMock(return_value=_category("anime", 0))
    with pytest.raises(DuplicateResourceException):
        await CategoryService(repo).create_category("Anime")


async def test_category_move_up_swaps_with_previous() -> None:
    repo = AsyncMock()
    repo.list_categories = AsyncMock(
        return_value=[_category("a", 0), _category("b", 1), _category("c", 2)]
    )
    await CategoryService(repo).move("b", "up")
    repo.swap_sort_order.assert_awaited_once_with("b", "a")


async def test_category_move_at_edge_is_a_noop() -> None:
    repo = AsyncMock()
    repo.list_categories = AsyncMock(return_value=[_category("a", 0), _category("b", 1)])
    result = await CategoryService(repo).move("b", "down")
    assert [c.id for c in result] == ["a", "b"]
    repo.swap_sort_order.assert_not_awaited()


async def test_category_move_unknown_is_not_found() -> None:
    repo = AsyncMock()
    repo.list_categories = AsyncMock(return_value=[])
    with pytest.raises(ResourceNotFoundException):
        await CategoryService(repo).move("x", "up")


# ---- Contact ----


async def test_contact_requires_name_and_message() -> None:
    repo = AsyncMock()
    with pytest.raises(ValidationException):
        await ContactService(repo).submit("  ", "a@b.co", None, "hello")
    repo.create.assert_not_awaited()


async def test_contact_marked_replied_gets_timestamp() -> None:
    repo = AsyncMock()
    await ContactService(repo).update_contact("c1", status="replied")
    assert repo.update.await_args.kwargs["replied_at"] is not None


async def test_contact_invalid_status() -> None:
    with pytest.raises(ValidationException):
        await ContactService(AsyncMock()).update_contact("c1", status="spam")


# ---- Site settings ----


async def test_settings_overlay_stored_values_on_defaults() -> None:
    repo = AsyncMock()
    repo.get_all = AsyncMock(return_value={"site_name": "Pixico Beta", "stale_key": "x"})
    settings = await SiteSettingsService(repo).get_settings()
    assert settings["site_name"] == "Pixico Beta"
    assert settings["contact_email"] == DEFAULT_SETTINGS["contact_email"]
    assert "stale_key" not in settings


async def test_settings_reject_unknown_keys() -> None:
    repo = AsyncMock()
    with pytest.raises(ValidationException):
        await SiteSettingsService(repo).update_settings({"favicon": "x"})
    repo.upsert_many.assert_not_awaited()


async def test_settings_reset_returns_defaults() -> None:
    repo = AsyncMock()
    assert await SiteSettingsService(repo).reset() == DEFAULT_SETTINGS
    repo.delete_all.assert_awaited_once()
