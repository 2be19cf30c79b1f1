"""Public blog API: article listing and article page."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_blog_repo, get_blog_service
from app.application.services.blog_service import BlogService
from app.infrastructure.persistence.repositories import BlogRepository
from app.schemas.blog import BlogResponse

router = APIRouter()


@router.get("", response_model=list[BlogResponse])
async def list_blogs(
    blog_repo: Annotated[BlogRepository, Depends(get_blog_repo)],
    category_id: str | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(12, ge=1, le=100),
):
    """Published articles, newest first."""
    items = await blog_repo.list_published(category_id=category_id, skip=skip, limit=limit)
    return [BlogResponse.model_validate(b) for b in items]


@router.get("/{slug}", response_model=BlogResponse)
async def get_blog(
    slug: str,
    blog_svc: Annotated[BlogService, Depends(get_blog_service)],
):
    """Published article by slug. Counts a view."""
    blog = await blog_svc.view_published(slug)
    return BlogResponse.model_validate(blog)
