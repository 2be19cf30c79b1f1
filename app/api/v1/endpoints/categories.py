"""Public catalogue API: categories and AI models."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_ai_model_repo, get_category_repo
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.repositories import (
    AiModelRepository,
    CategoryRepository,
)
from app.schemas.category import AiModelResponse, CategoryResponse

router = APIRouter()


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(
    category_repo: Annotated[CategoryRepository, Depends(get_category_repo)],
    header: bool | None = Query(None, description="Only categories shown in the header"),
    footer: bool | None = Query(None),
    showcase: bool | None = Query(None),
    featured: bool | None = Query(None),
    limit: int | None = Query(None, ge=1, le=100),
    with_counts: bool = Query(False, description="Include published prompt counts"),
):
    """Categories in display order, optionally filtered by placement."""
    items = await category_repo.list_categories(
        header=header,
        footer=footer,
        showcase=showcase,
        featured=featured,
        limit=limit,
        with_counts=with_counts,
    )
    return [CategoryResponse.model_validate(c) for c in items]


@router.get("/categories/{slug}", response_model=CategoryResponse)
async def get_category(
    slug: str,
    category_repo: Annotated[CategoryRepository, Depends(get_category_repo)],
):
    category = await category_repo.get_by_slug(slug)
    if category is None:
        raise ResourceNotFoundException("category", slug)
    return CategoryResponse.model_validate(category)


@router.get("/ai-models", response_model=list[AiModelResponse])
async def list_ai_models(
    ai_model_repo: Annotated[AiModelRepository, Depends(get_ai_model_repo)],
):
    return [AiModelResponse.model_validate(m) for m in await ai_model_repo.list_models()]
