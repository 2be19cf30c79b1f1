"""Public prompt API: gallery listing, prompt page and likes."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_prompt_repo, get_prompt_service
from app.application.services.prompt_service import PromptService
from app.core.limiter import limit_writes
from app.infrastructure.persistence.repositories import PromptRepository
from app.schemas.prompt import LikeResponse, PromptResponse

router = APIRouter()


@router.get("", response_model=list[PromptResponse])
async def list_prompts(
    prompt_repo: Annotated[PromptRepository, Depends(get_prompt_repo)],
    category: str | None = Query(None, description="Category slug"),
    model_id: str | None = Query(None),
    sort: Literal["latest", "popular"] = Query("latest", description="popular = most viewed first"),
    skip: int = Query(0, ge=0),
    limit: int = Query(24, ge=1, le=100),
):
    """Published prompts, newest first (or most viewed with sort=popular)."""
    items = await prompt_repo.list_published(
        category_slug=category, model_id=model_id, popular=sort == "popular", skip=skip, limit=limit
    )
    return [PromptResponse.model_validate(p) for p in items]


@router.get("/{slug}", response_model=PromptResponse)
async def get_prompt(
    slug: str,
    prompt_svc: Annotated[PromptService, Depends(get_prompt_service)],
):
    """Published prompt by slug. Counts a view."""
    prompt = await prompt_svc.view_published(slug)
    return PromptResponse.model_validate(prompt)


@router.post("/{slug}/like", response_model=LikeResponse)
@limit_writes
async def like_prompt(
    request: Request,
    slug: str,
    prompt_svc: Annotated[PromptService, Depends(get_prompt_service)],
):
    count = await prompt_svc.like(slug)
    return LikeResponse(like_count=count)
