"""Search API: prompt-code shortcut and free-text search over published content.

GET /search is the full results page payload (30 prompts + 12 articles, most
viewed first). GET /search/suggest is the compact type-ahead payload (5 + 3,
two-character floor). Both resolve a 4-digit code to redirect_to.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_search_service
from app.application.dtos.search import COMPACT_LIMITS, FULL_LIMITS
from app.application.use_cases.search import SearchService
from app.schemas.search import SearchResponse

router = APIRouter()


@router.get("", response_model=SearchResponse)
async def search(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=500, description="Search text or 4-digit prompt code"),
):
    """Full search across published prompts and articles."""
    outcome = await search_svc.search_text(q, FULL_LIMITS)
    return SearchResponse.from_outcome(outcome)


@router.get("/suggest", response_model=SearchResponse)
async def suggest(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=500),
):
    """Compact suggestions for the header dropdown."""
    outcome = await search_svc.search_text(q, COMPACT_LIMITS)
    return SearchResponse.from_outcome(outcome)
