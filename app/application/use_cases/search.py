"""Search use case: prompt-code shortcut lookup and dual-collection free-text search.

The prompt and article reads run concurrently. A failing read is logged and
its group treated as empty, so one broken collection never blanks the other.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.application.dtos.search import (
    FULL_LIMITS,
    ContentSummary,
    SearchLimits,
    SearchOutcome,
    SearchResultSet,
)
from app.domain.search import SearchQuery, build_search_query

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        IArticleSearchRepository,
        IPromptSearchRepository,
    )

logger = logging.getLogger(__name__)


class SearchService:
    """Search across published prompts and blog articles."""

    def __init__(
        self,
        prompt_repo: "IPromptSearchRepository",
        article_repo: "IArticleSearchRepository",
    ) -> None:
        self.prompt_repo = prompt_repo
        self.article_repo = article_repo

    async def search_text(
        self, raw: str, limits: SearchLimits = FULL_LIMITS
    ) -> SearchOutcome:
        """Classify raw input and run search()."""
        return await self.search(build_search_query(raw), limits)

    async def search(
        self, query: SearchQuery, limits: SearchLimits = FULL_LIMITS
    ) -> SearchOutcome:
        """Run one search round.

        Blank input or input below limits.min_length yields an empty outcome
        without touching the repositories.
        """
        if not query.meets_min_length(limits.min_length):
            return SearchOutcome(query=query)
        if query.is_code_shortcut:
            return await self._lookup_code(query)
        return await self._search_collections(query, limits)

    async def _lookup_code(self, query: SearchQuery) -> SearchOutcome:
        """Point lookup by prompt code. Miss yields empty results (no free-text fallback)."""
        code = query.code_value or ""
        try:
            slug = await self.prompt_repo.get_published_slug_by_code(code)
        except Exception:
            logger.exception("Prompt code lookup failed for code %s", code)
            slug = None
        if not slug:
            return SearchOutcome(query=query)
        return SearchOutcome(query=query, redirect_to=f"/prompt/{slug}")

    async def _search_collections(
        self, query: SearchQuery, limits: SearchLimits
    ) -> SearchOutcome:
        pattern = query.like_pattern
        prompts_res, articles_res = await asyncio.gather(
            self.prompt_repo.find_published(
                pattern, limits.prompts, order_by_popularity=limits.order_by_popularity
            ),
            self.article_repo.find_published(
                pattern, limits.articles, order_by_popularity=limits.order_by_popularity
            ),
            return_exceptions=True,
        )
        prompts = _group_or_empty("prompts", prompts_res)[: limits.prompts]
        articles = _group_or_empty("articles", articles_res)[: limits.articles]
        return SearchOutcome(
            query=query, results=SearchResultSet.merge(prompts, articles)
        )


def _group_or_empty(
    group: str, result: list[ContentSummary] | BaseException
) -> list[ContentSummary]:
    """Return the read result, or [] (logged) when the read raised."""
    if isinstance(result, asyncio.CancelledError):
        raise result
    if isinstance(result, BaseException):
        logger.warning(
            "Search read for %s failed; treating as empty: %s",
            group,
            result,
            exc_info=result,
        )
        return []
    return list(result)
