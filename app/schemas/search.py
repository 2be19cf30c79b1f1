"""Search API schemas."""

from pydantic import BaseModel, Field

from app.application.dtos.search import SearchHit, SearchOutcome
from app.domain.enums import ResultKind


class SearchResultItemResponse(BaseModel):
    """Single search hit (prompt or article)."""

    kind: ResultKind = Field(..., description="prompt | article")
    id: str
    title: str
    slug: str
    image_url: str | None = None
    path: str = Field(..., description="Destination route (/prompt/{slug} or /blog/{slug})")

    @classmethod
    def from_hit(cls, hit: SearchHit) -> "SearchResultItemResponse":
        return cls(
            kind=hit.kind,
            id=hit.id,
            title=hit.title,
            slug=hit.slug,
            image_url=hit.image_url,
            path=hit.path,
        )


class SearchResponse(BaseModel):
    """Search response: prompts first, then articles.

    When the query is a 4-digit prompt code that matches a published prompt,
    redirect_to is set and results is empty.
    """

    query: str
    is_code_shortcut: bool
    redirect_to: str | None = None
    total: int
    prompt_count: int
    article_count: int
    results: list[SearchResultItemResponse]

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "SearchResponse":
        results = outcome.results
        return cls(
            query=outcome.query.normalized,
            is_code_shortcut=outcome.query.is_code_shortcut,
            redirect_to=outcome.redirect_to,
            total=len(results),
            prompt_count=results.prompt_count,
            article_count=results.article_count,
            results=[SearchResultItemResponse.from_hit(h) for h in results.items],
        )
