"""DTOs for search results (no dependency on ORM)."""

from dataclasses import dataclass, field

from app.domain.enums import ResultKind
from app.domain.search import SearchQuery


@dataclass(frozen=True)
class ContentSummary:
    """Projection of a prompt or article row used by search.

    Both collections share this shape; status must be 'published' to be eligible.
    """

    id: str
    title: str
    slug: str
    image_url: str | None
    status: str
    view_count: int = 0


@dataclass(frozen=True)
class SearchHit:
    """Single kind-tagged entry of a merged result set."""

    kind: ResultKind
    id: str
    title: str
    slug: str
    image_url: str | None = None

    @property
    def path(self) -> str:
        """Destination route: /prompt/{slug} or /blog/{slug}."""
        if self.kind is ResultKind.PROMPT:
            return f"/prompt/{self.slug}"
        return f"/blog/{self.slug}"

    @classmethod
    def from_summary(cls, kind: ResultKind, item: ContentSummary) -> "SearchHit":
        return cls(
            kind=kind,
            id=item.id,
            title=item.title,
            slug=item.slug,
            image_url=item.image_url,
        )


@dataclass(frozen=True)
class SearchResultSet:
    """Merged result set: prompts first, then articles, each in upstream order."""

    items: tuple[SearchHit, ...] = ()

    @classmethod
    def merge(
        cls, prompts: list[ContentSummary], articles: list[ContentSummary]
    ) -> "SearchResultSet":
        hits = [SearchHit.from_summary(ResultKind.PROMPT, p) for p in prompts]
        hits.extend(SearchHit.from_summary(ResultKind.ARTICLE, a) for a in articles)
        return cls(items=tuple(hits))

    @property
    def prompts(self) -> list[SearchHit]:
        return [h for h in self.items if h.kind is ResultKind.PROMPT]

    @property
    def articles(self) -> list[SearchHit]:
        return [h for h in self.items if h.kind is ResultKind.ARTICLE]

    @property
    def prompt_count(self) -> int:
        return len(self.prompts)

    @property
    def article_count(self) -> int:
        return len(self.articles)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SearchLimits:
    """Per-surface caps and ordering for the two reads."""

    prompts: int
    articles: int
    order_by_popularity: bool
    min_length: int = 1


# Header type-ahead widget: 5 + 3, upstream insertion order, 2-character floor.
COMPACT_LIMITS = SearchLimits(prompts=5, articles=3, order_by_popularity=False, min_length=2)
# Dedicated /search page: 30 + 12, most viewed first.
FULL_LIMITS = SearchLimits(prompts=30, articles=12, order_by_popularity=True)


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search round.

    redirect_to is set only when a code shortcut hit a published prompt;
    results is then empty.
    """

    query: SearchQuery
    results: SearchResultSet = field(default_factory=SearchResultSet)
    redirect_to: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None
