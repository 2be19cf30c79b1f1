"""In-memory search read ports used by unit and API tests."""

from app.application.dtos.search import ContentSummary


def _matches(pattern: str, *fields: str | None) -> bool:
    """Case-insensitive %term% match, mirroring ILIKE with escaped metacharacters."""
    term = pattern[1:-1].replace("\\%", "%").replace("\\_", "_").replace("\\\\", "\\")
    term = term.lower()
    return any(term in (f or "").lower() for f in fields)


def summary(
    id: str, title: str, slug: str, status: str = "published", view_count: int = 0
) -> ContentSummary:
    return ContentSummary(
        id=id,
        title=title,
        slug=slug,
        image_url=f"/media/prompts/{slug}.webp",
        status=status,
        view_count=view_count,
    )


class FakePromptSearchRepository:
    """Prompt read port over a list of (summary, code, prompt_text) rows."""

    def __init__(self, rows: list[tuple[ContentSummary, str, str]] | None = None) -> None:
        self.rows = rows or []
        self.calls: list[tuple[str, int, bool]] = []
        self.code_calls: list[str] = []
        self.error: Exception | None = None

    async def find_published(
        self, pattern: str, limit: int, order_by_popularity: bool = False
    ) -> list[ContentSummary]:
        self.calls.append((pattern, limit, order_by_popularity))
        if self.error is not None:
            raise self.error
        hits = [
            s
            for s, _code, text in self.rows
            if s.status == "published" and _matches(pattern, s.title, s.slug, text)
        ]
        if order_by_popularity:
            hits.sort(key=lambda s: s.view_count, reverse=True)
        return hits[:limit]

    async def get_published_slug_by_code(self, code: str) -> str | None:
        self.code_calls.append(code)
        if self.error is not None:
            raise self.error
        for s, row_code, _text in self.rows:
            if row_code == code and s.status == "published":
                return s.slug
        return None


class FakeArticleSearchRepository:
    """Article read port over a list of (summary, content) rows."""

    def __init__(self, rows: list[tuple[ContentSummary, str]] | None = None) -> None:
        self.rows = rows or []
        self.calls: list[tuple[str, int, bool]] = []
        self.error: Exception | None = None

    async def find_published(
        self, pattern: str, limit: int, order_by_popularity: bool = False
    ) -> list[ContentSummary]:
        self.calls.append((pattern, limit, order_by_popularity))
        if self.error is not None:
            raise self.error
        hits = [
            s
            for s, content in self.rows
            if s.status == "published" and _matches(pattern, s.title, s.slug, content)
        ]
        if order_by_popularity:
            hits.sort(key=lambda s: s.view_count, reverse=True)
        return hits[:limit]
