"""SearchService: shortcut lookup, merge order, caps and partial failure."""

from app.application.dtos.search import COMPACT_LIMITS, FULL_LIMITS, SearchLimits
from app.application.use_cases.search import SearchService
from app.domain.enums import ResultKind
from tests.fakes import FakeArticleSearchRepository, FakePromptSearchRepository, summary


async def test_code_shortcut_redirects_to_published_prompt(
    search_service: SearchService, prompt_search_repo: FakePromptSearchRepository
) -> None:
    outcome = await search_service.search_text("#4521")
    assert outcome.redirect_to == "/prompt/neon-city-samurai"
    assert outcome.results.is_empty
    assert prompt_search_repo.code_calls == ["4521"]
    assert prompt_search_repo.calls == []


async def test_code_miss_returns_empty_without_text_fallback(
    search_service: SearchService,
    prompt_search_repo: FakePromptSearchRepository,
    article_search_repo: FakeArticleSearchRepository,
) -> None:
    outcome = await search_service.search_text("9998")
    assert outcome.redirect_to is None
    assert outcome.results.is_empty
    assert prompt_search_repo.calls == []
    assert article_search_repo.calls == []


async def test_code_of_draft_prompt_is_a_miss(search_service: SearchService) -> None:
    outcome = await search_service.search_text("1111")
    assert outcome.redirect_to is None


async def test_prompts_come_before_articles(search_service: SearchService) -> None:
    outcome = await search_service.search_text("neon", COMPACT_LIMITS)
    kinds = [hit.kind for hit in outcome.results.items]
    assert kinds == [ResultKind.PROMPT, ResultKind.PROMPT, ResultKind.ARTICLE]
    assert outcome.results.prompt_count == 2
    assert outcome.results.article_count == 1
    assert {hit.slug for hit in outcome.results.prompts} == {"neon-city-samurai", "misty-lake"}


async def test_full_profile_orders_by_views(
    search_service: SearchService, prompt_search_repo: FakePromptSearchRepository
) -> None:
    outcome = await search_service.search_text("neon", FULL_LIMITS)
    assert [hit.slug for hit in outcome.results.prompts] == ["misty-lake", "neon-city-samurai"]
    assert prompt_search_repo.calls == [("%neon%", 30, True)]


async def test_compact_profile_caps_each_group() -> None:
    prompts = FakePromptSearchRepository(
        [(summary(f"p{i}", f"Neon {i}", f"neon-{i}"), f"{i:04d}", "") for i in range(10)]
    )
    articles = FakeArticleSearchRepository(
        [(summary(f"b{i}", f"Neon {i}", f"neon-post-{i}"), "") for i in range(10)]
    )
    outcome = await SearchService(prompts, articles).search_text("neon", COMPACT_LIMITS)
    assert outcome.results.prompt_count == 5
    assert outcome.results.article_count == 3
    assert prompts.calls == [("%neon%", 5, False)]
    assert articles.calls == [("%neon%", 3, False)]


async def test_one_failing_collection_keeps_the_other(
    search_service: SearchService, article_search_repo: FakeArticleSearchRepository
) -> None:
    article_search_repo.error = RuntimeError("blog table unavailable")
    outcome = await search_service.search_text("neon")
    assert outcome.results.prompt_count == 2
    assert outcome.results.article_count == 0


async def test_both_failing_yields_empty(
    search_service: SearchService,
    prompt_search_repo: FakePromptSearchRepository,
    article_search_repo: FakeArticleSearchRepository,
) -> None:
    prompt_search_repo.error = RuntimeError("down")
    article_search_repo.error = RuntimeError("down")
    outcome = await search_service.search_text("neon")
    assert outcome.results.is_empty


async def test_failing_code_lookup_is_a_miss(
    search_service: SearchService, prompt_search_repo: FakePromptSearchRepository
) -> None:
    prompt_search_repo.error = RuntimeError("down")
    outcome = await search_service.search_text("4521")
    assert outcome.redirect_to is None


async def test_below_min_length_skips_repositories(
    search_service: SearchService, prompt_search_repo: FakePromptSearchRepository
) -> None:
    outcome = await search_service.search_text("n", COMPACT_LIMITS)
    assert outcome.results.is_empty
    assert prompt_search_repo.calls == []
    blank = await search_service.search_text("   ", SearchLimits(5, 3, False, min_length=1))
    assert blank.results.is_empty
    assert prompt_search_repo.calls == []


async def test_hit_paths_route_by_kind(search_service: SearchService) -> None:
    outcome = await search_service.search_text("lighting")
    (hit,) = outcome.results.items
    assert hit.kind is ResultKind.ARTICLE
    assert hit.path == "/blog/lighting-neon-scenes"
