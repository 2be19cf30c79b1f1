"""Search JSON API and the server-rendered results page."""

from httpx import AsyncClient


async def test_search_groups_prompts_before_articles(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "neon"})
    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "neon"
    assert data["is_code_shortcut"] is False
    assert data["redirect_to"] is None
    assert (data["total"], data["prompt_count"], data["article_count"]) == (3, 2, 1)
    assert [r["kind"] for r in data["results"]] == ["prompt", "prompt", "article"]
    # Full results are ordered by views.
    assert data["results"][0]["slug"] == "misty-lake"
    assert data["results"][2]["path"] == "/blog/lighting-neon-scenes"


async def test_search_code_shortcut_returns_redirect(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "#0007"})
    data = response.json()
    assert data["is_code_shortcut"] is True
    assert data["redirect_to"] == "/prompt/golden-hour-portrait"
    assert data["results"] == []


async def test_search_never_returns_drafts(client: AsyncClient) -> None:
    data = (await client.get("/api/v1/search", params={"q": "draft"})).json()
    assert data["total"] == 0


async def test_suggest_uses_compact_profile(client: AsyncClient) -> None:
    short = (await client.get("/api/v1/search/suggest", params={"q": "n"})).json()
    assert short["total"] == 0
    data = (await client.get("/api/v1/search/suggest", params={"q": "neon"})).json()
    # Compact results keep insertion order.
    assert data["results"][0]["slug"] == "neon-city-samurai"


async def test_search_rejects_overlong_query(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "x" * 501})
    assert response.status_code == 422


async def test_results_page_lists_both_sections(client: AsyncClient) -> None:
    response = await client.get("/search", params={"q": "neon"})
    assert response.status_code == 200
    assert "3 results" in response.text
    assert "PROMPTS (2)" in response.text
    assert "ARTICLES (1)" in response.text
    assert 'href="/prompt/neon-city-samurai"' in response.text


async def test_results_page_empty_state(client: AsyncClient) -> None:
    response = await client.get("/search", params={"q": "zzzzzznoresults"})
    assert response.status_code == 200
    assert "No results found" in response.text
    assert "Browse All" in response.text
    assert "PROMPTS" not in response.text


async def test_results_page_without_query(client: AsyncClient) -> None:
    response = await client.get("/search")
    assert "Use the search bar in the header" in response.text


async def test_results_page_redirects_prompt_code(client: AsyncClient) -> None:
    response = await client.get("/search", params={"q": "4521"})
    assert response.status_code == 303
    assert response.headers["location"] == "/prompt/neon-city-samurai"


async def test_results_page_unknown_code_renders_empty(client: AsyncClient) -> None:
    response = await client.get("/search", params={"q": "9998"})
    assert response.status_code == 200
    assert "No results found" in response.text
