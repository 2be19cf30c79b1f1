"""SearchSession state machine: debounce, staleness, shortcut, dismissal."""

import asyncio
from collections.abc import Callable

import pytest

from app.application.dtos.search import COMPACT_LIMITS, SearchLimits, SearchOutcome
from app.application.search import (
    DismissalEvent,
    Empty,
    Fetching,
    Idle,
    Results,
    SearchSession,
    SearchState,
    ShortcutRedirecting,
)
from app.application.use_cases.search import SearchService
from app.domain.enums import ResultKind
from app.domain.search import build_search_query


class RecordingNavigator:
    def __init__(self) -> None:
        self.paths: list[str] = []

    async def navigate(self, path: str) -> None:
        self.paths.append(path)


class ScriptedSearch:
    """Wraps a SearchService; queries with a gate block until it is set."""

    def __init__(self, inner: SearchService) -> None:
        self.inner = inner
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[str] = []
        self.fail = False

    async def search_text(self, raw: str, limits: SearchLimits) -> SearchOutcome:
        self.calls.append(raw)
        gate = self.gates.get(raw)
        if gate is not None:
            await gate.wait()
        if self.fail:
            raise RuntimeError("search backend down")
        return await self.inner.search_text(raw, limits)


async def wait_for(predicate: Callable[[], bool]) -> None:
    for _ in range(200):
        if predicate():
            return
        await asyncio.sleep(0.005)
    raise AssertionError("condition not reached")


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def scripted(search_service: SearchService) -> ScriptedSearch:
    return ScriptedSearch(search_service)


@pytest.fixture
def states() -> list[SearchState]:
    return []


@pytest.fixture
async def session(scripted: ScriptedSearch, navigator: RecordingNavigator, states: list[SearchState]):
    async def listener(state: SearchState) -> None:
        states.append(state)

    s = SearchSession(
        scripted, navigator, limits=COMPACT_LIMITS, debounce_seconds=0.01, listener=listener
    )
    yield s
    await s.close()


async def settle(session: SearchSession) -> None:
    await asyncio.sleep(0.05)
    await session.wait_idle()


async def test_below_min_length_stays_idle(session: SearchSession, scripted: ScriptedSearch) -> None:
    await session.on_input("n")
    await settle(session)
    assert isinstance(session.state, Idle)
    assert scripted.calls == []


async def test_rapid_input_issues_one_search(session: SearchSession, scripted: ScriptedSearch) -> None:
    for value in ("ne", "neo", "neon"):
        await session.on_input(value)
    await settle(session)
    assert scripted.calls == ["neon"]
    state = session.state
    assert isinstance(state, Results)
    assert state.open is True
    assert state.query == "neon"
    assert [h.kind for h in state.results.items] == [
        ResultKind.PROMPT,
        ResultKind.PROMPT,
        ResultKind.ARTICLE,
    ]


async def test_spinner_state_while_fetching(
    session: SearchSession, scripted: ScriptedSearch
) -> None:
    scripted.gates["neon"] = asyncio.Event()
    await session.on_input("neon")
    await wait_for(lambda: isinstance(session.state, Fetching))
    scripted.gates["neon"].set()
    await settle(session)
    assert isinstance(session.state, Results)


async def test_no_match_is_empty(session: SearchSession) -> None:
    await session.on_input("zzzzzznoresults")
    await settle(session)
    assert session.state == Empty(query="zzzzzznoresults")


async def test_code_shortcut_navigates_and_clears(
    session: SearchSession, navigator: RecordingNavigator, states: list[SearchState]
) -> None:
    await session.on_input("#4521")
    await settle(session)
    assert navigator.paths == ["/prompt/neon-city-samurai"]
    assert session.input_value == ""
    assert isinstance(session.state, Idle)
    assert ShortcutRedirecting(path="/prompt/neon-city-samurai") in states
    assert not any(isinstance(s, (Results, Empty)) for s in states)


async def test_dropping_below_min_length_cancels_inflight_search(
    session: SearchSession, scripted: ScriptedSearch
) -> None:
    scripted.gates["neon"] = asyncio.Event()
    await session.on_input("neon")
    await wait_for(lambda: isinstance(session.state, Fetching))
    await session.on_input("n")
    scripted.gates["neon"].set()
    await settle(session)
    assert isinstance(session.state, Idle)
    assert session.last_issued is None


async def test_newer_query_supersedes_slow_one(
    session: SearchSession, scripted: ScriptedSearch
) -> None:
    scripted.gates["neon"] = asyncio.Event()
    await session.on_input("neon")
    await wait_for(lambda: isinstance(session.state, Fetching))
    await session.on_input("misty")
    await wait_for(lambda: scripted.calls == ["neon", "misty"])
    scripted.gates["neon"].set()
    await settle(session)
    state = session.state
    assert isinstance(state, Results)
    assert state.query == "misty"
    assert [h.slug for h in state.results.items] == ["misty-lake"]


async def test_stale_outcome_is_discarded(
    session: SearchSession, search_service: SearchService
) -> None:
    await session.on_input("misty")
    await settle(session)
    before = session.state
    stale = await search_service.search_text("neon", COMPACT_LIMITS)
    assert await session.accept(stale) is False
    assert session.state == before


async def test_fetch_failure_shows_empty(session: SearchSession, scripted: ScriptedSearch) -> None:
    scripted.fail = True
    await session.on_input("neon")
    await settle(session)
    assert session.state == Empty(query="neon")


async def test_submit_goes_to_results_page(
    session: SearchSession, navigator: RecordingNavigator
) -> None:
    await session.on_input("neon city")
    assert await session.submit() == "/search?q=neon%20city"
    assert navigator.paths == ["/search?q=neon%20city"]
    assert isinstance(session.state, Idle)


async def test_submit_blank_does_nothing(
    session: SearchSession, navigator: RecordingNavigator
) -> None:
    await session.on_input("   ")
    assert await session.submit() is None
    assert navigator.paths == []


async def test_select_clears_input_and_closes_dropdown(
    session: SearchSession, navigator: RecordingNavigator
) -> None:
    await session.on_input("neon")
    await settle(session)
    path = await session.select("article", "lighting-neon-scenes")
    assert path == "/blog/lighting-neon-scenes"
    assert navigator.paths == [path]
    assert session.input_value == ""
    state = session.state
    assert isinstance(state, Results) and state.open is False


async def test_outside_click_closes_and_focus_reopens_without_refetch(
    session: SearchSession, scripted: ScriptedSearch
) -> None:
    await session.on_input("neon")
    await settle(session)
    assert await session.dismiss(DismissalEvent.pointer_down(inside=False)) is True
    assert session.state.open is False
    await session.focus()
    assert session.state.open is True
    assert scripted.calls == ["neon"]


async def test_escape_closes_but_other_keys_do_not(session: SearchSession) -> None:
    await session.on_input("neon")
    await settle(session)
    assert await session.dismiss(DismissalEvent.key_down("ArrowDown")) is False
    assert session.state.open is True
    assert await session.dismiss(DismissalEvent.key_down("Escape")) is True
    assert session.state.open is False


async def test_closed_session_ignores_input(
    session: SearchSession, scripted: ScriptedSearch
) -> None:
    await session.on_input("neon")
    await session.close()
    await asyncio.sleep(0.05)
    await session.on_input("misty")
    assert scripted.calls == []
    assert await session.accept(SearchOutcome(query=build_search_query("neon"))) is False


async def test_select_during_fetch_leaves_no_spinner(
    session: SearchSession, scripted: ScriptedSearch, navigator: RecordingNavigator
) -> None:
    scripted.gates["neon"] = asyncio.Event()
    await session.on_input("neon")
    await wait_for(lambda: isinstance(session.state, Fetching))
    path = await session.select("prompt", "neon-city-samurai")
    scripted.gates["neon"].set()
    await settle(session)
    assert navigator.paths == [path]
    assert isinstance(session.state, Idle)
    assert session.last_issued is None
