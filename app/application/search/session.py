"""Server-side search session backing one type-ahead widget.

The browser sends keystrokes and interaction events; the session debounces
input, runs the search, guards against out-of-order completions and pushes
state snapshots and navigation commands back through injected callbacks.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol
from urllib.parse import quote

from app.application.dtos.search import COMPACT_LIMITS, SearchHit, SearchLimits, SearchOutcome
from app.application.search.debounce import Debouncer
from app.application.search.dismissal import DismissalController, DismissalEvent
from app.application.search.state import (
    Debouncing,
    Empty,
    Fetching,
    Idle,
    Results,
    SearchState,
    ShortcutRedirecting,
)
from app.domain.enums import ResultKind
from app.domain.search import build_search_query

if TYPE_CHECKING:
    from app.application.use_cases.search import SearchService

logger = logging.getLogger(__name__)

StateListener = Callable[[SearchState], Awaitable[None]]


class Navigator(Protocol):
    """Sends the client to another route."""

    async def navigate(self, path: str) -> None: ...


async def _ignore_state(state: SearchState) -> None:
    return None


class SearchSession:
    """State machine for one connected search widget."""

    def __init__(
        self,
        service: SearchService,
        navigator: Navigator,
        *,
        limits: SearchLimits = COMPACT_LIMITS,
        debounce_seconds: float = 0.25,
        listener: StateListener | None = None,
    ) -> None:
        self._service = service
        self._navigator = navigator
        self._limits = limits
        self._listener = listener or _ignore_state
        self._debouncer: Debouncer[str] = Debouncer(debounce_seconds, self._fire)
        self._dismissal = DismissalController()
        self._dismissal.on_outside(self._close_dropdown)
        self._state: SearchState = Idle()
        self._input = ""
        self._last_issued: str | None = None
        self._inflight: asyncio.Task | None = None
        self._closed = False

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def input_value(self) -> str:
        return self._input

    @property
    def last_issued(self) -> str | None:
        return self._last_issued

    @property
    def dismissal(self) -> DismissalController:
        return self._dismissal

    async def on_input(self, value: str) -> None:
        """Handle a keystroke (the full current input value)."""
        if self._closed:
            return
        self._input = value
        query = build_search_query(value)
        if not query.meets_min_length(self._limits.min_length):
            self._debouncer.cancel()
            self._cancel_inflight()
            self._last_issued = None
            await self._set_state(Idle())
            return
        self._debouncer.schedule(value)
        await self._set_state(Debouncing(query=value))

    async def submit(self) -> str | None:
        """Send the user to the full results page. Returns the path, or None when blank."""
        if self._closed or build_search_query(self._input).is_blank:
            return None
        self._debouncer.cancel()
        self._cancel_inflight()
        self._last_issued = None
        path = f"/search?q={quote(self._input, safe='')}"
        if isinstance(self._state, (Debouncing, Fetching)):
            await self._set_state(Idle())
        await self._close_dropdown()
        await self._navigator.navigate(path)
        return path

    async def select(self, kind: ResultKind | str, slug: str) -> str:
        """Open a result: clear input, dismiss the dropdown, navigate."""
        hit = SearchHit(kind=ResultKind(kind), id="", title="", slug=slug)
        self._input = ""
        self._debouncer.cancel()
        self._cancel_inflight()
        self._last_issued = None
        if isinstance(self._state, (Debouncing, Fetching)):
            await self._set_state(Idle())
        await self._dismissal.handle(DismissalEvent.navigation())
        await self._navigator.navigate(hit.path)
        return hit.path

    async def focus(self) -> None:
        """Reopen the dropdown if results are already in memory. Never refetches."""
        state = self._state
        if isinstance(state, Results) and not state.open and not state.results.is_empty:
            await self._set_state(Results(query=state.query, results=state.results, open=True))

    async def dismiss(self, event: DismissalEvent) -> bool:
        return await self._dismissal.handle(event)

    async def close(self) -> None:
        """Tear down: no callbacks or fetches survive the session."""
        self._closed = True
        self._debouncer.close()
        self._cancel_inflight()
        self._dismissal.clear()

    async def accept(self, outcome: SearchOutcome) -> bool:
        """Apply a completed search if it answers the last issued query.

        Returns False (and changes nothing) for superseded outcomes.
        """
        if self._closed or outcome.query.raw != self._last_issued:
            logger.debug("Discarding stale search outcome for %r", outcome.query.raw)
            return False
        if outcome.redirect_to:
            self._input = ""
            self._last_issued = None
            await self._set_state(ShortcutRedirecting(path=outcome.redirect_to))
            await self._navigator.navigate(outcome.redirect_to)
            await self._set_state(Idle())
            return True
        if outcome.results.is_empty:
            await self._set_state(Empty(query=outcome.query.raw))
        else:
            await self._set_state(
                Results(query=outcome.query.raw, results=outcome.results, open=True)
            )
        return True

    async def _fire(self, value: str) -> None:
        if self._closed:
            return
        self._last_issued = value
        self._cancel_inflight()
        await self._set_state(Fetching(query=value))
        self._inflight = asyncio.get_running_loop().create_task(self._fetch(value))

    async def _fetch(self, value: str) -> None:
        try:
            outcome = await self._service.search_text(value, self._limits)
            await self.accept(outcome)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Search session fetch failed for %r", value)
            if value == self._last_issued:
                await self._set_state(Empty(query=value))

    async def wait_idle(self) -> None:
        """Wait for the in-flight fetch, if any (used by tests and teardown)."""
        task = self._inflight
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    def _cancel_inflight(self) -> None:
        task = self._inflight
        self._inflight = None
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()

    async def _close_dropdown(self) -> None:
        state = self._state
        if isinstance(state, Results) and state.open:
            await self._set_state(Results(query=state.query, results=state.results, open=False))

    async def _set_state(self, state: SearchState) -> None:
        self._state = state
        await self._listener(state)
