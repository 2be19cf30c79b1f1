"""Trailing-edge debounce on asyncio tasks."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Coalesce rapid calls into one callback per quiet period.

    schedule() replaces any pending timer, so only the last value scheduled
    within ``delay_seconds`` reaches the callback. Must be used from a
    running event loop.
    """

    def __init__(
        self, delay_seconds: float, callback: Callable[[T], Awaitable[None]]
    ) -> None:
        self.delay_seconds = max(0.0, delay_seconds)
        self._callback = callback
        self._task: asyncio.Task | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self, value: T) -> None:
        if self._closed:
            raise RuntimeError("Debouncer is closed")
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._fire_later(value))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def close(self) -> None:
        self.cancel()
        self._closed = True

    async def _fire_later(self, value: T) -> None:
        await asyncio.sleep(self.delay_seconds)
        # Fired: a later schedule() must not cancel the running callback.
        self._task = None
        try:
            await self._callback(value)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Debounced callback failed")
