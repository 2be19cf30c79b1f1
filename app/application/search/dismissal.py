"""Outside-interaction dismissal for dropdown-style widgets.

The widget reports raw interaction events; the controller decides which of
them close the dropdown: a pointer-down outside the widget, the Escape key,
or a navigation caused by selecting a result.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class DismissalKind(str, Enum):
    POINTER_DOWN = "pointerdown"
    KEY_DOWN = "keydown"
    NAVIGATION = "navigation"


@dataclass(frozen=True)
class DismissalEvent:
    kind: DismissalKind
    inside: bool = False
    key: str | None = None

    @classmethod
    def pointer_down(cls, inside: bool) -> "DismissalEvent":
        return cls(kind=DismissalKind.POINTER_DOWN, inside=inside)

    @classmethod
    def key_down(cls, key: str) -> "DismissalEvent":
        return cls(kind=DismissalKind.KEY_DOWN, key=key)

    @classmethod
    def navigation(cls) -> "DismissalEvent":
        return cls(kind=DismissalKind.NAVIGATION)


DismissCallback = Callable[[], Awaitable[None]]


class DismissalController:
    """Route interaction events to registered dismiss callbacks."""

    def __init__(self) -> None:
        self._callbacks: list[DismissCallback] = []

    def on_outside(self, callback: DismissCallback) -> None:
        self._callbacks.append(callback)

    @staticmethod
    def should_dismiss(event: DismissalEvent) -> bool:
        if event.kind is DismissalKind.POINTER_DOWN:
            return not event.inside
        if event.kind is DismissalKind.KEY_DOWN:
            return event.key == "Escape"
        return event.kind is DismissalKind.NAVIGATION

    async def handle(self, event: DismissalEvent) -> bool:
        """Run the callbacks if event dismisses. Returns whether it did."""
        if not self.should_dismiss(event):
            return False
        logger.debug("Dismissing on %s", event.kind.value)
        for callback in self._callbacks:
            await callback()
        return True

    def clear(self) -> None:
        self._callbacks.clear()
