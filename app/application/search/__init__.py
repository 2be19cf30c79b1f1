"""Type-ahead search session: debounce, state machine and dismissal."""

from app.application.search.debounce import Debouncer
from app.application.search.dismissal import DismissalController, DismissalEvent
from app.application.search.session import Navigator, SearchSession
from app.application.search.state import (
    Debouncing,
    Empty,
    Fetching,
    Idle,
    Results,
    SearchState,
    ShortcutRedirecting,
)

__all__ = [
    "Debouncer",
    "Debouncing",
    "DismissalController",
    "DismissalEvent",
    "Empty",
    "Fetching",
    "Idle",
    "Navigator",
    "Results",
    "SearchSession",
    "SearchState",
    "ShortcutRedirecting",
]
