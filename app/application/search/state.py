"""Search widget states.

Exactly one state is current at a time, so combinations such as "fetching
with the dropdown open on stale results" cannot be represented.
"""

from dataclasses import dataclass
from typing import Any

from app.application.dtos.search import SearchResultSet


@dataclass(frozen=True)
class Idle:
    """Nothing typed (or below the minimum length); nothing shown."""

    name = "idle"

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.name}


@dataclass(frozen=True)
class Debouncing:
    """Input accepted, waiting for the quiet period to elapse."""

    query: str
    name = "debouncing"

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.name, "query": self.query}


@dataclass(frozen=True)
class Fetching:
    """A search for query is in flight (spinner replaces the search icon)."""

    query: str
    name = "fetching"

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.name, "query": self.query}


@dataclass(frozen=True)
class Results:
    query: str
    results: SearchResultSet
    open: bool = True
    name = "results"

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.name,
            "query": self.query,
            "open": self.open,
            "prompt_count": self.results.prompt_count,
            "article_count": self.results.article_count,
            "results": [
                {
                    "kind": hit.kind.value,
                    "id": hit.id,
                    "title": hit.title,
                    "slug": hit.slug,
                    "image_url": hit.image_url,
                    "path": hit.path,
                }
                for hit in self.results.items
            ],
        }


@dataclass(frozen=True)
class Empty:
    """The last issued query matched nothing."""

    query: str
    name = "empty"

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.name, "query": self.query}


@dataclass(frozen=True)
class ShortcutRedirecting:
    path: str
    name = "redirecting"

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.name, "path": self.path}


SearchState = Idle | Debouncing | Fetching | Results | Empty | ShortcutRedirecting
