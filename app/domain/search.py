"""Search query classification (query builder).

A raw search box value becomes a SearchQuery: either a prompt-code shortcut
(4 digits, optionally prefixed with '#') or a free-text substring match.
Pure functions only; no I/O.
"""

import re
from dataclasses import dataclass

# Prompt-code shortcut: exactly four digits, optional leading '#'; matched with fullmatch.
_CODE_SHORTCUT_RE = re.compile(r"#?(\d{4})", re.ASCII)

LIKE_ESCAPE_CHAR = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE/ILIKE metacharacters so the term matches literally.

    Backslash is the escape character (use with ESCAPE '\\').
    """
    return (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", LIKE_ESCAPE_CHAR + "%")
        .replace("_", LIKE_ESCAPE_CHAR + "_")
    )


@dataclass(frozen=True)
class SearchQuery:
    """Classified search input.

    Attributes:
        raw: Input exactly as typed. Used as the staleness-guard key.
        normalized: Trimmed input.
        is_code_shortcut: True iff raw (untrimmed) fully matches ^#?\\d{4}$.
        code_value: The four digits when is_code_shortcut, else None.
    """

    raw: str
    normalized: str
    is_code_shortcut: bool = False
    code_value: str | None = None

    @property
    def is_blank(self) -> bool:
        return not self.normalized

    @property
    def like_pattern(self) -> str:
        """Case-insensitive substring pattern (%term%) with metacharacters escaped."""
        return f"%{escape_like(self.normalized)}%"

    def meets_min_length(self, min_length: int) -> bool:
        """Return True if the query is long enough to be issued.

        Length is measured on the raw input, as typed in the search box.
        """
        return not self.is_blank and len(self.raw) >= min_length


def build_search_query(raw: str | None) -> SearchQuery:
    """Classify raw input into a SearchQuery.

    Examples:
        "1234"  -> shortcut, code_value "1234"
        "#0007" -> shortcut, code_value "0007"
        "12345" -> free text
        "ab12"  -> free text
        " 1234" -> free text (whitespace is not trimmed for shortcuts)
    """
    raw = raw or ""
    normalized = raw.strip()
    match = _CODE_SHORTCUT_RE.fullmatch(raw)
    if match:
        return SearchQuery(
            raw=raw,
            normalized=normalized,
            is_code_shortcut=True,
            code_value=match.group(1),
        )
    return SearchQuery(raw=raw, normalized=normalized)
