"""HTML sanitization for user and editor supplied text."""

from typing import ClassVar

import nh3


class ContentSanitizer:
    """Clean editor supplied article HTML with nh3 (allowlist of formatting tags)."""

    ARTICLE_TAGS: ClassVar[set[str]] = {
        "a", "b", "blockquote", "br", "code", "em", "figcaption", "figure",
        "h2", "h3", "h4", "hr", "i", "img", "li", "ol", "p", "pre", "strong",
        "ul",
    }
    ARTICLE_ATTRIBUTES: ClassVar[dict[str, set[str]]] = {
        "a": {"href", "title"},
        "img": {"src", "alt", "title", "width", "height"},
    }
    URL_SCHEMES: ClassVar[set[str]] = {"http", "https", "mailto"}

    @classmethod
    def clean_article(cls, value: str) -> str:
        """Keep safe formatting markup; drop scripts, handlers and unknown tags."""
        if not value:
            return value
        return nh3.clean(
            value,
            tags=cls.ARTICLE_TAGS,
            attributes=cls.ARTICLE_ATTRIBUTES,
            url_schemes=cls.URL_SCHEMES,
            link_rel="noopener noreferrer",
        )
