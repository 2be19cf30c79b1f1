"""Shared utilities: datetime, generators, sanitization."""

from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid, generate_prompt_code
from app.shared.utils.sanitization import ContentSanitizer

__all__ = [
    "ContentSanitizer",
    "generate_cuid",
    "generate_prompt_code",
    "utc_now",
]
