"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.utils import (
    ContentSanitizer,
    generate_cuid,
    generate_prompt_code,
    utc_now,
)

__all__ = [
    "ContentSanitizer",
    "generate_cuid",
    "generate_prompt_code",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "utc_now",
]
