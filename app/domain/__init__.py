"""Domain layer: value objects, search query classification, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import (
    ChatCommand,
    ChatRole,
    ContactStatus,
    ContentStatus,
    ResultKind,
    UserRole,
)
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DuplicateResourceException,
    PixicoException,
    ResourceNotFoundException,
    ServiceNotConfiguredException,
    UpstreamServiceException,
    ValidationException,
)
from app.domain.search import SearchQuery, build_search_query, escape_like
from app.domain.value_objects import PromptCode, Slug, slugify

__all__ = [
    # Enums
    "ChatCommand",
    "ChatRole",
    "ContactStatus",
    "ContentStatus",
    "ResultKind",
    "UserRole",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "DuplicateResourceException",
    "PixicoException",
    "ResourceNotFoundException",
    "ServiceNotConfiguredException",
    "UpstreamServiceException",
    "ValidationException",
    # Search
    "SearchQuery",
    "build_search_query",
    "escape_like",
    # Value objects
    "PromptCode",
    "Slug",
    "slugify",
]
