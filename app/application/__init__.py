"""Application layer: interfaces, services, use cases and the search session.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repos, storage, LLM client).
"""

from app.application.interfaces import (
    IArticleSearchRepository,
    IChatCompletionClient,
    IPromptSearchRepository,
    IStorageService,
)
from app.application.search import SearchSession
from app.application.use_cases.search import SearchService

__all__ = [
    "IArticleSearchRepository",
    "IChatCompletionClient",
    "IPromptSearchRepository",
    "IStorageService",
    "SearchService",
    "SearchSession",
]
