"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IArticleSearchRepository,
    IBlogRepository,
    ICategoryRepository,
    IChatRepository,
    IContactRepository,
    IPromptRepository,
    IPromptSearchRepository,
    ISettingRepository,
    IUserRepository,
)
from app.application.interfaces.services import IChatCompletionClient, IStorageService

__all__ = [
    "IArticleSearchRepository",
    "IBlogRepository",
    "ICategoryRepository",
    "IChatCompletionClient",
    "IChatRepository",
    "IContactRepository",
    "IPromptRepository",
    "IPromptSearchRepository",
    "ISettingRepository",
    "IStorageService",
    "IUserRepository",
]
