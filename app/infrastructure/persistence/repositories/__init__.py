"""Persistence repositories (SQLAlchemy implementations of application ports)."""

from app.infrastructure.persistence.repositories.ai_model_repo import AiModelRepository
from app.infrastructure.persistence.repositories.blog_repo import BlogRepository
from app.infrastructure.persistence.repositories.category_repo import CategoryRepository
from app.infrastructure.persistence.repositories.chat_repo import ChatRepository
from app.infrastructure.persistence.repositories.contact_repo import ContactRepository
from app.infrastructure.persistence.repositories.prompt_repo import PromptRepository
from app.infrastructure.persistence.repositories.search_repo import (
    ArticleSearchRepository,
    PromptSearchRepository,
)
from app.infrastructure.persistence.repositories.setting_repo import SettingRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "AiModelRepository",
    "ArticleSearchRepository",
    "BlogRepository",
    "CategoryRepository",
    "ChatRepository",
    "ContactRepository",
    "PromptRepository",
    "PromptSearchRepository",
    "SettingRepository",
    "UserRepository",
]
