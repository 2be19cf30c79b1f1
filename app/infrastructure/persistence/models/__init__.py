"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.ai_model import AiModel
from app.infrastructure.persistence.models.blog import Blog
from app.infrastructure.persistence.models.category import Category
from app.infrastructure.persistence.models.chat import ChatConversation, ChatMessage
from app.infrastructure.persistence.models.contact import ContactQuery
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    EntityModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.prompt import Prompt
from app.infrastructure.persistence.models.setting import SiteSetting
from app.infrastructure.persistence.models.user import User

__all__ = [
    "AiModel",
    "Blog",
    "Category",
    "ChatConversation",
    "ChatMessage",
    "ContactQuery",
    "CuidMixin",
    "EntityModel",
    "Prompt",
    "SiteSetting",
    "TimestampMixin",
    "User",
]
