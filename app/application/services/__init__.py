"""Application services: content, catalogue, contact, users, settings and chat."""

from app.application.services.blog_service import BlogService
from app.application.services.category_service import CategoryService
from app.application.services.chat_service import ChatService
from app.application.services.contact_service import ContactService
from app.application.services.prompt_service import PromptService
from app.application.services.settings_service import SiteSettingsService
from app.application.services.user_service import UserService

__all__ = [
    "BlogService",
    "CategoryService",
    "ChatService",
    "ContactService",
    "PromptService",
    "SiteSettingsService",
    "UserService",
]
