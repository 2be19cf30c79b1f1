"""Admin dashboard use case: headline counts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.admin import DashboardStats
from app.domain.enums import ContactStatus, ContentStatus

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        IBlogRepository,
        ICategoryRepository,
        IContactRepository,
        IPromptRepository,
        IUserRepository,
    )


class GetDashboardStatsUseCase:
    """Counts shown on the admin home page."""

    def __init__(
        self,
        prompt_repo: "IPromptRepository",
        blog_repo: "IBlogRepository",
        category_repo: "ICategoryRepository",
        user_repo: "IUserRepository",
        contact_repo: "IContactRepository",
    ) -> None:
        self.prompt_repo = prompt_repo
        self.blog_repo = blog_repo
        self.category_repo = category_repo
        self.user_repo = user_repo
        self.contact_repo = contact_repo

    async def get_dashboard_stats(self) -> DashboardStats:
        # One AsyncSession cannot run queries concurrently; counts run in sequence.
        return DashboardStats(
            prompts=await self.prompt_repo.count(),
            published_prompts=await self.prompt_repo.count(ContentStatus.PUBLISHED.value),
            blogs=await self.blog_repo.count(),
            categories=await self.category_repo.count(),
            users=await self.user_repo.count(),
            new_contacts=await self.contact_repo.count(ContactStatus.NEW.value),
        )
