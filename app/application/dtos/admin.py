"""DTOs for the admin dashboard."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardStats:
    """Headline counts for the admin home page."""

    prompts: int
    published_prompts: int
    blogs: int
    categories: int
    users: int
    new_contacts: int
