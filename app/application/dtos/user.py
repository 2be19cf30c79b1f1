"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, etc.). No password."""

    id: str
    email: str
    full_name: str | None
    avatar_url: str | None
    role: str
    is_active: bool
    created_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
