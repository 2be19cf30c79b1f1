"""DTOs for contact queries."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ContactResult:
    """Contact query read-model."""

    id: str
    name: str
    email: str
    subject: str | None
    message: str
    status: str
    admin_notes: str | None
    replied_at: datetime | None
    created_at: datetime | None
