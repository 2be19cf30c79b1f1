"""Contact form submissions and their admin handling."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.application.dtos.contact import ContactResult
from app.domain.enums import ContactStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IContactRepository

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, contact_repo: "IContactRepository") -> None:
        self.contact_repo = contact_repo

    async def submit(
        self, name: str, email: str, subject: str | None, message: str
    ) -> ContactResult:
        if not name.strip() or not message.strip():
            raise ValidationException("Name and message are required")
        contact = await self.contact_repo.create(
            name=name.strip(), email=email, subject=subject, message=message.strip()
        )
        logger.info("Contact query %s received", contact.id)
        return contact

    async def list_contacts(self, status: str | None = None) -> list[ContactResult]:
        return await self.contact_repo.list_contacts(status=status)

    async def update_contact(self, contact_id: str, **fields: Any) -> ContactResult:
        """Update status/admin_notes. Marking as replied stamps replied_at if not given."""
        status = fields.get("status")
        if status is not None:
            if status not in {s.value for s in ContactStatus}:
                raise ValidationException(f"Invalid status '{status}'", field="status")
            if status == ContactStatus.REPLIED.value and not fields.get("replied_at"):
                fields["replied_at"] = utc_now()
        updated = await self.contact_repo.update(contact_id, **fields)
        if updated is None:
            raise ResourceNotFoundException("contact_query", contact_id)
        return updated

    async def delete_contact(self, contact_id: str) -> None:
        if not await self.contact_repo.delete(contact_id):
            raise ResourceNotFoundException("contact_query", contact_id)
