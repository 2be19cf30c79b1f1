"""Contact query repository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.contact import ContactResult
from app.domain.enums import ContactStatus
from app.infrastructure.persistence.models.contact import ContactQuery
from app.infrastructure.persistence.repositories.base import BaseRepository


def _contact_to_result(c: ContactQuery) -> ContactResult:
    return ContactResult(
        id=c.id,
        name=c.name,
        email=c.email,
        subject=c.subject,
        message=c.message,
        status=c.status,
        admin_notes=c.admin_notes,
        replied_at=c.replied_at,
        created_at=c.created_at,
    )


class ContactRepository(BaseRepository[ContactQuery]):
    UPDATABLE_FIELDS = frozenset({"status", "admin_notes", "replied_at"})

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ContactQuery)

    async def create(
        self, name: str, email: str, subject: str | None, message: str
    ) -> ContactResult:
        contact = ContactQuery(
            name=name,
            email=email,
            subject=subject,
            message=message,
            status=ContactStatus.NEW.value,
        )
        return _contact_to_result(await self._add(contact))

    async def list_contacts(self, *, status: str | None = None) -> list[ContactResult]:
        stmt = select(ContactQuery)
        if status:
            stmt = stmt.where(ContactQuery.status == status)
        result = await self.db.execute(stmt.order_by(ContactQuery.created_at.desc()))
        return [_contact_to_result(c) for c in result.scalars().all()]

    async def update(self, contact_id: str, **fields: Any) -> ContactResult | None:
        contact = await self.update_fields(contact_id, **fields)
        return _contact_to_result(contact) if contact else None

    async def delete(self, contact_id: str) -> bool:
        return await self.delete_by_id(contact_id)

    async def count(self, status: str | None = None) -> int:
        if status:
            return await self._count(ContactQuery.status == status)
        return await self._count()
