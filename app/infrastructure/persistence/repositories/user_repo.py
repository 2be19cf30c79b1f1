"""User repository with password helpers. Interface methods return application DTOs."""

from __future__ import annotations

import asyncio
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.domain.enums import UserRole
from app.domain.exceptions import DuplicateResourceException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.security.password import get_password_hash, verify_password

# Hash compared against when the email is unknown, so both paths cost one bcrypt check.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        email=u.email,
        full_name=u.full_name,
        avatar_url=u.avatar_url,
        role=u.role,
        is_active=u.is_active,
        created_at=u.created_at,
    )


class UserRepository(BaseRepository[User]):
    UPDATABLE_FIELDS = frozenset({"full_name", "avatar_url", "role", "is_active"})

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def _get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(func.lower(User.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self._get(user_id)
        return _user_to_result(user) if user else None

    async def get_by_email(self, email: str) -> UserResult | None:
        user = await self._get_by_email(email)
        return _user_to_result(user) if user else None

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        user = await self._get_by_email(email)
        if not user:
            await asyncio.to_thread(verify_password, password, await _get_dummy_hash())
            return None
        if not user.is_active:
            return None
        if not await asyncio.to_thread(verify_password, password, user.hashed_password):
            return None
        return _user_to_result(user)

    async def create_user(
        self,
        email: str,
        password: str,
        full_name: str | None = None,
        role: str = UserRole.USER.value,
    ) -> UserResult:
        """Create user; DuplicateResourceException when the email is taken."""
        hashed = await asyncio.to_thread(get_password_hash, password)
        user = User(
            email=email.strip().lower(),
            hashed_password=hashed,
            full_name=full_name,
            role=role,
            is_active=True,
        )
        try:
            async with self.db.begin_nested():
                created = await self._add(user)
        except IntegrityError:
            raise DuplicateResourceException("user", "email", user.email) from None
        return _user_to_result(created)

    async def list_users(
        self, *, skip: int = 0, limit: int = 20
    ) -> tuple[list[UserResult], int]:
        result = await self.db.execute(
            select(User).order_by(User.created_at.desc()).offset(skip).limit(limit)
        )
        return [_user_to_result(u) for u in result.scalars().all()], await self._count()

    async def update(self, user_id: str, **fields: Any) -> UserResult | None:
        user = await self.update_fields(user_id, **fields)
        return _user_to_result(user) if user else None

    async def count(self) -> int:
        return await self._count()
