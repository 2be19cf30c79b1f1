"""User application service: registration, sign-in, profile and roles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.user import UserResult
from app.domain.enums import UserRole
from app.domain.exceptions import (
    AuthenticationException,
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IUserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class UserService:
    def __init__(self, user_repo: "IUserRepository") -> None:
        self.user_repo = user_repo

    async def register(
        self, email: str, password: str, full_name: str | None = None
    ) -> UserResult:
        """Create a regular user. Raises DuplicateResourceException if email is taken."""
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationException(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
            )
        email = email.strip().lower()
        if await self.user_repo.get_by_email(email) is not None:
            raise DuplicateResourceException("user", "email", email)
        user = await self.user_repo.create_user(email, password, full_name)
        logger.info("Registered user %s", user.id)
        return user

    async def authenticate(self, email: str, password: str) -> UserResult:
        user = await self.user_repo.authenticate(email.strip().lower(), password)
        if user is None:
            raise AuthenticationException("Invalid email or password")
        return user

    async def get_user(self, user_id: str) -> UserResult:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user

    async def update_profile(
        self,
        user_id: str,
        full_name: str | None = None,
        avatar_url: str | None = None,
    ) -> UserResult:
        fields = {
            k: v
            for k, v in (("full_name", full_name), ("avatar_url", avatar_url))
            if v is not None
        }
        if not fields:
            raise ValidationException("At least one of full_name or avatar_url is required")
        updated = await self.user_repo.update(user_id, **fields)
        if updated is None:
            raise ResourceNotFoundException("user", user_id)
        return updated

    async def list_users(
        self, *, skip: int = 0, limit: int = 20
    ) -> tuple[list[UserResult], int]:
        return await self.user_repo.list_users(skip=skip, limit=limit)

    async def set_role(self, user_id: str, role: str, acting_user_id: str) -> UserResult:
        if role not in {r.value for r in UserRole}:
            raise ValidationException(f"Invalid role '{role}'", field="role")
        if user_id == acting_user_id and role != UserRole.ADMIN.value:
            raise ValidationException("Admins cannot remove their own admin role", field="role")
        updated = await self.user_repo.update(user_id, role=role)
        if updated is None:
            raise ResourceNotFoundException("user", user_id)
        logger.info("User %s role set to %s by %s", user_id, role, acting_user_id)
        return updated
