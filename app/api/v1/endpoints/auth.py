"""Auth API: register, login and current user (get/update me).

Uses only injected dependencies (get_user_service); no manual repo
construction. JWT created via infrastructure security.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import CurrentUser, get_user_service
from app.application.services.user_service import UserService
from app.core.limiter import limit_auth, limit_writes
from app.infrastructure.security.jwt import create_access_token
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.schemas.user import UserResponse, UserUpdate

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
@limit_auth
async def register(
    request: Request,
    body: RegisterRequest,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Create a regular user account (public endpoint)."""
    user = await user_svc.register(body.email, body.password, body.full_name)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Authenticate with email and password; return a JWT."""
    user = await user_svc.authenticate(body.email, body.password)
    token = create_access_token(user.id, user.role)
    return TokenResponse(access_token=token, token_type="bearer")


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: CurrentUser):
    """Return the currently authenticated user.

    Requires Authorization: Bearer <token>.
    """
    return UserResponse.model_validate(current_user)


@router.patch("/me", response_model=UserResponse)
@limit_writes
async def update_me(
    request: Request,
    body: UserUpdate,
    current_user: CurrentUser,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's display name and/or avatar."""
    updated = await user_svc.update_profile(
        current_user.id, full_name=body.full_name, avatar_url=body.avatar_url
    )
    return UserResponse.model_validate(updated)
