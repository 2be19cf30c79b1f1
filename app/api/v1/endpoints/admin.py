"""Admin operations API: dashboard stats, contact inbox, users and site settings.

Every route requires the admin role (router-level dependency).
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import (
    AdminUser,
    get_contact_service,
    get_dashboard_stats_use_case,
    get_settings_service,
    get_user_service,
    require_admin,
)
from app.application.services.contact_service import ContactService
from app.application.services.settings_service import SiteSettingsService
from app.application.services.user_service import UserService
from app.application.use_cases.admin_stats import GetDashboardStatsUseCase
from app.core.limiter import limit_writes
from app.schemas.admin import (
    DashboardStatsResponse,
    SiteSettingsResponse,
    SiteSettingsUpdateRequest,
)
from app.schemas.contact import ContactResponse, ContactUpdateRequest
from app.schemas.user import UserListResponse, UserResponse, UserRoleUpdate

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    use_case: Annotated[GetDashboardStatsUseCase, Depends(get_dashboard_stats_use_case)],
):
    return DashboardStatsResponse.model_validate(await use_case.get_dashboard_stats())


# ---- Contact inbox ----


@router.get("/contacts", response_model=list[ContactResponse])
async def admin_list_contacts(
    contact_svc: Annotated[ContactService, Depends(get_contact_service)],
    status: Literal["new", "read", "replied", "archived"] | None = Query(None),
):
    items = await contact_svc.list_contacts(status)
    return [ContactResponse.model_validate(c) for c in items]


@router.patch("/contacts/{contact_id}", response_model=ContactResponse)
@limit_writes
async def admin_update_contact(
    request: Request,
    contact_id: str,
    body: ContactUpdateRequest,
    contact_svc: Annotated[ContactService, Depends(get_contact_service)],
):
    contact = await contact_svc.update_contact(
        contact_id, **body.model_dump(exclude_unset=True, exclude_none=True)
    )
    return ContactResponse.model_validate(contact)


@router.delete("/contacts/{contact_id}", status_code=204)
@limit_writes
async def admin_delete_contact(
    request: Request,
    contact_id: str,
    contact_svc: Annotated[ContactService, Depends(get_contact_service)],
):
    await contact_svc.delete_contact(contact_id)
    return Response(status_code=204)


# ---- Users ----


@router.get("/users", response_model=UserListResponse)
async def admin_list_users(
    user_svc: Annotated[UserService, Depends(get_user_service)],
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
):
    items, total = await user_svc.list_users(skip=skip, limit=limit)
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.patch("/users/{user_id}/role", response_model=UserResponse)
@limit_writes
async def admin_set_user_role(
    request: Request,
    user_id: str,
    body: UserRoleUpdate,
    admin: AdminUser,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Grant or revoke admin. Admins cannot demote themselves."""
    user = await user_svc.set_role(user_id, body.role, acting_user_id=admin.id)
    return UserResponse.model_validate(user)


# ---- Site settings ----


@router.get("/settings", response_model=SiteSettingsResponse)
async def admin_get_settings(
    settings_svc: Annotated[SiteSettingsService, Depends(get_settings_service)],
):
    return SiteSettingsResponse(settings=await settings_svc.get_settings())


@router.put("/settings", response_model=SiteSettingsResponse)
@limit_writes
async def admin_update_settings(
    request: Request,
    body: SiteSettingsUpdateRequest,
    settings_svc: Annotated[SiteSettingsService, Depends(get_settings_service)],
):
    return SiteSettingsResponse(settings=await settings_svc.update_settings(body.settings))


@router.post("/settings/reset", response_model=SiteSettingsResponse)
@limit_writes
async def admin_reset_settings(
    request: Request,
    settings_svc: Annotated[SiteSettingsService, Depends(get_settings_service)],
):
    """Drop stored overrides; defaults apply again."""
    return SiteSettingsResponse(settings=await settings_svc.reset())
