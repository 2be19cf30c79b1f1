"""Public contact form."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_contact_service
from app.application.services.contact_service import ContactService
from app.core.limiter import limit_contact
from app.schemas.contact import ContactCreateRequest, ContactSubmittedResponse

router = APIRouter()


@router.post("", response_model=ContactSubmittedResponse, status_code=201)
@limit_contact
async def submit_contact(
    request: Request,
    body: ContactCreateRequest,
    contact_svc: Annotated[ContactService, Depends(get_contact_service)],
):
    await contact_svc.submit(body.name, str(body.email), body.subject, body.message)
    return ContactSubmittedResponse()
