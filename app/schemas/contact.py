"""Contact form API schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactCreateRequest(BaseModel):
    """Public contact form submission."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    subject: str | None = Field(default=None, max_length=255)
    message: str = Field(..., min_length=1, max_length=5000)


class ContactUpdateRequest(BaseModel):
    """Admin triage of a contact query."""

    status: Literal["new", "read", "replied", "archived"] | None = None
    admin_notes: str | None = None


class ContactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    subject: str | None = None
    message: str
    status: str
    admin_notes: str | None = None
    replied_at: datetime | None = None
    created_at: datetime | None = None


class ContactSubmittedResponse(BaseModel):
    success: bool = True
    message: str = "Thanks for reaching out. We will get back to you soon."
