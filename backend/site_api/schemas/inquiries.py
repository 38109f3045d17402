"""Contact Inquiry Schemas: public contact form and admin read-tracking."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from site_api.schemas.base import RequestModel, ResponseModel, UpdateModel


class ContactInquiryCreate(RequestModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    message: str = Field(min_length=1, max_length=10_000)
    company: str | None = Field(None, max_length=200)
    role_title: str | None = Field(None, max_length=200)


class ContactInquiryUpdate(UpdateModel):
    non_nullable = ("is_read",)

    is_read: bool | None = None


class ContactInquiryOut(ResponseModel):
    id: UUID
    name: str
    email: str
    message: str
    company: str | None
    role_title: str | None
    is_read: bool
    created_at: datetime
