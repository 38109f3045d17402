"""Public Submissions: contact form and meeting booking.

Invariants:
    - Bodies validated by strict schemas before any store call
    - Contact inquiries are stored unread
    - Meeting requests are stored pending; a given slot is claimed atomically
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.infrastructure.database import get_db
from site_api.models.contact_inquiry import ContactInquiry
from site_api.schemas.inquiries import ContactInquiryCreate, ContactInquiryOut
from site_api.schemas.meetings import MeetingRequestCreate, MeetingRequestOut
from site_api.services.booking import book_meeting
from site_api.services.content_store import create_row

router = APIRouter(prefix="/api", tags=["public"])


@router.post("/contact", status_code=status.HTTP_201_CREATED)
async def submit_contact(
    body: ContactInquiryCreate, db: AsyncSession = Depends(get_db),
):
    row = await create_row(
        db, ContactInquiry, {**body.model_dump(), "is_read": False},
    )
    return {"ok": True, "data": ContactInquiryOut.model_validate(row)}


@router.post("/meeting-request", status_code=status.HTTP_201_CREATED)
async def submit_meeting_request(
    body: MeetingRequestCreate, db: AsyncSession = Depends(get_db),
):
    row = await book_meeting(db, body)
    return {"ok": True, "data": MeetingRequestOut.model_validate(row)}
