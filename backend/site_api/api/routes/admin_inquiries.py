"""Admin Contact Inquiries: list, mark read, delete."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.api.admin_gate import require_admin
from site_api.infrastructure.database import get_db
from site_api.models.contact_inquiry import ContactInquiry
from site_api.schemas.inquiries import ContactInquiryOut, ContactInquiryUpdate
from site_api.services.content_store import delete_row, list_rows, update_row

router = APIRouter(
    prefix="/api/admin/contact-inquiries", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("")
async def list_inquiries(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, ContactInquiry, order_by=[ContactInquiry.created_at.desc()],
    )
    return {
        "ok": True,
        "data": [ContactInquiryOut.model_validate(r) for r in rows],
    }


@router.patch("/{inquiry_id}")
async def update_inquiry(
    inquiry_id: UUID,
    body: ContactInquiryUpdate,
    db: AsyncSession = Depends(get_db),
):
    row = await update_row(
        db, ContactInquiry, inquiry_id, body.changes(), "Contact inquiry",
    )
    return {"ok": True, "data": ContactInquiryOut.model_validate(row)}


@router.delete("/{inquiry_id}")
async def delete_inquiry(
    inquiry_id: UUID, db: AsyncSession = Depends(get_db),
):
    await delete_row(db, ContactInquiry, inquiry_id)
    return {"ok": True}
