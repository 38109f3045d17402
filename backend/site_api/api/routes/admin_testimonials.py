"""Admin Testimonials: CRUD behind the admin gate."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.api.admin_gate import require_admin
from site_api.infrastructure.database import get_db
from site_api.models.testimonial import Testimonial
from site_api.schemas.content import (
    TestimonialCreate, TestimonialOut, TestimonialUpdate,
)
from site_api.services.content_store import (
    create_row, delete_row, list_rows, update_row,
)

router = APIRouter(
    prefix="/api/admin/testimonials", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("")
async def list_testimonials(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, Testimonial,
        order_by=[
            Testimonial.display_order.asc(), Testimonial.created_at.asc(),
        ],
    )
    return {"ok": True, "data": [TestimonialOut.model_validate(r) for r in rows]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    body: TestimonialCreate, db: AsyncSession = Depends(get_db),
):
    row = await create_row(db, Testimonial, body.model_dump())
    return {"ok": True, "data": TestimonialOut.model_validate(row)}


@router.patch("/{testimonial_id}")
async def update_testimonial(
    testimonial_id: UUID,
    body: TestimonialUpdate,
    db: AsyncSession = Depends(get_db),
):
    row = await update_row(
        db, Testimonial, testimonial_id, body.changes(), "Testimonial",
    )
    return {"ok": True, "data": TestimonialOut.model_validate(row)}


@router.delete("/{testimonial_id}")
async def delete_testimonial(
    testimonial_id: UUID, db: AsyncSession = Depends(get_db),
):
    await delete_row(db, Testimonial, testimonial_id)
    return {"ok": True}
