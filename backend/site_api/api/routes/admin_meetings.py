"""Admin Meetings: slot management and meeting request triage.

Invariants:
    - Slots: list (date, start_time ascending, booked included), create, delete; no update
    - Requests: list newest first with the joined slot under "meeting_slots";
      PATCH status/meeting_link; delete
    - Deleting a request does not release its slot
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.api.admin_gate import require_admin
from site_api.infrastructure.database import get_db
from site_api.models.meeting_request import MeetingRequest
from site_api.models.meeting_slot import MeetingSlot
from site_api.schemas.meetings import (
    MeetingRequestUpdate, MeetingRequestWithSlot,
    MeetingSlotCreate, MeetingSlotOut,
)
from site_api.services.content_store import (
    create_row, delete_row, list_rows, update_row,
)

router = APIRouter(
    prefix="/api/admin", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


# --- Slots --------------------------------------------------------------------

@router.get("/meeting-slots")
async def list_slots(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, MeetingSlot,
        order_by=[MeetingSlot.date.asc(), MeetingSlot.start_time.asc()],
    )
    return {"ok": True, "data": [MeetingSlotOut.model_validate(r) for r in rows]}


@router.post("/meeting-slots", status_code=status.HTTP_201_CREATED)
async def create_slot(
    body: MeetingSlotCreate, db: AsyncSession = Depends(get_db),
):
    row = await create_row(
        db, MeetingSlot, {**body.model_dump(), "is_booked": False},
    )
    return {"ok": True, "data": MeetingSlotOut.model_validate(row)}


@router.delete("/meeting-slots/{slot_id}")
async def delete_slot(slot_id: UUID, db: AsyncSession = Depends(get_db)):
    await delete_row(db, MeetingSlot, slot_id)
    return {"ok": True}


# --- Requests -----------------------------------------------------------------

@router.get("/meeting-requests")
async def list_requests(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, MeetingRequest, order_by=[MeetingRequest.created_at.desc()],
    )
    return {
        "ok": True,
        "data": [MeetingRequestWithSlot.model_validate(r) for r in rows],
    }


@router.patch("/meeting-requests/{request_id}")
async def update_request(
    request_id: UUID,
    body: MeetingRequestUpdate,
    db: AsyncSession = Depends(get_db),
):
    row = await update_row(
        db, MeetingRequest, request_id, body.changes(), "Meeting request",
    )
    return {"ok": True, "data": MeetingRequestWithSlot.model_validate(row)}


@router.delete("/meeting-requests/{request_id}")
async def delete_request(
    request_id: UUID, db: AsyncSession = Depends(get_db),
):
    await delete_row(db, MeetingRequest, request_id)
    return {"ok": True}
