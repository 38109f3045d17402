"""Meeting Booking: public meeting requests that claim a slot.

Invariants:
    - A slot is claimed with a conditional UPDATE (is_booked = false → true);
      two concurrent bookings of one slot cannot both succeed
    - The claim and the request insert commit together; a failed claim inserts nothing
    - Missing slot → ResourceNotFoundError (404); already booked → SlotUnavailableError (409)
"""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.core.domain_types import MeetingStatus
from site_api.core.errors import (
    ErrorContext, ResourceNotFoundError, SlotUnavailableError,
)
from site_api.models.meeting_request import MeetingRequest
from site_api.models.meeting_slot import MeetingSlot
from site_api.schemas.meetings import MeetingRequestCreate

logger = logging.getLogger(__name__)


async def claim_slot(db: AsyncSession, slot_id: UUID) -> None:
    """Mark the slot booked inside the caller's transaction, or raise."""
    result = await db.execute(
        update(MeetingSlot)
        .where(MeetingSlot.id == slot_id, MeetingSlot.is_booked.is_(False))
        .values(is_booked=True)
        .execution_options(synchronize_session=False),
    )
    if result.rowcount:
        return
    exists = await db.scalar(
        select(MeetingSlot.id).where(MeetingSlot.id == slot_id),
    )
    if exists is None:
        raise ResourceNotFoundError(
            "Meeting slot", str(slot_id), ErrorContext(table="meeting_slots"),
        )
    logger.warning(
        "Meeting slot already booked",
        extra={"table": "meeting_slots", "row_id": str(slot_id)},
    )
    raise SlotUnavailableError(str(slot_id))


async def book_meeting(
    db: AsyncSession, body: MeetingRequestCreate,
) -> MeetingRequest:
    """Create a pending meeting request, claiming its slot when one is given."""
    if body.slot_id is not None:
        await claim_slot(db, body.slot_id)
    request = MeetingRequest(
        **body.model_dump(), status=MeetingStatus.PENDING.value,
    )
    db.add(request)
    await db.commit()
    logger.info(
        "Meeting requested",
        extra={"table": "meeting_requests", "row_id": str(request.id)},
    )
    return request
