"""Meeting Schemas: slots (admin-created) and requests (public bookings).

Invariants:
    - MeetingSlotCreate.end_time must be after start_time
    - MeetingRequestCreate never accepts status: new requests are always pending
    - MeetingRequestWithSlot exposes the joined slot under "meeting_slots"
      (the key the admin pages read)
"""

import datetime as dt
from uuid import UUID

from pydantic import EmailStr, Field, model_validator

from site_api.core.domain_types import MeetingStatus
from site_api.schemas.base import RequestModel, ResponseModel, UpdateModel


class MeetingSlotCreate(RequestModel):
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    notes: str | None = Field(None, max_length=1000)

    @model_validator(mode="after")
    def validate_window(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class MeetingSlotOut(ResponseModel):
    id: UUID
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    is_booked: bool
    notes: str | None
    created_at: dt.datetime


class MeetingRequestCreate(RequestModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    company: str | None = Field(None, max_length=200)
    topic: str | None = Field(None, max_length=2000)
    slot_id: UUID | None = None


class MeetingRequestUpdate(UpdateModel):
    non_nullable = ("status",)

    status: MeetingStatus | None = None
    meeting_link: str | None = Field(None, max_length=2000)


class MeetingRequestOut(ResponseModel):
    id: UUID
    name: str
    email: str
    company: str | None
    topic: str | None
    status: str
    slot_id: UUID | None
    meeting_link: str | None
    created_at: dt.datetime


class MeetingRequestWithSlot(MeetingRequestOut):
    meeting_slots: MeetingSlotOut | None = Field(None, validation_alias="slot")
