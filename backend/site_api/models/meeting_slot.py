"""MeetingSlot ORM: bookable time windows created by admins.

Invariants:
    - is_booked flips to true only through the conditional claim in services/booking.py
    - Public listing shows unbooked slots ordered by (date, start_time)
"""

import uuid
import datetime as dt

from sqlalchemy import Boolean, Date, DateTime, Text, Time
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from site_api.db.base import Base


class MeetingSlot(Base):
    __tablename__ = "meeting_slots"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    start_time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    end_time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    is_booked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )
