"""MeetingRequest ORM: public booking requests, triaged by admins.

Invariants:
    - status is one of MeetingStatus; created as "pending"
    - slot_id, when present, references meeting_slots.id (SET NULL on slot delete)
    - slot relationship eager-loaded (selectin) so admin lists can embed it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from site_api.db.base import Base
from site_api.core.domain_types import MeetingStatus
from site_api.models.meeting_slot import MeetingSlot


class MeetingRequest(Base):
    __tablename__ = "meeting_requests"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    company: Mapped[str | None] = mapped_column(Text, nullable=True)
    topic: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=MeetingStatus.PENDING.value,
    )
    slot_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("meeting_slots.id", ondelete="SET NULL"),
        nullable=True,
    )
    meeting_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    slot: Mapped[MeetingSlot | None] = relationship(
        MeetingSlot, lazy="selectin",
    )
