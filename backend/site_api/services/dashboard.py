"""Dashboard Aggregation: concurrent count/list queries merged into one payload.

Invariants:
    - Each sub-query runs in its own session (an AsyncSession is not concurrency-safe)
    - asyncio.gather joins all sub-queries; the first failure fails the whole call
    - No partial results are returned
"""

import asyncio

from site_api.core.dashboard_stats import (
    DashboardCounts, DashboardLists, build_dashboard_payload,
)
from site_api.core.domain_types import (
    MeetingStatus, RECENT_INQUIRIES_LIMIT, UPCOMING_MEETINGS_LIMIT,
)
from site_api.infrastructure.database import DatabaseSessionManager
from site_api.models.blog_post import BlogPost
from site_api.models.case_study import CaseStudy
from site_api.models.contact_inquiry import ContactInquiry
from site_api.models.meeting_request import MeetingRequest
from site_api.models.meeting_slot import MeetingSlot
from site_api.models.team_member import TeamMember
from site_api.models.testimonial import Testimonial
from site_api.schemas.inquiries import ContactInquiryOut
from site_api.schemas.meetings import MeetingRequestWithSlot
from site_api.services.content_store import count_rows, list_rows


async def _count(manager: DatabaseSessionManager, model, *where) -> int:
    async with manager.session() as db:
        return await count_rows(db, model, *where)


async def _recent_inquiries(manager: DatabaseSessionManager) -> list:
    async with manager.session() as db:
        rows = await list_rows(
            db, ContactInquiry,
            order_by=[ContactInquiry.created_at.desc()],
            limit=RECENT_INQUIRIES_LIMIT,
        )
        return [ContactInquiryOut.model_validate(r) for r in rows]


async def _upcoming_meetings(manager: DatabaseSessionManager) -> list:
    """Soonest pending requests by slot date/time; requests without a slot sort last."""
    async with manager.session() as db:
        rows = await list_rows(
            db, MeetingRequest,
            where=[MeetingRequest.status == MeetingStatus.PENDING.value],
            order_by=[
                MeetingSlot.date.is_(None),
                MeetingSlot.date.asc(),
                MeetingSlot.start_time.asc(),
                MeetingRequest.created_at.asc(),
            ],
            limit=UPCOMING_MEETINGS_LIMIT,
            outerjoin=(MeetingSlot, MeetingRequest.slot_id == MeetingSlot.id),
        )
        return [MeetingRequestWithSlot.model_validate(r) for r in rows]


async def collect_dashboard(manager: DatabaseSessionManager) -> dict:
    (
        case_studies, testimonials, team_members, blog_posts,
        pending_meetings, unread_inquiries,
        recent_inquiries, upcoming_meetings,
    ) = await asyncio.gather(
        _count(manager, CaseStudy, CaseStudy.is_published.is_(True)),
        _count(manager, Testimonial, Testimonial.is_published.is_(True)),
        _count(manager, TeamMember, TeamMember.is_published.is_(True)),
        _count(manager, BlogPost, BlogPost.is_published.is_(True)),
        _count(
            manager, MeetingRequest,
            MeetingRequest.status == MeetingStatus.PENDING.value,
        ),
        _count(manager, ContactInquiry, ContactInquiry.is_read.is_(False)),
        _recent_inquiries(manager),
        _upcoming_meetings(manager),
    )
    return build_dashboard_payload(
        DashboardCounts(
            case_studies=case_studies,
            testimonials=testimonials,
            team_members=team_members,
            blog_posts=blog_posts,
            pending_meetings=pending_meetings,
            unread_inquiries=unread_inquiries,
        ),
        DashboardLists(
            recent_inquiries=recent_inquiries,
            upcoming_meetings=upcoming_meetings,
        ),
    )
