"""Public Content: read-only published content for the marketing pages.

Invariants:
    - Only published rows (case studies, testimonials, team members, blog posts) are exposed
    - Meeting slots: unbooked only, ordered by (date, start_time) ascending
    - Empty tables yield {"ok": true, "data": []}, never an error
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.core.domain_types import PostCategory
from site_api.core.errors import ErrorContext, ResourceNotFoundError
from site_api.infrastructure.database import get_db
from site_api.models.blog_post import BlogPost
from site_api.models.case_study import CaseStudy
from site_api.models.meeting_slot import MeetingSlot
from site_api.models.team_member import TeamMember
from site_api.models.testimonial import Testimonial
from site_api.schemas.content import (
    BlogPostOut, CaseStudyOut, TeamMemberOut, TestimonialOut,
)
from site_api.schemas.meetings import MeetingSlotOut
from site_api.services.content_store import list_rows

router = APIRouter(prefix="/api", tags=["public"])


@router.get("/case-studies")
async def list_case_studies(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, CaseStudy,
        where=[CaseStudy.is_published.is_(True)],
        order_by=[CaseStudy.display_order.asc(), CaseStudy.created_at.asc()],
    )
    return {"ok": True, "data": [CaseStudyOut.model_validate(r) for r in rows]}


@router.get("/testimonials")
async def list_testimonials(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, Testimonial,
        where=[Testimonial.is_published.is_(True)],
        order_by=[
            Testimonial.display_order.asc(), Testimonial.created_at.asc(),
        ],
    )
    return {"ok": True, "data": [TestimonialOut.model_validate(r) for r in rows]}


@router.get("/team-members")
async def list_team_members(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, TeamMember,
        where=[TeamMember.is_published.is_(True)],
        order_by=[TeamMember.display_order.asc(), TeamMember.created_at.asc()],
    )
    return {"ok": True, "data": [TeamMemberOut.model_validate(r) for r in rows]}


@router.get("/meeting-slots")
async def list_available_slots(db: AsyncSession = Depends(get_db)):
    """Slots open for booking on the contact page."""
    rows = await list_rows(
        db, MeetingSlot,
        where=[MeetingSlot.is_booked.is_(False)],
        order_by=[MeetingSlot.date.asc(), MeetingSlot.start_time.asc()],
    )
    return {"ok": True, "data": [MeetingSlotOut.model_validate(r) for r in rows]}


@router.get("/blog-posts")
async def list_blog_posts(
    category: PostCategory | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Published posts, newest first; optionally one category."""
    where = [BlogPost.is_published.is_(True)]
    if category is not None:
        where.append(BlogPost.category == category.value)
    rows = await list_rows(
        db, BlogPost,
        where=where,
        order_by=[BlogPost.published_at.desc(), BlogPost.created_at.desc()],
    )
    return {"ok": True, "data": [BlogPostOut.model_validate(r) for r in rows]}


@router.get("/blog-posts/{slug}")
async def get_blog_post(slug: str, db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, BlogPost,
        where=[BlogPost.slug == slug, BlogPost.is_published.is_(True)],
        limit=1,
    )
    if not rows:
        raise ResourceNotFoundError(
            "Blog post", slug, ErrorContext(table="blog_posts"),
        )
    return {"ok": True, "data": BlogPostOut.model_validate(rows[0])}
