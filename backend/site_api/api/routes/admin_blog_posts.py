"""Admin Blog Posts: CRUD behind the admin gate, with publication stamping.

Invariants:
    - published_at follows core/publishing.py: stamped on publish, cleared on unpublish
    - Duplicate slug surfaces as a StoreError (unique constraint in the store)
"""

from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.api.admin_gate import require_admin
from site_api.core.publishing import stamp_publication
from site_api.infrastructure.database import get_db
from site_api.models.blog_post import BlogPost
from site_api.schemas.content import BlogPostCreate, BlogPostOut, BlogPostUpdate
from site_api.services.content_store import (
    create_row, delete_row, get_row_or_404, list_rows, update_row,
)

router = APIRouter(
    prefix="/api/admin/blog-posts", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("")
async def list_blog_posts(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, BlogPost,
        order_by=[BlogPost.display_order.asc(), BlogPost.created_at.desc()],
    )
    return {"ok": True, "data": [BlogPostOut.model_validate(r) for r in rows]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    body: BlogPostCreate, db: AsyncSession = Depends(get_db),
):
    values = stamp_publication(
        body.model_dump(), was_published=False,
        now=datetime.now(timezone.utc),
    )
    row = await create_row(db, BlogPost, values)
    return {"ok": True, "data": BlogPostOut.model_validate(row)}


@router.patch("/{post_id}")
async def update_blog_post(
    post_id: UUID,
    body: BlogPostUpdate,
    db: AsyncSession = Depends(get_db),
):
    current = await get_row_or_404(db, BlogPost, post_id, "Blog post")
    changes = stamp_publication(
        body.changes(), was_published=current.is_published,
        now=datetime.now(timezone.utc),
    )
    row = await update_row(db, BlogPost, post_id, changes, "Blog post")
    return {"ok": True, "data": BlogPostOut.model_validate(row)}


@router.delete("/{post_id}")
async def delete_blog_post(
    post_id: UUID, db: AsyncSession = Depends(get_db),
):
    await delete_row(db, BlogPost, post_id)
    return {"ok": True}
