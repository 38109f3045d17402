"""Content Schemas: case studies, testimonials, team members, blog posts.

Invariants:
    - Create schemas require every non-nullable column without a default
    - Update schemas never accept id/created_at/updated_at/published_at
    - BlogPost.slug: lowercase words joined by hyphens
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from site_api.core.domain_types import PostCategory
from site_api.schemas.base import RequestModel, ResponseModel, UpdateModel

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


# --- Case studies -------------------------------------------------------------

class CaseStudyCreate(RequestModel):
    title: str = Field(min_length=1, max_length=300)
    industry: str | None = Field(None, max_length=200)
    challenge: str = Field(min_length=1)
    solution: str = Field(min_length=1)
    outcome: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    is_published: bool = True
    display_order: int = 0


class CaseStudyUpdate(UpdateModel):
    non_nullable = (
        "title", "challenge", "solution", "outcome", "is_published", "display_order",
    )

    title: str | None = Field(None, min_length=1, max_length=300)
    industry: str | None = Field(None, max_length=200)
    challenge: str | None = Field(None, min_length=1)
    solution: str | None = Field(None, min_length=1)
    outcome: str | None = Field(None, min_length=1)
    tags: list[str] | None = None
    is_published: bool | None = None
    display_order: int | None = None


class CaseStudyOut(ResponseModel):
    id: UUID
    title: str
    industry: str | None
    challenge: str
    solution: str
    outcome: str
    tags: list[str] | None
    is_published: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


# --- Testimonials -------------------------------------------------------------

class TestimonialCreate(RequestModel):
    quote: str = Field(min_length=1)
    author_role: str = Field(min_length=1, max_length=300)
    is_published: bool = True
    display_order: int = 0


class TestimonialUpdate(UpdateModel):
    non_nullable = ("quote", "author_role", "is_published", "display_order")

    quote: str | None = Field(None, min_length=1)
    author_role: str | None = Field(None, min_length=1, max_length=300)
    is_published: bool | None = None
    display_order: int | None = None


class TestimonialOut(ResponseModel):
    id: UUID
    quote: str
    author_role: str
    is_published: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


# --- Team members -------------------------------------------------------------

class TeamMemberCreate(RequestModel):
    name: str = Field(min_length=1, max_length=200)
    title: str = Field(min_length=1, max_length=200)
    bio: str = Field(min_length=1)
    image_url: str | None = Field(None, max_length=2000)
    is_published: bool = True
    display_order: int = 0


class TeamMemberUpdate(UpdateModel):
    non_nullable = ("name", "title", "bio", "is_published", "display_order")

    name: str | None = Field(None, min_length=1, max_length=200)
    title: str | None = Field(None, min_length=1, max_length=200)
    bio: str | None = Field(None, min_length=1)
    image_url: str | None = Field(None, max_length=2000)
    is_published: bool | None = None
    display_order: int | None = None


class TeamMemberOut(ResponseModel):
    id: UUID
    name: str
    title: str
    bio: str
    image_url: str | None
    is_published: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


# --- Blog posts ---------------------------------------------------------------

class BlogPostCreate(RequestModel):
    title: str = Field(min_length=1, max_length=300)
    slug: str = Field(min_length=1, max_length=200, pattern=SLUG_PATTERN)
    category: PostCategory = PostCategory.BLOG.value
    content: str = Field(min_length=1)
    excerpt: str | None = Field(None, max_length=1000)
    author: str | None = Field(None, max_length=200)
    featured_image_url: str | None = Field(None, max_length=2000)
    tags: list[str] = Field(default_factory=list)
    is_published: bool = False
    display_order: int = 0


class BlogPostUpdate(UpdateModel):
    non_nullable = (
        "title", "slug", "category", "content", "is_published", "display_order",
    )

    title: str | None = Field(None, min_length=1, max_length=300)
    slug: str | None = Field(None, min_length=1, max_length=200, pattern=SLUG_PATTERN)
    category: PostCategory | None = None
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = Field(None, max_length=1000)
    author: str | None = Field(None, max_length=200)
    featured_image_url: str | None = Field(None, max_length=2000)
    tags: list[str] | None = None
    is_published: bool | None = None
    display_order: int | None = None


class BlogPostOut(ResponseModel):
    id: UUID
    title: str
    slug: str
    category: str
    content: str
    excerpt: str | None
    author: str | None
    featured_image_url: str | None
    tags: list[str] | None
    is_published: bool
    published_at: datetime | None
    display_order: int
    created_at: datetime
    updated_at: datetime
