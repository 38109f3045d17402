"""Domain Types: enums and identity types shared by models, schemas and routes.

Invariants:
    - All valid states encoded as Enums (no raw string matching in routes)
    - str Enums: values are exactly what the store holds in text columns
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
RowId = NewType("RowId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class AppRole(str, Enum):
    """Values of user_roles.role. Only ADMIN passes the admin gate."""
    ADMIN = "admin"
    USER = "user"


class MeetingStatus(str, Enum):
    """Meeting request lifecycle; created as PENDING by the public form."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DONE = "done"
    POSTPONED = "postponed"
    CANCELLED = "cancelled"


class PostCategory(str, Enum):
    """Blog post categories shown as separate lists on the insights page."""
    BLOG = "blog"
    ARTICLE = "article"


# Dashboard list sizes
RECENT_INQUIRIES_LIMIT = 5
UPCOMING_MEETINGS_LIMIT = 5
