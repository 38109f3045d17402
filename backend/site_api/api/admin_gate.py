"""Admin Gate: bearer token → identity provider → user_roles lookup.

Invariants:
    - Missing header, or no "Bearer " prefix → 401 "Missing Authorization Bearer token"
    - Provider rejects the token → 401 "Invalid session"
    - No user_roles row → 403 "No admin role"; role other than admin → 403 "Forbidden"
    - Evaluated on every admin request; nothing cached between requests
    - On success the CurrentUser is stored on request.state.user

Design Decisions:
    - FastAPI dependency attached to the admin routers, not middleware:
      public routes never touch the identity provider
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from fastapi import Depends, Header, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.core.domain_types import AppRole
from site_api.core.errors import (
    ErrorContext, ForbiddenError, UnauthenticatedError,
)
from site_api.infrastructure.database import get_db
from site_api.infrastructure.identity import (
    SupabaseIdentityProvider, get_identity_provider,
)
from site_api.models.user_role import UserRole

logger = logging.getLogger(__name__)

MISSING_TOKEN = "Missing Authorization Bearer token"
BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated admin behind the current request."""
    id: UUID
    email: str | None
    role: str

    def to_dict(self) -> dict:
        return {"id": str(self.id), "email": self.email, "role": self.role}


def extract_bearer_token(authorization: str | None = Header(None)) -> str:
    """Token from the Authorization header, or UnauthenticatedError.

    Declared first in require_admin so it runs before the store and
    identity dependencies are built.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthenticatedError(MISSING_TOKEN)
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthenticatedError(MISSING_TOKEN)
    return token


async def lookup_role(db: AsyncSession, user_id: UUID) -> str | None:
    result = await db.execute(
        select(UserRole.role).where(UserRole.user_id == user_id).limit(1),
    )
    return result.scalar_one_or_none()


async def require_admin(
    request: Request,
    token: str = Depends(extract_bearer_token),
    db: AsyncSession = Depends(get_db),
    identity: SupabaseIdentityProvider = Depends(get_identity_provider),
) -> CurrentUser:
    """FastAPI dependency guarding /api/admin/* routes."""
    user = await identity.get_user(token)

    role = await lookup_role(db, user.id)
    ctx = ErrorContext(user_id=str(user.id), table="user_roles")
    if role is None:
        logger.warning(
            "Admin access denied: no role",
            extra={"user_id": str(user.id), "path": request.url.path},
        )
        raise ForbiddenError("No admin role", ctx)
    if role != AppRole.ADMIN.value:
        logger.warning(
            f"Admin access denied: role {role}",
            extra={"user_id": str(user.id), "path": request.url.path},
        )
        raise ForbiddenError("Forbidden", ctx)

    current = CurrentUser(id=user.id, email=user.email, role=role)
    request.state.user = current
    return current
