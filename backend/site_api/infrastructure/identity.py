"""Identity Provider Client: resolves a bearer token to a user via Supabase auth.

Invariants:
    - GET {supabase_url}/auth/v1/user with the caller's token and the service-role apikey
    - 401/403/404 from the provider → UnauthenticatedError("Invalid session")
    - Transport failures and other statuses → IdentityProviderError (HTTP 500)
    - No retry, no caching: every call hits the provider

Design Decisions:
    - Wrapper over a raw httpx.AsyncClient isolates status mapping from the admin gate
    - transport injectable so tests use httpx.MockTransport instead of the network
"""

import logging
from dataclasses import dataclass
from uuid import UUID

import httpx

from site_api.config import Settings, get_settings
from site_api.core.errors import (
    UnauthenticatedError, IdentityProviderError,
)

logger = logging.getLogger(__name__)

INVALID_SESSION = "Invalid session"
_REJECTED_STATUSES = (401, 403, 404)


@dataclass(frozen=True)
class IdentityUser:
    """The subset of the provider's user object the API relies on."""
    id: UUID
    email: str | None = None


class SupabaseIdentityProvider:
    """Looks up the user behind an access token."""

    def __init__(
        self,
        base_url: str,
        service_role_key: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"apikey": service_role_key},
            timeout=timeout_seconds,
            transport=transport,
        )

    async def get_user(self, token: str) -> IdentityUser:
        """Validate the token; return the resolved user or raise."""
        try:
            response = await self.client.get(
                "/auth/v1/user",
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            logger.error(f"Identity provider unreachable: {e}")
            raise IdentityProviderError(str(e) or type(e).__name__) from e

        if response.status_code in _REJECTED_STATUSES:
            raise UnauthenticatedError(INVALID_SESSION)
        if response.status_code != 200:
            raise IdentityProviderError(
                f"Identity provider returned HTTP {response.status_code}",
            )
        return self._parse_user(response)

    def _parse_user(self, response: httpx.Response) -> IdentityUser:
        """A 200 without a usable user id is still an invalid session."""
        try:
            body = response.json()
        except ValueError as e:
            raise IdentityProviderError("Identity provider returned invalid JSON") from e
        raw_id = body.get("id") if isinstance(body, dict) else None
        try:
            user_id = UUID(str(raw_id))
        except ValueError:
            raise UnauthenticatedError(INVALID_SESSION)
        return IdentityUser(id=user_id, email=body.get("email"))

    async def aclose(self) -> None:
        await self.client.aclose()


# Singleton (built on first admin request)
identity_provider: SupabaseIdentityProvider | None = None


def build_identity_provider(settings: Settings) -> SupabaseIdentityProvider:
    """Build the client; raises ConfigError when Supabase settings are missing."""
    return SupabaseIdentityProvider(
        settings.require("supabase_url"),
        settings.require("supabase_service_role_key"),
        timeout_seconds=settings.identity_timeout_seconds,
    )


def get_identity_provider() -> SupabaseIdentityProvider:
    """FastAPI dependency: lazily built identity client."""
    global identity_provider
    if identity_provider is None:
        identity_provider = build_identity_provider(get_settings())
    return identity_provider
