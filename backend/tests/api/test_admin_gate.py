"""Admin Gate: bearer extraction, session validation, role lookup.

Invariants:
    - No/invalid Authorization header → 401 "Missing Authorization Bearer token"
    - Unknown token → 401 "Invalid session"
    - Validated user without a user_roles row → 403 "No admin role"
    - Validated user with role "user" → 403 "Forbidden"
    - Identity provider outage → 500 with the provider's message
    - The gate runs on every request (no caching)
"""

import pytest

from tests.api.fake_identity import (
    ADMIN_ID, ADMIN_TOKEN, OUTAGE_TOKEN, STRANGER_TOKEN,
)

ADMIN_ROUTES = [
    ("GET", "/api/admin/case-studies"),
    ("DELETE", "/api/admin/case-studies/8f14e45f-ceea-4e6b-9c3d-3f2e1a0b9c11"),
    ("GET", "/api/admin/testimonials"),
    ("GET", "/api/admin/team-members"),
    ("GET", "/api/admin/meeting-slots"),
    ("GET", "/api/admin/meeting-requests"),
    ("GET", "/api/admin/blog-posts"),
    ("GET", "/api/admin/contact-inquiries"),
    ("GET", "/api/admin/dashboard"),
    ("GET", "/api/admin/me"),
]


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
async def test_missing_header_returns_401(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 401
    assert res.json() == {"error": "Missing Authorization Bearer token"}


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
async def test_unknown_token_returns_invalid_session(client, method, path):
    res = await client.request(
        method, path, headers={"Authorization": "Bearer not-a-real-token"},
    )
    assert res.status_code == 401
    assert res.json() == {"error": "Invalid session"}


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
async def test_user_without_role_row_is_forbidden(client, method, path):
    res = await client.request(
        method, path, headers={"Authorization": f"Bearer {STRANGER_TOKEN}"},
    )
    assert res.status_code == 403
    assert res.json() == {"error": "No admin role"}


async def test_non_admin_role_is_forbidden(client, editor_headers):
    res = await client.get("/api/admin/case-studies", headers=editor_headers)
    assert res.status_code == 403
    assert res.json() == {"error": "Forbidden"}


async def test_basic_scheme_is_treated_as_missing_bearer(client):
    res = await client.get(
        "/api/admin/me", headers={"Authorization": "Basic dXNlcjpwYXNz"},
    )
    assert res.status_code == 401
    assert res.json() == {"error": "Missing Authorization Bearer token"}


async def test_empty_bearer_token_is_treated_as_missing(client):
    res = await client.get("/api/admin/me", headers={"Authorization": "Bearer "})
    assert res.status_code == 401
    assert res.json()["error"] == "Missing Authorization Bearer token"


async def test_missing_header_never_reaches_identity_provider(client, identity):
    await client.get("/api/admin/case-studies")
    assert identity.calls == []


async def test_identity_outage_returns_500_with_message(client):
    res = await client.get(
        "/api/admin/me", headers={"Authorization": f"Bearer {OUTAGE_TOKEN}"},
    )
    assert res.status_code == 500
    assert res.json() == {"error": "All connection attempts failed"}


async def test_me_echoes_authenticated_admin(client, admin_headers):
    res = await client.get("/api/admin/me", headers=admin_headers)
    assert res.status_code == 200
    assert res.json() == {
        "ok": True,
        "data": {
            "id": str(ADMIN_ID), "email": "admin@firm.example.com", "role": "admin",
        },
    }


async def test_gate_is_reevaluated_on_every_request(client, admin_headers, identity):
    await client.get("/api/admin/me", headers=admin_headers)
    await client.get("/api/admin/me", headers=admin_headers)
    assert identity.calls == [ADMIN_TOKEN, ADMIN_TOKEN]


async def test_public_routes_skip_the_gate(client, identity):
    res = await client.get("/api/case-studies")
    assert res.status_code == 200
    assert identity.calls == []
