"""Admin Dashboard & Identity Echo.

Invariants:
    - /dashboard fans out in services/dashboard.py; any sub-query error fails the response
    - /me echoes the CurrentUser resolved by the admin gate
"""

from fastapi import APIRouter, Depends

from site_api.api.admin_gate import CurrentUser, require_admin
from site_api.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from site_api.services.dashboard import collect_dashboard

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/dashboard", dependencies=[Depends(require_admin)])
async def dashboard(
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    return await collect_dashboard(manager)


@router.get("/me")
async def me(user: CurrentUser = Depends(require_admin)):
    return {"ok": True, "data": user.to_dict()}
