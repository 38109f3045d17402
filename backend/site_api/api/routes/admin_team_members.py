"""Admin Team Members: CRUD for the about-page roster behind the admin gate."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.api.admin_gate import require_admin
from site_api.infrastructure.database import get_db
from site_api.models.team_member import TeamMember
from site_api.schemas.content import (
    TeamMemberCreate, TeamMemberOut, TeamMemberUpdate,
)
from site_api.services.content_store import (
    create_row, delete_row, list_rows, update_row,
)

router = APIRouter(
    prefix="/api/admin/team-members", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("")
async def list_team_members(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, TeamMember,
        order_by=[TeamMember.display_order.asc(), TeamMember.created_at.asc()],
    )
    return {"ok": True, "data": [TeamMemberOut.model_validate(r) for r in rows]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_team_member(
    body: TeamMemberCreate, db: AsyncSession = Depends(get_db),
):
    row = await create_row(db, TeamMember, body.model_dump())
    return {"ok": True, "data": TeamMemberOut.model_validate(row)}


@router.patch("/{member_id}")
async def update_team_member(
    member_id: UUID,
    body: TeamMemberUpdate,
    db: AsyncSession = Depends(get_db),
):
    row = await update_row(
        db, TeamMember, member_id, body.changes(), "Team member",
    )
    return {"ok": True, "data": TeamMemberOut.model_validate(row)}


@router.delete("/{member_id}")
async def delete_team_member(
    member_id: UUID, db: AsyncSession = Depends(get_db),
):
    await delete_row(db, TeamMember, member_id)
    return {"ok": True}
