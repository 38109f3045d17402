"""Admin Case Studies: CRUD behind the admin gate.

Invariants:
    - List includes unpublished rows, ordered by display_order then created_at
    - PATCH on a missing id → 404; DELETE on a missing id → {"ok": true}
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.api.admin_gate import require_admin
from site_api.infrastructure.database import get_db
from site_api.models.case_study import CaseStudy
from site_api.schemas.content import (
    CaseStudyCreate, CaseStudyOut, CaseStudyUpdate,
)
from site_api.services.content_store import (
    create_row, delete_row, list_rows, update_row,
)

router = APIRouter(
    prefix="/api/admin/case-studies", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("")
async def list_case_studies(db: AsyncSession = Depends(get_db)):
    rows = await list_rows(
        db, CaseStudy,
        order_by=[CaseStudy.display_order.asc(), CaseStudy.created_at.asc()],
    )
    return {"ok": True, "data": [CaseStudyOut.model_validate(r) for r in rows]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_case_study(
    body: CaseStudyCreate, db: AsyncSession = Depends(get_db),
):
    row = await create_row(db, CaseStudy, body.model_dump())
    return {"ok": True, "data": CaseStudyOut.model_validate(row)}


@router.patch("/{case_study_id}")
async def update_case_study(
    case_study_id: UUID,
    body: CaseStudyUpdate,
    db: AsyncSession = Depends(get_db),
):
    row = await update_row(
        db, CaseStudy, case_study_id, body.changes(), "Case study",
    )
    return {"ok": True, "data": CaseStudyOut.model_validate(row)}


@router.delete("/{case_study_id}")
async def delete_case_study(
    case_study_id: UUID, db: AsyncSession = Depends(get_db),
):
    await delete_row(db, CaseStudy, case_study_id)
    return {"ok": True}
