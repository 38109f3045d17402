"""Content Store: table-generic CRUD used by every public and admin route.

Invariants:
    - update_row raises ResourceNotFoundError when the id matches no row
    - delete_row is idempotent: deleting a missing id is not an error
    - Every write commits before returning, so the caller sees the stored row
"""

import logging
from typing import Any, Iterable, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from site_api.core.errors import ErrorContext, ResourceNotFoundError
from site_api.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


async def list_rows(
    db: AsyncSession,
    model: type[ModelT],
    *,
    where: Iterable[Any] = (),
    order_by: Iterable[Any] = (),
    limit: int | None = None,
    outerjoin: tuple | None = None,
) -> list[ModelT]:
    query = select(model)
    if outerjoin is not None:
        query = query.outerjoin(*outerjoin)
    query = query.where(*where).order_by(*order_by)
    if limit is not None:
        query = query.limit(limit)
    result = await db.execute(query)
    return list(result.scalars().all())


async def count_rows(
    db: AsyncSession, model: type[ModelT], *where: Any,
) -> int:
    result = await db.execute(
        select(func.count()).select_from(model).where(*where),
    )
    return result.scalar_one()


async def create_row(
    db: AsyncSession, model: type[ModelT], values: dict,
) -> ModelT:
    row = model(**values)
    db.add(row)
    await db.commit()
    logger.info(
        f"Inserted {model.__tablename__} row",
        extra={"table": model.__tablename__, "row_id": str(row.id)},
    )
    return row


async def get_row_or_404(
    db: AsyncSession, model: type[ModelT], row_id: UUID, label: str,
) -> ModelT:
    row = await db.get(model, row_id)
    if row is None:
        raise ResourceNotFoundError(
            label, str(row_id), ErrorContext(table=model.__tablename__),
        )
    return row


async def update_row(
    db: AsyncSession,
    model: type[ModelT],
    row_id: UUID,
    changes: dict,
    label: str,
) -> ModelT:
    """Apply a partial update; 404 if the row does not exist."""
    row = await get_row_or_404(db, model, row_id, label)
    for name, value in changes.items():
        setattr(row, name, value)
    await db.commit()
    logger.info(
        f"Updated {model.__tablename__} row",
        extra={"table": model.__tablename__, "row_id": str(row_id)},
    )
    return row


async def delete_row(
    db: AsyncSession, model: type[ModelT], row_id: UUID,
) -> None:
    await db.execute(delete(model).where(model.id == row_id))
    await db.commit()
    logger.info(
        f"Deleted {model.__tablename__} row",
        extra={"table": model.__tablename__, "row_id": str(row_id)},
    )
