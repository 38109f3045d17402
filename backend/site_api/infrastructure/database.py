"""Store Access: async SQLAlchemy engine over the Supabase Postgres database.

Invariants:
    - A failing session is rolled back before the error leaves it
    - Any SQLAlchemyError leaves a session as StoreError with the driver's own message
    - The manager is built on first use; without DATABASE_URL that first use raises ConfigError
    - Rows stay readable after commit (expire_on_commit=False), so routes can serialize them

Design Decisions:
    - db_manager is a module global set by the lifespan or the first request;
      tests replace it through dependency overrides
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from site_api.config import Settings, get_settings
from site_api.core.errors import StoreError

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError and OperationalError are DBAPIErrors
_FAILED_OPERATION = (
    (IntegrityError, "commit"),
    (OperationalError, "execute"),
    (DBAPIError, "query"),
)


def _failed_operation(e: SQLAlchemyError) -> str:
    for error_type, operation in _FAILED_OPERATION:
        if isinstance(e, error_type):
            return operation
    return "unknown"


def _driver_message(e: SQLAlchemyError) -> str:
    """Literal message from the database driver, without SQLAlchemy's wrapper text."""
    orig = getattr(e, "orig", None)
    return str(orig) if orig is not None else str(e)


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that fail as StoreError."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @classmethod
    def from_url(
        cls, database_url: str, pool_size: int = 5, max_overflow: int = 5,
    ) -> "DatabaseSessionManager":
        """Pooled engine for the managed Postgres store."""
        return cls(create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        ))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                operation = _failed_operation(e)
                logger.error(
                    f"Store {operation} failed: {_driver_message(e)}",
                    extra={"error_code": "STORE_ERROR"},
                )
                raise StoreError(_driver_message(e), operation) from e

    async def health_check(self) -> bool:
        """True when a trivial query round-trips (readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Store health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(settings: Settings) -> DatabaseSessionManager:
    """Build the manager from settings; raises ConfigError without DATABASE_URL."""
    global db_manager
    db_manager = DatabaseSessionManager.from_url(
        settings.require("database_url"),
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """FastAPI dependency for routes that open several sessions (dashboard fan-out)."""
    return db_manager if db_manager is not None else init_db(get_settings())


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    async with get_db_manager().session() as session:
        yield session
