"""API test fixtures: file-backed SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database file (tmp_path)
    - get_db / get_db_manager overridden with a manager bound to that file,
      so StoreError mapping is exercised exactly as in production
    - get_identity_provider overridden with FakeIdentityProvider

Design Decisions:
    - File database rather than :memory:: the dashboard opens concurrent
      sessions, which need separate connections to the same data
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from site_api.db.base import Base
from site_api.core.domain_types import AppRole
from site_api.infrastructure.database import (
    DatabaseSessionManager, get_db, get_db_manager,
)
from site_api.infrastructure.identity import get_identity_provider
from site_api.models import UserRole
from site_api.main import app

from tests.api.fake_identity import (
    ADMIN_ID, ADMIN_TOKEN, EDITOR_ID, EDITOR_TOKEN, FakeIdentityProvider,
)


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'site.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_manager(test_engine):
    return DatabaseSessionManager(test_engine)


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
async def client(fake_manager, identity):
    """FastAPI test client with store and identity dependencies overridden."""
    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_db_manager] = lambda: fake_manager
    app.dependency_overrides[get_identity_provider] = lambda: identity

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def admin_headers(test_db):
    """Seed the admin role and return headers carrying its token."""
    test_db.add(UserRole(user_id=ADMIN_ID, role=AppRole.ADMIN.value))
    await test_db.commit()
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
async def editor_headers(test_db):
    """A validated user whose role is not admin."""
    test_db.add(UserRole(user_id=EDITOR_ID, role=AppRole.USER.value))
    await test_db.commit()
    return {"Authorization": f"Bearer {EDITOR_TOKEN}"}
