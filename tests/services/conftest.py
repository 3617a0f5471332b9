"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - broken_client points at an engine with no tables: every storage call fails
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from httpx import ASGITransport, AsyncClient

from catalog.db.base import Base
from catalog.db.session import create_session_factory
from catalog.infrastructure.database import get_db, DatabaseSessionManager
import catalog.infrastructure.database as db_module
import catalog.models  # noqa: F401
from catalog.main import app

from tests.services.fake_repository import FakeProductRepository


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def empty_engine():
    """Engine without the products table — simulates unusable storage."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_repository():
    return FakeProductRepository()


async def _client_for(engine):
    session_factory = create_session_factory(engine)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = engine
    fake_manager._session_factory = session_factory
    db_module.db_manager = fake_manager

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        db_module.db_manager = original_manager


@pytest.fixture
async def client(test_engine):
    """FastAPI test client with DB dependency overridden."""
    async for c in _client_for(test_engine):
        yield c


@pytest.fixture
async def broken_client(empty_engine):
    """FastAPI test client whose storage has no products table."""
    async for c in _client_for(empty_engine):
        yield c
