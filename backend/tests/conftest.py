"""
NZWalks Backend — Test Configuration (conftest.py)
===================================================

Fixture Hierarchy (all function-scoped):
    ├── repositories:       fresh in-memory Repositories bundle
    ├── mock_repositories:  Repositories bundle of AsyncMocks
    ├── sqlite_session:     AsyncSession on an in-memory SQLite database
    ├── test_client:        httpx AsyncClient bound to a fresh app
    └── *_payload:          request bodies shared by the API tests
"""

import os

# Must run before any nzwalks import: settings are read once at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["REPOSITORY_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

from nzwalks.database import Base, enable_sqlite_foreign_keys  # noqa: E402
from nzwalks.repositories import Repositories  # noqa: E402


@pytest.fixture
def repositories():
    """Empty in-memory repositories, isolated per test."""
    return Repositories.in_memory()


@pytest.fixture
def mock_repositories():
    """
    Repositories whose every method is an AsyncMock.

    Usage:
        mock_repositories.regions.get_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await region_service.get_region(mock_repositories, uuid4())
    """
    return Repositories(
        regions=AsyncMock(),
        walks=AsyncMock(),
        walk_difficulties=AsyncMock(),
    )


@pytest_asyncio.fixture
async def sqlite_session():
    """
    AsyncSession on a private in-memory SQLite database with all tables created.

    SQLite keeps one connection for :memory: URLs, so the schema created
    here is the one the session sees. Foreign keys are enforced, as in
    the application engine.
    """
    import nzwalks.models  # noqa: F401

    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(repositories):
    """
    HTTPX AsyncClient talking to a freshly built app.

    The app's repositories are replaced with the `repositories` fixture, so
    a test can both drive the API and inspect storage directly.
    """
    from nzwalks.dependencies import get_repositories
    from nzwalks.main import create_app

    app = create_app()
    app.dependency_overrides[get_repositories] = lambda: repositories

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def region_payload():
    return {
        "code": "BOP",
        "name": "Bay of Plenty",
        "area": 12,
        "latitude": -38,
        "longitude": 176.9,
        "population": 300000,
    }


@pytest.fixture
def walk_difficulty_payload():
    return {"code": "Easy"}
