"""
GenexMart Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The environment is pointed at a throwaway SQLite file BEFORE any
       genexmart module is imported, so the engine built at import time
       never touches a real MySQL server.

Fixtures:
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── database:        genexmart tables created in SQLite, dropped after
    ├── db_session:      real AsyncSession for arranging/inspecting rows
    └── test_client:     HTTPX AsyncClient wired to the FastAPI app
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

_TEST_DB = Path(tempfile.mkdtemp(prefix="genexmart_test_")) / "genexmart.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB}"
os.environ["LOG_LEVEL"] = "WARNING"

from genexmart.database import Base, async_session_factory, engine  # noqa: E402
import genexmart.models  # noqa: E402,F401  registers every table on Base.metadata


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_x(mock_db_session):
            mock_db_session.execute.return_value = result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def database():
    """
    Creates the genexmart tables for one test and drops them afterwards.

    The engine is disposed at teardown so pooled connections never outlive
    the test's event loop.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """A real session on the test database, for seeding and inspecting rows."""
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from genexmart.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
