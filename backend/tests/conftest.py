"""
Employee Service: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:   AsyncMock standing in for AsyncSession
    ├── fake_provider:     in-memory DataAccessProvider
    ├── sqlite_sessions:   session factory over a throwaway SQLite file
    ├── test_client:       HTTPX client, app wired to fake_provider
    └── db_client:         HTTPX client, app wired to the SQLite store
"""

import os
from typing import AsyncGenerator, List, Optional
from unittest.mock import AsyncMock, MagicMock

# Must be set before employee_app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["DATABASE_PASSWORD"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from employee_app.database import Base, get_db_session
from employee_app.exceptions import StorageUnavailableError
from employee_app.main import app
from employee_app.models.employee import Employee
from employee_app.services.data_access_base import DataAccessProvider
from employee_app.services.data_access_provider import get_data_access_provider


# ══════════════════════════════════════════════════════════════════════════
# Test Doubles
# ══════════════════════════════════════════════════════════════════════════

class InMemoryDataAccessProvider(DataAccessProvider):
    """List-backed provider; ids start at 1 and are never reused."""

    def __init__(self):
        self.employees: List[Employee] = []
        self._next_id = 1

    async def list_employees(self) -> List[Employee]:
        return list(self.employees)

    async def add_employee(self, name: str) -> Employee:
        employee = Employee(id=self._next_id, name=name)
        self._next_id += 1
        self.employees.append(employee)
        return employee


class FailingDataAccessProvider(DataAccessProvider):
    """Provider whose every call raises the configured error."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error or StorageUnavailableError()

    async def list_employees(self) -> List[Employee]:
        raise self.error

    async def add_employee(self, name: str) -> Employee:
        raise self.error


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = []
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def fake_provider():
    return InMemoryDataAccessProvider()


@pytest_asyncio.fixture
async def sqlite_sessions(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """
    Session factory bound to a fresh SQLite database with the employee table.

    Each test gets its own file, so identity always starts at 1.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(fake_provider) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to the app, with the in-memory provider injected.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_data_access_provider] = lambda: fake_provider
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_client(sqlite_sessions) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient where requests run through the real SQLAlchemy provider
    against the SQLite store from `sqlite_sessions`.
    """

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with sqlite_sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
