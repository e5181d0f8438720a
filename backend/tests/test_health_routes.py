"""
Employee Service: Health Route Tests
=====================================

What:  Liveness, readiness and banner endpoints.
How:   Store failures are simulated with FailingDataAccessProvider and with a
       SQLite path that cannot be opened.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from employee_app.database import get_db_session
from employee_app.exceptions import ConstraintViolationError
from employee_app.main import app
from employee_app.services.data_access_provider import get_data_access_provider

from conftest import FailingDataAccessProvider


class TestLiveness:

    @pytest.mark.asyncio
    async def test_health_is_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.text == "Healthy"

    @pytest.mark.asyncio
    async def test_health_ignores_store_state(self, test_client):
        app.dependency_overrides[get_data_access_provider] = lambda: FailingDataAccessProvider()

        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.text == "Healthy"


class TestReadiness:

    @pytest.mark.asyncio
    async def test_ready_when_store_reachable(self, test_client):
        response = await test_client.get("/ready")

        assert response.status_code == 200
        assert response.text == "Ready"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [ConstraintViolationError(), RuntimeError("driver blew up"), TimeoutError()],
    )
    async def test_any_failure_is_503(self, test_client, error):
        """Every failure kind is treated the same way."""
        app.dependency_overrides[get_data_access_provider] = lambda: FailingDataAccessProvider(error)

        response = await test_client.get("/ready")

        assert response.status_code == 503
        assert response.text == "Database Not Ready"

    @pytest.mark.asyncio
    async def test_ready_with_real_store(self, db_client):
        response = await db_client.get("/ready")

        assert response.status_code == 200
        assert response.text == "Ready"

    @pytest.mark.asyncio
    async def test_unreachable_store_is_503(self, tmp_path):
        engine = create_async_engine(
            f"sqlite+aiosqlite:///{tmp_path / 'missing-dir' / 'employees.db'}"
        )
        sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

        async def unreachable_session():
            async with sessions() as session:
                yield session

        app.dependency_overrides[get_db_session] = unreachable_session
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/ready")
        finally:
            app.dependency_overrides.clear()
            await engine.dispose()

        assert response.status_code == 503
        assert response.text == "Database Not Ready"


class TestBanner:

    @pytest.mark.asyncio
    async def test_root_banner(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.text == "K8s Employee Service App"

    @pytest.mark.asyncio
    async def test_unknown_path_is_404(self, test_client):
        response = await test_client.get("/api/nope")
        assert response.status_code == 404
