"""
Pytest fixtures for backend testing.
Provides in-memory repositories, wired services and an HTTP test client.
"""

from collections.abc import AsyncGenerator, Iterator
from decimal import Decimal

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tests.helpers.fakes import FakeDatabase, FakeUomRepository, FakeUomStatusRepository
from uom_service.core.config import get_settings
from uom_service.db.models import Uom, UomStatus
from uom_service.main import create_application
from uom_service.modules.uom.router import get_uom_service
from uom_service.modules.uom.service import UomService
from uom_service.modules.uom_status.router import get_uom_status_service
from uom_service.modules.uom_status.service import UomStatusService


@pytest.fixture(autouse=True)
def _clear_settings() -> Iterator[None]:
    """Settings are cached; make every test read the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def status_repository(fake_db: FakeDatabase) -> FakeUomStatusRepository:
    return FakeUomStatusRepository(fake_db)


@pytest.fixture
def uom_repository(fake_db: FakeDatabase) -> FakeUomRepository:
    return FakeUomRepository(fake_db)


@pytest.fixture
def status_service(status_repository: FakeUomStatusRepository) -> UomStatusService:
    return UomStatusService(status_repository)


@pytest.fixture
def uom_service(
    uom_repository: FakeUomRepository, status_service: UomStatusService
) -> UomService:
    return UomService(uom_repository, status_service)


@pytest.fixture
def app(status_service: UomStatusService, uom_service: UomService) -> FastAPI:
    """Application with both entity services backed by the in-memory database."""
    application = create_application()
    application.dependency_overrides[get_uom_status_service] = lambda: status_service
    application.dependency_overrides[get_uom_service] = lambda: uom_service
    return application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for API testing."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def add_status(fake_db: FakeDatabase):
    """Insert a status row directly, bypassing the service."""

    def _add(name: str, *, description: str | None = None, is_usable: bool = True) -> UomStatus:
        row = UomStatus(
            id=fake_db.next_id("uom_status"),
            name=name,
            description=description,
            is_usable=is_usable,
        )
        fake_db.statuses[row.id] = row
        return row

    return _add


@pytest.fixture
def add_uom(fake_db: FakeDatabase):
    """Insert a unit row directly, bypassing the service."""

    def _add(
        name: str,
        status: UomStatus,
        *,
        factor: str = "1",
        description: str | None = None,
    ) -> Uom:
        row = Uom(
            id=fake_db.next_id("uom"),
            name=name,
            description=description,
            conversion_factor_to_base=Decimal(factor),
            uom_status_id=status.id,
            uom_status=status,
        )
        fake_db.uoms[row.id] = row
        return row

    return _add
