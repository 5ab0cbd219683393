"""
Project Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── test_settings: Settings pointing at a per-test SQLite file
    ├── test_app: FastAPI app assembled from test_settings, schema created
    ├── components: The app's engine, repositories and services
    ├── test_client: HTTPX AsyncClient talking to test_app
    ├── mock_user_repository / mock_package_repository: AsyncMock doubles
    └── user_request_data: A valid create-user body (camelCase)
"""

import os

# Must be set BEFORE any app imports: app.config builds its singleton at
# import time and app.main assembles a module-level app from it
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_ROUNDS"] = "4"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.config import Settings
from app.database import create_schema, dispose_engine
from app.repositories.package_repository import PackageRepository
from app.repositories.user_repository import UserRepository


@pytest.fixture
def test_settings(tmp_path):
    """
    Settings for one test: a fresh SQLite file and the cheapest bcrypt cost.

    Why a file (not :memory:): every repository call opens its own session,
    and an in-memory SQLite database lives only as long as one connection.
    """
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def test_app(test_settings):
    """
    Provides a fully assembled app with the users/packages schema created.

    The lifespan does not run under ASGITransport, so the schema is created
    and the engine disposed here.
    """
    from app.main import create_app

    app = create_app(test_settings)
    engine = app.state.components.engine
    await create_schema(engine)
    yield app
    await dispose_engine(engine)


@pytest.fixture
def components(test_app):
    """The assembled components (repositories, services) behind test_app."""
    return test_app.state.components


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_user_repository():
    """AsyncMock standing in for UserRepository in service unit tests."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_package_repository():
    """AsyncMock standing in for PackageRepository in service unit tests."""
    return AsyncMock(spec=PackageRepository)


@pytest.fixture
def user_request_data():
    """A create-user body that passes every validation rule."""
    return {
        "roleId": 1,
        "name": "name",
        "phoneNumber": "12345678",
        "email": "albert@gmail.com",
        "password": "Albert1234",
    }
