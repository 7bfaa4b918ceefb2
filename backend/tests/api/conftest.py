"""API test fixtures - application built from test settings + httpx client.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness checks see the test engine
    - App built with create_app(settings): the environment is never consulted

Design Decisions:
    - ASGITransport does not run lifespan: schema comes from the test_engine fixture
"""

import pytest
from httpx import ASGITransport, AsyncClient

from customer_store.config import Settings
from customer_store.infrastructure.database import get_db, DatabaseSessionManager
import customer_store.infrastructure.database as db_module
from customer_store.main import create_app


@pytest.fixture
def settings():
    return Settings(database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app, test_engine, test_session_factory):
    """Test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    fake_manager.fallback_engine = None
    fake_manager._fallback_factory = None
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def recovering_client(app, test_session_factory):
    """Client that receives the 500 response instead of the re-raised exception."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
