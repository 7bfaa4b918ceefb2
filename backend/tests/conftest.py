"""Root conftest - shared test configuration and in-memory database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the document table
    - Sessions use expire_on_commit=False, same as the session manager

Design Decisions:
    - SQLite in-memory: fast, no external dependency, the JSON column behaves the
      same for the operations the store performs
"""

import os

import pytest

# Ensure tests never dial a real database server
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")

from customer_store.db.base import Base  # noqa: E402
from customer_store.db.session import (  # noqa: E402
    create_engine_with_schema, create_session_factory,
)
import customer_store.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = await create_engine_with_schema("sqlite+aiosqlite:///:memory:")
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
