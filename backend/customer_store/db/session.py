"""Async Session Factory - provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Schema is created on the engine before the factory is handed out
    - Meant for scripts and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: no fallback dial, no error mapping
      (ADR: fixtures want the raw driver behaviour)
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from customer_store.db.base import Base


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )


async def create_engine_with_schema(database_url: str) -> AsyncEngine:
    """Create an engine and make sure the document table exists."""
    engine = create_async_engine(database_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine
