"""Database Session Manager - per-request sessions with fallback dial and health checks.

Invariants:
    - A session is only handed out after its connection is verified
    - Primary dial first, direct-host fallback second, DatabaseUnavailableError after that
    - Every session auto-rolls-back on exception and is always closed
    - Driver errors propagate unchanged; the document store maps them per operation

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool arguments only for server databases: SQLite engines use StaticPool/NullPool
      which reject pool_size
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select

from customer_store.core.errors import DatabaseUnavailableError
from customer_store.db.base import Base
from customer_store.models.document import Document

logger = logging.getLogger(__name__)


def _create_engine(
    database_url: str,
    pool_size: int,
    max_overflow: int,
    connect_timeout: float,
) -> AsyncEngine:
    kwargs: dict = {
        "pool_pre_ping": True,
        "connect_args": {"timeout": connect_timeout},
    }
    if not database_url.startswith("sqlite"):
        kwargs.update(
            pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
        )
    return create_async_engine(database_url, **kwargs)


class DatabaseSessionManager:
    """Manages async database sessions with fallback dial, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        fallback_url: str | None = None,
        pool_size: int = 20,
        max_overflow: int = 10,
        connect_timeout: float = 60.0,
    ):
        self.engine = _create_engine(
            database_url, pool_size, max_overflow, connect_timeout,
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )
        self.fallback_engine: AsyncEngine | None = None
        self._fallback_factory: async_sessionmaker[AsyncSession] | None = None
        if fallback_url:
            self.fallback_engine = _create_engine(
                fallback_url, pool_size, max_overflow, connect_timeout,
            )
            self._fallback_factory = async_sessionmaker(
                self.fallback_engine, class_=AsyncSession, expire_on_commit=False,
            )

    def _factories(self) -> list[async_sessionmaker[AsyncSession]]:
        factories = [self._session_factory]
        if self._fallback_factory is not None:
            factories.append(self._fallback_factory)
        return factories

    async def _open(self) -> AsyncSession:
        """Open a session whose connection is known to work."""
        last_error: Exception | None = None
        for attempt, factory in enumerate(self._factories()):
            session = factory()
            try:
                await session.connection()
                return session
            except (SQLAlchemyError, OSError) as e:
                await session.close()
                last_error = e
                logger.warning(
                    f"DB dial failed: {e}",
                    extra={"attempt": "primary" if attempt == 0 else "fallback"},
                )
        raise DatabaseUnavailableError(str(last_error))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a verified session with auto-rollback on exception."""
        session = await self._open()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create the document table on the first engine that accepts a connection."""
        session = await self._open()
        try:
            connection = await session.connection()
            await connection.run_sync(Base.metadata.create_all)
            await session.commit()
        finally:
            await session.close()

    async def health_check(self) -> dict[str, bool]:
        """Readiness checks: a session can be opened and the documents table answers."""
        checks = {"database": False, "documents_table": False}
        try:
            async with self.session() as db:
                checks["database"] = True
                await db.execute(select(Document.id).limit(1))
                checks["documents_table"] = True
        except (SQLAlchemyError, OSError, DatabaseUnavailableError) as e:
            logger.error(f"DB health check failed: {e}", extra={"error_code": "NOT_READY"})
        return checks

    async def dispose(self) -> None:
        await self.engine.dispose()
        if self.fallback_engine is not None:
            await self.fallback_engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
    db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise DatabaseUnavailableError("database not initialized")
    async with db_manager.session() as session:
        yield session
