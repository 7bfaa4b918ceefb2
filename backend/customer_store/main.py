"""Customer Store API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {message, body} envelope
    - Request logging wraps everything, including the session dependency
    - Database initialized on startup via lifespan context manager, disposed on shutdown

Design Decisions:
    - create_app(settings) factory: configuration passed in, not read from globals
      (ADR: tests build apps against SQLite without touching the environment)
    - An unreachable database at startup is logged, not fatal: requests answer 503
      until it comes back
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from customer_store.api.error_handlers import register_error_handlers
from customer_store.api.middleware import RequestLoggingMiddleware
from customer_store.api.routes import health
from customer_store.api.routes.documents import build_document_router
from customer_store.config import Settings, get_settings
from customer_store.core.errors import DatabaseUnavailableError
from customer_store.core.resources import ResourceSpec, build_resources
from customer_store.infrastructure.database import (
    DatabaseSessionManager, close_db, init_db,
)
from customer_store.infrastructure.document_store import DocumentCollection
from customer_store.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


async def reset_collections(
    manager: DatabaseSessionManager, resources: list[ResourceSpec],
) -> None:
    """Drop every document of the served collections."""
    async with manager.session() as db:
        for resource in resources:
            await DocumentCollection(db, resource.collection).drop()


def _build_lifespan(settings: Settings, resources: list[ResourceSpec]):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        manager = init_db(
            settings.primary_database_url,
            fallback_url=settings.fallback_database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            connect_timeout=settings.database_dial_timeout_seconds,
        )
        try:
            await manager.create_schema()
            if settings.reset_collections_on_startup:
                await reset_collections(manager, resources)
        except DatabaseUnavailableError as e:
            logger.error(f"Database unavailable at startup: {e.message}")
        logger.info("Customer store API started")
        yield
        await close_db()
        logger.info("Customer store API shut down")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application: middleware, error handlers, health and resource routes."""
    settings = settings or get_settings()
    resources = build_resources(settings)

    app = FastAPI(
        title="Customer Store API",
        version="1.0.0",
        lifespan=_build_lifespan(settings, resources),
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    app.include_router(health.router)
    for resource in resources:
        app.include_router(build_document_router(resource))
    return app


app = create_app()


def run() -> None:
    """Serve the application on the configured address."""
    settings = get_settings()
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
