"""Health Endpoints - liveness always answers, readiness follows the database.

Invariants:
    - GET /api/v1/health/ is 200 regardless of the database
    - GET /api/v1/health/ready is 200 only when the database answers and the
      documents table exists; otherwise 503 naming the failing check
"""

from httpx import ASGITransport, AsyncClient

from customer_store.db.base import Base
import customer_store.infrastructure.database as db_module


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ready",
        "checks": {"database": "healthy", "documents_table": "healthy"},
    }


async def test_readiness_without_documents_table(client, test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
    assert res.json() == {
        "status": "not_ready",
        "reason": "documents_table_missing",
        "checks": {"database": "healthy", "documents_table": "failing"},
    }


async def test_readiness_without_database(app):
    original_manager = db_module.db_manager
    db_module.db_manager = None
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            res = await c.get("/api/v1/health/ready")
    finally:
        db_module.db_manager = original_manager
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
