"""Health Endpoints - liveness and readiness for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 unless a session opens and the
      documents table answers a query; the failing check is named in "reason"

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - db_manager read through the module at call time: it is created in lifespan,
      after this module is imported
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from customer_store.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness: 200 whenever the process is up."""
    return {
        "status": "healthy",
        "service": "customer-store",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness: database reachable and documents table in place."""
    manager = database.db_manager
    checks = await manager.health_check() if manager else {
        "database": False, "documents_table": False,
    }
    report = {name: "healthy" if ok else "failing" for name, ok in checks.items()}
    if not checks["database"]:
        reason = "database_unavailable"
    elif not checks["documents_table"]:
        reason = "documents_table_missing"
    else:
        return {"status": "ready", "checks": report}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, "checks": report},
    )
