"""Health Probes — process liveness and database readiness.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process serves requests
    - GET /api/v1/health/ready answers 503 until the session manager exists
      and a SELECT 1 succeeds
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from bookshop.config import Settings, get_settings
from bookshop.infrastructure import database as db_module

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": "bookshop-api"}


@router.get("/ready")
async def readiness(settings: Settings = Depends(get_settings)):
    manager = db_module.db_manager
    database_ok = manager is not None and await manager.health_check()
    checks = {
        "database": "healthy" if database_ok else "unavailable",
        "cart_sweeper": "enabled" if settings.cart_sweep_enabled else "disabled",
    }
    if not database_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
