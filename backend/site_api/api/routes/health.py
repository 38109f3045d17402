"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health, /ping, /api/ping always return 200 if the process is up (no DB)
    - GET /health/ready returns 503 if the database is unreachable or unconfigured
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from site_api.core.errors import ConfigError
from site_api.infrastructure.database import get_db_manager

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

PING_BODY = {"ok": True, "message": "API working"}


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {"ok": True}


@router.get("/ping")
async def ping():
    return PING_BODY


@router.get("/api/ping")
async def api_ping():
    return PING_BODY


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe: includes database connectivity."""
    try:
        manager = get_db_manager()
    except ConfigError as e:
        logger.warning(f"Readiness: {e.message}")
        manager = None
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"ok": False, "reason": "database_unavailable"},
        )
    return {"ok": True, "checks": {"database": "healthy"}}
