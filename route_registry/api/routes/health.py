"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the SQL store's database is unreachable
    - The in-memory store is always ready

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from route_registry.api.dependencies import ServiceDep
from route_registry.schemas.route import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK, response_model=HealthResponse)
def health_check(service: ServiceDep) -> HealthResponse:
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        status="healthy",
        service="route-registry-api",
        version="1.0.0",
        routes=service.route_count,
    )


@router.get("/ready")
def readiness_check(request: Request):
    """Readiness probe: includes database connectivity in sql mode."""
    db_manager = request.app.state.db_manager
    if db_manager is None:
        return {"status": "ready", "checks": {"store": "memory"}}
    if not db_manager.health_check():
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
