"""Health check endpoints for FRA API v1.

Provides liveness and readiness probes.  Readiness requires the
catalogs and claim records to have been loaded at startup.
"""

from __future__ import annotations

import time

import structlog
from fastapi import APIRouter, Request
from pydantic import BaseModel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str
    uptime_seconds: float


class ReadinessResponse(BaseModel):
    """Readiness check response with individual component statuses."""

    status: str
    checks: dict[str, str]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe.

    Returns 200 if the application process is running and able to
    handle requests.  Does *not* check loaded data.
    """
    start_time: float = getattr(request.app.state, "start_time", time.time())
    uptime = time.time() - start_time

    return HealthResponse(
        status="healthy",
        version=request.app.version,
        uptime_seconds=round(uptime, 2),
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> ReadinessResponse:
    """Readiness probe.

    Reports ``degraded`` until the catalogs, claim records and engine are
    all in place.
    """
    checks: dict[str, str] = {}
    all_ok = True

    catalog = getattr(request.app.state, "catalog", None)
    if catalog is not None:
        checks["catalog"] = f"ok ({len(catalog.schemes)} schemes, {len(catalog.interventions)} interventions)"
    else:
        checks["catalog"] = "not_loaded"
        all_ok = False

    records = getattr(request.app.state, "claim_records", None)
    if records is not None:
        checks["claim_records"] = f"ok ({len(records)} records)"
    else:
        checks["claim_records"] = "not_loaded"
        all_ok = False

    if getattr(request.app.state, "engine", None) is not None:
        checks["engine"] = "ok"
    else:
        checks["engine"] = "not_initialised"
        all_ok = False

    status = "ready" if all_ok else "degraded"

    logger.info("health.readiness_check", status=status, checks=checks)

    return ReadinessResponse(status=status, checks=checks)
