"""Main API router combining all v1 route modules.

Aggregates all routers under the ``/api/v1`` prefix so the
FastAPI application only needs to include a single router.

Includes:
    * Recommendations: per-record, own-record, ad hoc and bulk evaluation
    * Claims: visible records and dashboard statistics
    * Catalog: scheme definitions and intervention templates
    * Health: liveness and readiness probes
"""

from __future__ import annotations

from fastapi import APIRouter

from src.api.v1 import catalog, claims, health, recommendations

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(recommendations.router)
api_router.include_router(claims.router)
api_router.include_router(catalog.router)
api_router.include_router(health.router)
