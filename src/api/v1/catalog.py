"""Catalog endpoints for FRA API v1.

Read-only listings of the scheme definitions and intervention templates
the rule sets draw from, in catalog order.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from src.services.catalog import CatalogStore
from src.services.eligibility import SCHEME_RULES

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


class SchemeCatalogResponse(BaseModel):
    schemes: list[dict[str, Any]]
    total: int


class InterventionCatalogResponse(BaseModel):
    interventions: list[dict[str, Any]]
    total: int


def _catalog(request: Request) -> CatalogStore:
    catalog: CatalogStore | None = getattr(request.app.state, "catalog", None)
    if catalog is None:
        logger.error("catalog.not_loaded")
        raise HTTPException(status_code=503, detail="Scheme catalogs are not configured.")
    return catalog


@router.get("/schemes", response_model=SchemeCatalogResponse)
async def list_schemes(request: Request) -> SchemeCatalogResponse:
    """List schemes; ``hasRule`` is false for schemes that are never recommended."""
    catalog = _catalog(request)
    return SchemeCatalogResponse(
        schemes=[{**s.to_dict(), "hasRule": s.scheme_id in SCHEME_RULES} for s in catalog.schemes],
        total=len(catalog.schemes),
    )


@router.get("/interventions", response_model=InterventionCatalogResponse)
async def list_interventions(request: Request) -> InterventionCatalogResponse:
    catalog = _catalog(request)
    return InterventionCatalogResponse(
        interventions=[i.to_dict() for i in catalog.interventions],
        total=len(catalog.interventions),
    )
