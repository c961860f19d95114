"""Recommendation endpoints for FRA API v1.

Every endpoint goes through the access guard: administrators may
evaluate any record (one at a time, in bulk, or ad hoc), beneficiaries
only their own.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field, field_validator

from src.middleware.auth import require_access_view
from src.models.claim import ClaimRecord
from src.models.enums import AccessStatus, CallerRole
from src.models.errors import (
    InvalidRecordError,
    MissingCatalogError,
    RecommendationError,
    UnauthorizedRoleError,
    UnknownRecordError,
)
from src.services.access_guard import AccessView, guarded_recommend, guarded_recommend_bulk
from src.services.catalog import CatalogStore
from src.services.recommendation import RecommendationEngine

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BulkRecommendationRequest(BaseModel):
    """Record ids to evaluate; omit to evaluate every record."""

    model_config = {"populate_by_name": True}

    record_ids: list[str] | None = Field(default=None, alias="recordIds")

    @field_validator("record_ids")
    @classmethod
    def _drop_repeated_ids(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return list(dict.fromkeys(v))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _engine_and_catalog(request: Request) -> tuple[RecommendationEngine, CatalogStore | None]:
    engine: RecommendationEngine | None = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Recommendation engine not available.")
    return engine, getattr(request.app.state, "catalog", None)


def _to_http(exc: RecommendationError) -> HTTPException:
    if isinstance(exc, MissingCatalogError):
        logger.error("recommendations.missing_catalog", error=str(exc))
        return HTTPException(status_code=503, detail="Scheme catalogs are not configured.")
    if isinstance(exc, UnauthorizedRoleError):
        return HTTPException(status_code=403, detail=str(exc))
    if isinstance(exc, UnknownRecordError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, InvalidRecordError):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=500, detail="Recommendation failed.")


def _require_admin(view: AccessView) -> None:
    if view.role is not CallerRole.ADMIN:
        raise HTTPException(status_code=403, detail="Administrative role required.")


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/me")
async def recommend_own_record(
    request: Request,
    view: AccessView = Depends(require_access_view),
) -> dict[str, Any]:
    """Recommendations for the beneficiary's own claim.

    Returns ``status: no_record_found`` with empty lists when the
    beneficiary has no claim on file.
    """
    if view.role is CallerRole.ADMIN:
        raise HTTPException(status_code=400, detail="Administrators must name a record id.")

    engine, catalog = _engine_and_catalog(request)
    try:
        guarded = guarded_recommend(engine, catalog, view)
    except RecommendationError as exc:
        raise _to_http(exc) from exc
    return guarded.to_dict()


@router.post("/evaluate")
async def evaluate_record(
    request: Request,
    record: ClaimRecord,
    view: AccessView = Depends(require_access_view),
) -> dict[str, Any]:
    """Evaluate an ad hoc claim record, e.g. one fresh from document intake."""
    _require_admin(view)
    engine, catalog = _engine_and_catalog(request)
    try:
        result = engine.recommend(record, catalog)
    except RecommendationError as exc:
        raise _to_http(exc) from exc
    return {"status": AccessStatus.OK.value, **result.to_dict()}


@router.post("/bulk")
async def recommend_bulk(
    request: Request,
    body: BulkRecommendationRequest,
    view: AccessView = Depends(require_access_view),
) -> dict[str, Any]:
    """Evaluate many records independently; administrators only."""
    engine, catalog = _engine_and_catalog(request)
    try:
        results = guarded_recommend_bulk(engine, catalog, view, body.record_ids)
    except RecommendationError as exc:
        raise _to_http(exc) from exc

    return {
        "total": len(results),
        "results": {record_id: result.to_dict() for record_id, result in results.items()},
    }


@router.get("/{record_id}")
async def recommend_record(
    request: Request,
    record_id: str,
    view: AccessView = Depends(require_access_view),
) -> dict[str, Any]:
    """Recommendations for one record visible to the caller."""
    engine, catalog = _engine_and_catalog(request)
    try:
        guarded = guarded_recommend(engine, catalog, view, record_id)
    except RecommendationError as exc:
        raise _to_http(exc) from exc
    return guarded.to_dict()
