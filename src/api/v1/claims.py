"""Claim record endpoints for FRA API v1.

Lists the records the caller may see and summarises them for the
dashboard.  Records are loaded once at startup; there is no write path.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from src.middleware.auth import require_access_view
from src.models.enums import AccessStatus
from src.services.access_guard import AccessView
from src.services.claim_stats import summarize_claims

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/claims", tags=["claims"])


class ClaimListResponse(BaseModel):
    """Claim records visible to the caller."""

    status: str
    claims: list[dict[str, Any]]
    total: int


@router.get("", response_model=ClaimListResponse)
async def list_claims(
    view: AccessView = Depends(require_access_view),
    status: str | None = Query(default=None, description="Filter by claim status"),
    state: str | None = Query(default=None, description="Filter by state"),
) -> ClaimListResponse:
    """List visible claim records with optional status and state filters."""
    records = view.records
    if status is not None:
        records = tuple(r for r in records if r.claim_status.lower() == status.lower())
    if state is not None:
        records = tuple(r for r in records if r.state.lower() == state.lower())

    return ClaimListResponse(
        status=view.status.value,
        claims=[r.to_dict() for r in records],
        total=len(records),
    )


@router.get("/stats")
async def claim_statistics(
    view: AccessView = Depends(require_access_view),
) -> dict[str, Any]:
    """Status, type, area and state breakdown over the visible records."""
    stats = summarize_claims(view.records)
    return {"status": view.status.value, **stats.to_dict()}


@router.get("/{record_id}")
async def get_claim(
    record_id: str,
    view: AccessView = Depends(require_access_view),
) -> dict[str, Any]:
    record = view.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Claim record '{record_id}' not found.")
    return {"status": AccessStatus.OK.value, "claim": record.to_dict()}
