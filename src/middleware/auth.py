"""Caller identity for protected endpoints.

Authentication and sessions live in the upstream access layer, which
forwards the caller's role in ``X-Caller-Role`` and, for beneficiaries,
the id of their own claim record in ``X-Owner-Record-Id``.  These
headers are trusted as supplied; this dependency only turns them into
an :class:`~src.services.access_guard.AccessView` over the loaded
records.
"""

from __future__ import annotations

import structlog
from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader

from src.models.errors import UnauthorizedRoleError
from src.services.access_guard import AccessView, resolve_access

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_role_header = APIKeyHeader(name="X-Caller-Role", auto_error=False)
_owner_header = APIKeyHeader(name="X-Owner-Record-Id", auto_error=False)


async def require_access_view(
    request: Request,
    role: str | None = Security(_role_header),
    owner_record_id: str | None = Security(_owner_header),
) -> AccessView:
    """FastAPI dependency resolving the records visible to the caller.

    Raises 401 when no role is supplied and 403 for an unknown role.

    Usage::

        @router.get("/claims")
        async def list_claims(view: AccessView = Depends(require_access_view)): ...
    """
    if not role:
        logger.warning(
            "auth.missing_role",
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )
        raise HTTPException(
            status_code=401,
            detail="Missing X-Caller-Role header.",
        )

    records = getattr(request.app.state, "claim_records", ())
    try:
        return resolve_access(role.strip().lower(), owner_record_id, records)
    except UnauthorizedRoleError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
