"""Role-based record visibility in front of the recommendation engine.

The guard is a pure function of ``(role, owner_record_id, records)``:

    * ``admin`` sees every record and may request bulk evaluation.
    * ``user`` (beneficiary) sees exactly the record whose id the session
      layer reports as theirs, or nothing.

Caller identity is trusted as supplied; the engine itself stays
role-agnostic.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import structlog

from src.models.claim import ClaimRecord
from src.models.enums import AccessStatus, CallerRole
from src.models.errors import InvalidRecordError, UnauthorizedRoleError, UnknownRecordError
from src.models.recommendation import GuardedRecommendation, RecommendationResult
from src.services.catalog import CatalogStore
from src.services.recommendation import RecommendationEngine

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AccessView:
    """The subset of claim records a caller is allowed to submit."""

    role: CallerRole
    records: tuple[ClaimRecord, ...]
    status: AccessStatus = AccessStatus.OK

    @property
    def can_bulk_evaluate(self) -> bool:
        return self.role is CallerRole.ADMIN

    def get(self, record_id: str) -> ClaimRecord | None:
        for record in self.records:
            if record.record_id == record_id:
                return record
        return None

    def require(self, record_id: str) -> ClaimRecord:
        record = self.get(record_id)
        if record is None:
            raise UnknownRecordError(record_id)
        return record


def parse_role(role: object) -> CallerRole:
    """Map a raw role value onto :class:`CallerRole` or raise ``UnauthorizedRoleError``."""
    if isinstance(role, CallerRole):
        return role
    try:
        return CallerRole(role)
    except ValueError:
        logger.warning("access.unauthorized_role", role=str(role))
        raise UnauthorizedRoleError(role) from None


def resolve_access(
    role: object,
    owner_record_id: str | None,
    records: Iterable[ClaimRecord],
) -> AccessView:
    caller_role = parse_role(role)
    if caller_role is CallerRole.ADMIN:
        return AccessView(role=caller_role, records=tuple(records))

    if owner_record_id:
        for record in records:
            if record.record_id == owner_record_id:
                return AccessView(role=caller_role, records=(record,))

    logger.info("access.no_record_found", owner_record_id=owner_record_id)
    return AccessView(role=caller_role, records=(), status=AccessStatus.NO_RECORD_FOUND)


def guarded_recommend(
    engine: RecommendationEngine,
    catalog: CatalogStore | None,
    view: AccessView,
    record_id: str | None = None,
) -> GuardedRecommendation:
    """Recommend for one record the caller may see.

    A beneficiary may omit *record_id* to get their own record.  When the
    beneficiary has no record on file the engine is not invoked and an
    empty result marked ``no_record_found`` is returned.
    """
    if view.status is AccessStatus.NO_RECORD_FOUND:
        return GuardedRecommendation(status=AccessStatus.NO_RECORD_FOUND, result=RecommendationResult())

    if record_id is None:
        if view.role is CallerRole.ADMIN:
            raise InvalidRecordError("A record id is required for administrative callers.")
        record = view.records[0]
    else:
        record = view.require(record_id)

    return GuardedRecommendation(status=AccessStatus.OK, result=engine.recommend(record, catalog))


def guarded_recommend_bulk(
    engine: RecommendationEngine,
    catalog: CatalogStore | None,
    view: AccessView,
    record_ids: Sequence[str] | None = None,
) -> dict[str, RecommendationResult]:
    """Evaluate many records at once; administrative callers only."""
    if not view.can_bulk_evaluate:
        raise UnauthorizedRoleError(view.role.value)

    if record_ids is None:
        records: Sequence[ClaimRecord] = view.records
    else:
        # Repeated ids are evaluated once, at their first position.
        records = [view.require(record_id) for record_id in dict.fromkeys(record_ids)]
    return engine.recommend_bulk(records, catalog)
