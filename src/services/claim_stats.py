"""Portfolio statistics over a set of claim records (dashboard summary)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from pydantic import Field

from src.models.base import FrozenModel
from src.models.claim import ClaimRecord
from src.models.enums import ClaimStatus


class ClaimStatistics(FrozenModel):
    total_claims: int = 0
    approved_claims: int = 0
    pending_claims: int = 0
    rejected_claims: int = 0
    individual_claims: int = 0
    community_claims: int = 0
    total_area: float = 0.0  # hectares, 2 decimals
    state_distribution: dict[str, int] = Field(default_factory=dict)


def summarize_claims(records: Iterable[ClaimRecord]) -> ClaimStatistics:
    records = tuple(records)
    statuses = Counter(r.claim_status for r in records)
    # Counter keeps first-seen order, which the state chart relies on.
    states = Counter(r.state for r in records)

    return ClaimStatistics(
        total_claims=len(records),
        approved_claims=statuses[ClaimStatus.APPROVED.value],
        pending_claims=statuses[ClaimStatus.PENDING.value],
        rejected_claims=statuses[ClaimStatus.REJECTED.value],
        individual_claims=sum(1 for r in records if r.is_individual),
        # Substring match, so unrecognised community claim types still count.
        community_claims=sum(1 for r in records if "Community" in r.claim_type),
        total_area=round(sum(r.area for r in records), 2),
        state_distribution=dict(states),
    )
