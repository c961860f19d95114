from __future__ import annotations

from datetime import date

from pydantic import Field

from src.models.base import FrozenModel
from src.models.enums import ClaimStatus, ClaimType

_COMMUNITY_CLAIM_TYPES: frozenset[str] = frozenset(t.value for t in ClaimType if "Community" in t.value)
_KNOWN_STATUSES: frozenset[str] = frozenset(s.value for s in ClaimStatus)


class Coordinates(FrozenModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class ClaimRecord(FrozenModel):
    """A single forest-rights land claim.

    ``claim_type`` and ``claim_status`` are kept as plain strings so that
    records carrying values outside the known enumerations (e.g. OCR
    output that was never normalised) still load.  Such values match no
    rule that depends on them; see :attr:`is_community` and friends.
    """

    record_id: str = Field(alias="id", min_length=1)
    name: str
    state: str
    district: str
    village: str
    claim_type: str
    claim_status: str
    area: float = Field(ge=0.0, description="Claimed land area in hectares")
    approval_date: date | None = None
    coordinates: Coordinates | None = None

    @property
    def is_individual(self) -> bool:
        return self.claim_type == ClaimType.INDIVIDUAL

    @property
    def is_community(self) -> bool:
        return self.claim_type in _COMMUNITY_CLAIM_TYPES

    @property
    def is_approved(self) -> bool:
        return self.claim_status == ClaimStatus.APPROVED

    @property
    def is_rejected(self) -> bool:
        return self.claim_status == ClaimStatus.REJECTED

    @property
    def has_known_status(self) -> bool:
        return self.claim_status in _KNOWN_STATUSES
