from __future__ import annotations

from enum import StrEnum


class ClaimType(StrEnum):
    """Forest Rights Act claim categories, valued as they appear on record."""

    __slots__ = ()

    INDIVIDUAL = "Individual Forest Rights"
    COMMUNITY = "Community Forest Rights"
    COMMUNITY_RESOURCE = "Community Forest Resource Rights"


class ClaimStatus(StrEnum):
    __slots__ = ()

    APPROVED = "Approved"
    PENDING = "Pending"
    REJECTED = "Rejected"


class InterventionCategory(StrEnum):
    __slots__ = ()

    WATER = "Water"
    FORESTRY = "Forestry"
    AGRICULTURE = "Agriculture"
    EDUCATION = "Education"
    LIVELIHOOD = "Livelihood"
    INFRASTRUCTURE = "Infrastructure"


class Priority(StrEnum):
    __slots__ = ()

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


class ScoreBand(StrEnum):
    """Dashboard legend for match scores: 90-100, 70-89, below 70."""

    __slots__ = ()

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def for_score(cls, score: int) -> ScoreBand:
        if score >= 90:
            return cls.HIGH
        if score >= 70:
            return cls.MEDIUM
        return cls.LOW


class CallerRole(StrEnum):
    __slots__ = ()

    ADMIN = "admin"
    BENEFICIARY = "user"


class AccessStatus(StrEnum):
    __slots__ = ()

    OK = "ok"
    NO_RECORD_FOUND = "no_record_found"
