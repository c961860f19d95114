from src.models.catalog import InterventionTemplate, SchemeDefinition
from src.models.claim import ClaimRecord, Coordinates
from src.models.enums import (
    AccessStatus,
    CallerRole,
    ClaimStatus,
    ClaimType,
    InterventionCategory,
    Priority,
    ScoreBand,
)
from src.models.errors import (
    InvalidRecordError,
    MissingCatalogError,
    RecommendationError,
    UnauthorizedRoleError,
    UnknownRecordError,
)
from src.models.recommendation import (
    GuardedRecommendation,
    InterventionMatch,
    RecommendationResult,
    SchemeMatch,
)

__all__ = [
    "AccessStatus",
    "CallerRole",
    "ClaimRecord",
    "ClaimStatus",
    "ClaimType",
    "Coordinates",
    "GuardedRecommendation",
    "InterventionCategory",
    "InterventionMatch",
    "InterventionTemplate",
    "InvalidRecordError",
    "MissingCatalogError",
    "Priority",
    "RecommendationError",
    "RecommendationResult",
    "SchemeDefinition",
    "SchemeMatch",
    "ScoreBand",
    "UnauthorizedRoleError",
    "UnknownRecordError",
]
