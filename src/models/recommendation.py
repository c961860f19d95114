from __future__ import annotations

from pydantic import Field, computed_field

from src.models.base import FrozenModel
from src.models.catalog import InterventionTemplate, SchemeDefinition
from src.models.enums import AccessStatus, Priority, ScoreBand


class SchemeMatch(FrozenModel):
    scheme: SchemeDefinition
    match_score: int = Field(ge=0, le=100)
    reason: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def band(self) -> ScoreBand:
        return ScoreBand.for_score(self.match_score)


class InterventionMatch(FrozenModel):
    intervention: InterventionTemplate
    priority: Priority
    reason: str


class RecommendationResult(FrozenModel):
    """Ranked schemes and interventions for one claim record.

    Derived data only: rebuilt on every request and never stored.
    """

    record_id: str | None = None
    schemes: tuple[SchemeMatch, ...] = ()
    interventions: tuple[InterventionMatch, ...] = ()


class GuardedRecommendation(FrozenModel):
    """A recommendation as seen through the access guard.

    ``status`` distinguishes a beneficiary without any claim on file
    (``no_record_found``, empty result) from an existing record that
    simply matched no scheme (``ok``, empty ``schemes``).
    """

    status: AccessStatus
    result: RecommendationResult = Field(default_factory=RecommendationResult)

    def to_dict(self) -> dict:
        return {"status": self.status.value, **self.result.to_dict()}
