"""Recommendation engine for FRA claim records.

Runs both rule sets against a single claim snapshot and returns the
ranked schemes and interventions.  Evaluation is a pure function of
``(record, catalog, rule config)`` with no shared mutable state, so one
engine instance may serve any number of concurrent callers.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import structlog

from src.models.claim import ClaimRecord
from src.models.errors import InvalidRecordError, MissingCatalogError
from src.models.recommendation import RecommendationResult
from src.services.catalog import CatalogStore
from src.services.eligibility import SCHEME_RULES, EligibilityRule, evaluate_schemes
from src.services.interventions import INTERVENTION_RULES, InterventionRule, evaluate_interventions
from src.services.rule_config import DEFAULT_RULE_CONFIG, RuleConfig

logger = structlog.get_logger(__name__)


class RecommendationEngine:
    """Evaluates the eligibility and intervention rule sets for one record."""

    __slots__ = ("_config", "_intervention_rules", "_scheme_rules")

    def __init__(
        self,
        config: RuleConfig = DEFAULT_RULE_CONFIG,
        *,
        scheme_rules: Mapping[str, EligibilityRule] = SCHEME_RULES,
        intervention_rules: Sequence[InterventionRule] = INTERVENTION_RULES,
    ) -> None:
        self._config = config
        self._scheme_rules = scheme_rules
        self._intervention_rules = tuple(intervention_rules)

    @property
    def config(self) -> RuleConfig:
        return self._config

    def recommend(self, record: ClaimRecord | None, catalog: CatalogStore | None) -> RecommendationResult:
        """Rank eligible schemes and triggered interventions for *record*.

        Raises
        ------
        InvalidRecordError
            If *record* is ``None`` or not a :class:`ClaimRecord`.
        MissingCatalogError
            If *catalog* is ``None``.
        """
        if record is None:
            raise InvalidRecordError("No claim record supplied.")
        if not isinstance(record, ClaimRecord):
            raise InvalidRecordError(f"Expected ClaimRecord, got {type(record).__name__}.")
        if catalog is None:
            raise MissingCatalogError("Scheme and intervention catalogs were not supplied.")

        schemes = evaluate_schemes(record, catalog, config=self._config, rules=self._scheme_rules)
        interventions = evaluate_interventions(
            record, catalog, config=self._config, rules=self._intervention_rules
        )

        logger.debug(
            "engine.recommended",
            record_id=record.record_id,
            schemes=len(schemes),
            interventions=len(interventions),
        )
        return RecommendationResult(
            record_id=record.record_id,
            schemes=schemes,
            interventions=interventions,
        )

    def recommend_bulk(
        self,
        records: Iterable[ClaimRecord],
        catalog: CatalogStore | None,
    ) -> dict[str, RecommendationResult]:
        """Evaluate each record independently, keyed by record id in input order."""
        if catalog is None:
            raise MissingCatalogError("Scheme and intervention catalogs were not supplied.")

        results: dict[str, RecommendationResult] = {}
        for record in records:
            result = self.recommend(record, catalog)
            results[record.record_id] = result
        logger.info("engine.bulk_recommended", records=len(results))
        return results
