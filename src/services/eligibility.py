"""Scheme eligibility rule set for FRA claim records.

Every scheme the engine can recommend has exactly one entry in
:data:`SCHEME_RULES`, keyed by the scheme's catalog id.  An entry bundles
three pure functions of ``(record, config)``:

    * ``predicate`` -- is the claimant eligible at all?
    * ``score``     -- integer match strength in [0, 100], used for ranking.
    * ``reason``    -- human-readable justification naming the record
      attributes that decided the score.

Schemes present in the catalog but absent from the table are never
recommended.  Rules that depend on the claim type or status only fire for
values from the known enumerations, so a record carrying an unexpected
value is excluded rather than rejected with an error.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Final

import structlog

from src.models.claim import ClaimRecord
from src.models.recommendation import SchemeMatch
from src.services.catalog import CatalogStore
from src.services.rule_config import DEFAULT_RULE_CONFIG, RuleConfig

logger = structlog.get_logger(__name__)

RecordCheck = Callable[[ClaimRecord, RuleConfig], bool]
RecordScore = Callable[[ClaimRecord, RuleConfig], int]
RecordReason = Callable[[ClaimRecord, RuleConfig], str]

# Area thresholds in hectares.
_LARGE_INDIVIDUAL_HOLDING_HA: Final[float] = 1.0
_LARGE_COMMUNITY_FOREST_HA: Final[float] = 10.0


@dataclass(frozen=True, slots=True)
class EligibilityRule:
    scheme_id: str
    predicate: RecordCheck
    score: RecordScore
    reason: RecordReason


# ---------------------------------------------------------------------------
# SCH001 -- PM-KISAN: income support for approved individual holders
# ---------------------------------------------------------------------------


def _kisan_eligible(record: ClaimRecord, config: RuleConfig) -> bool:
    return record.is_individual and record.is_approved


def _kisan_score(record: ClaimRecord, config: RuleConfig) -> int:
    return 95 if record.area > _LARGE_INDIVIDUAL_HOLDING_HA else 85


def _kisan_reason(record: ClaimRecord, config: RuleConfig) -> str:
    if record.area > _LARGE_INDIVIDUAL_HOLDING_HA:
        return (
            f"High priority: approved individual forest right holder with {record.area:g} ha, "
            f"above the {_LARGE_INDIVIDUAL_HOLDING_HA:g} ha agricultural holding threshold"
        )
    return (
        f"Medium priority: approved individual forest right holder with a smaller holding "
        f"of {record.area:g} ha"
    )


# ---------------------------------------------------------------------------
# SCH002 -- Jal Jeevan Mission: every household, urgent in water-scarce villages
# ---------------------------------------------------------------------------


def _water_eligible(record: ClaimRecord, config: RuleConfig) -> bool:
    return True


def _water_score(record: ClaimRecord, config: RuleConfig) -> int:
    return 98 if record.village in config.water_scarce_villages else 80


def _water_reason(record: ClaimRecord, config: RuleConfig) -> str:
    if record.village in config.water_scarce_villages:
        return f"Urgent: {record.village} is a water-scarce village with low groundwater levels"
    return "Standard priority: all households are eligible for a functional tap connection"


# ---------------------------------------------------------------------------
# SCH003 -- MGNREGA: any claim that has not been rejected
# ---------------------------------------------------------------------------


def _employment_eligible(record: ClaimRecord, config: RuleConfig) -> bool:
    return record.has_known_status and not record.is_rejected


def _employment_score(record: ClaimRecord, config: RuleConfig) -> int:
    # Community claims score lower; pending product-owner review.
    return 75 if record.is_community else 85


def _employment_reason(record: ClaimRecord, config: RuleConfig) -> str:
    if record.is_community:
        return (
            f"{record.claim_status} community claim: the community can take up guaranteed "
            f"employment for forest conservation work"
        )
    return (
        f"{record.claim_status} claim: the claimant can take up guaranteed employment "
        f"for land development on the {record.area:g} ha plot"
    )


# ---------------------------------------------------------------------------
# SCH004 -- Van Dhan Yojana: community forest produce
# ---------------------------------------------------------------------------


def _forest_produce_eligible(record: ClaimRecord, config: RuleConfig) -> bool:
    return record.is_community


def _forest_produce_score(record: ClaimRecord, config: RuleConfig) -> int:
    return 90 if record.area > _LARGE_COMMUNITY_FOREST_HA else 70


def _forest_produce_reason(record: ClaimRecord, config: RuleConfig) -> str:
    if record.area > _LARGE_COMMUNITY_FOREST_HA:
        return (
            f"High priority: {record.area:g} ha community forest, large enough for "
            f"sustainable harvesting at scale"
        )
    return (
        f"Medium priority: {record.area:g} ha community forest with potential for "
        f"value addition to forest produce"
    )


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


def _build_table(*rules: EligibilityRule) -> dict[str, EligibilityRule]:
    table: dict[str, EligibilityRule] = {}
    for rule in rules:
        if rule.scheme_id in table:
            raise ValueError(f"Duplicate eligibility rule for scheme {rule.scheme_id!r}")
        table[rule.scheme_id] = rule
    return table


SCHEME_RULES: Final[Mapping[str, EligibilityRule]] = _build_table(
    EligibilityRule("SCH001", _kisan_eligible, _kisan_score, _kisan_reason),
    EligibilityRule("SCH002", _water_eligible, _water_score, _water_reason),
    EligibilityRule("SCH003", _employment_eligible, _employment_score, _employment_reason),
    EligibilityRule("SCH004", _forest_produce_eligible, _forest_produce_score, _forest_produce_reason),
)


def evaluate_schemes(
    record: ClaimRecord,
    catalog: CatalogStore,
    *,
    config: RuleConfig = DEFAULT_RULE_CONFIG,
    rules: Mapping[str, EligibilityRule] = SCHEME_RULES,
) -> tuple[SchemeMatch, ...]:
    """Return the schemes *record* is eligible for, best match first.

    Schemes are visited in catalog order and ``sorted`` is stable, so
    equal scores keep their catalog order.
    """
    matches: list[SchemeMatch] = []
    for scheme in catalog.schemes:
        rule = rules.get(scheme.scheme_id)
        if rule is None:
            logger.debug("eligibility.no_rule", scheme_id=scheme.scheme_id)
            continue
        if not rule.predicate(record, config):
            continue
        matches.append(
            SchemeMatch(
                scheme=scheme,
                match_score=rule.score(record, config),
                reason=rule.reason(record, config),
            )
        )

    matches.sort(key=lambda m: m.match_score, reverse=True)
    return tuple(matches)
