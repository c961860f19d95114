"""Intervention rule set: on-the-ground actions triggered by a claim record.

Rules are independent and not mutually exclusive; each one that fires
instantiates its catalog template with a computed priority and reason.
Results are ranked High > Medium > Low, and equal priorities keep the
order of :data:`INTERVENTION_RULES`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

import structlog

from src.models.claim import ClaimRecord
from src.models.enums import Priority
from src.models.recommendation import InterventionMatch
from src.services.catalog import CatalogStore
from src.services.rule_config import DEFAULT_RULE_CONFIG, RuleConfig

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class InterventionRule:
    intervention_id: str
    trigger: Callable[[ClaimRecord, RuleConfig], bool]
    priority: Callable[[ClaimRecord, RuleConfig], Priority]
    reason: Callable[[ClaimRecord, RuleConfig], str]


def _fixed(priority: Priority) -> Callable[[ClaimRecord, RuleConfig], Priority]:
    def _priority(record: ClaimRecord, config: RuleConfig) -> Priority:
        return priority

    return _priority


# -- INT001 Groundwater Recharging ------------------------------------------


def _water_stressed(record: ClaimRecord, config: RuleConfig) -> bool:
    return record.state in config.water_stressed_states or record.village in config.water_trigger_villages


def _water_reason(record: ClaimRecord, config: RuleConfig) -> str:
    if record.state in config.water_stressed_states:
        return f"Low water table reported across {record.state}, a water-stressed state"
    return f"Low water table reported around {record.village}"


# -- INT002 Sustainable Harvesting Training ---------------------------------


def _community_claim(record: ClaimRecord, config: RuleConfig) -> bool:
    return record.is_community


def _harvesting_reason(record: ClaimRecord, config: RuleConfig) -> str:
    return f"{record.claim_type} holders can benefit from sustainable use practices"


# -- INT003 Climate-Resilient Crop Varieties --------------------------------


def _approved_individual(record: ClaimRecord, config: RuleConfig) -> bool:
    return record.is_individual and record.is_approved


def _crop_priority(record: ClaimRecord, config: RuleConfig) -> Priority:
    return Priority.HIGH if record.state in config.drought_priority_states else Priority.MEDIUM


def _crop_reason(record: ClaimRecord, config: RuleConfig) -> str:
    if record.state in config.drought_priority_states:
        return f"Increasing drought patterns in {record.state}; cultivated forest land is at risk"
    return "Approved individual holding on forest fringe land can adopt resilient varieties"


# -- INT004 Digital Literacy Program ----------------------------------------


def _always(record: ClaimRecord, config: RuleConfig) -> bool:
    return True


def _literacy_reason(record: ClaimRecord, config: RuleConfig) -> str:
    return "Improving digital access will enhance scheme implementation efficiency"


# Order is the tie-break for equal priorities.
INTERVENTION_RULES: Final[tuple[InterventionRule, ...]] = (
    InterventionRule("INT001", _water_stressed, _fixed(Priority.HIGH), _water_reason),
    InterventionRule("INT002", _community_claim, _fixed(Priority.MEDIUM), _harvesting_reason),
    InterventionRule("INT003", _approved_individual, _crop_priority, _crop_reason),
    InterventionRule("INT004", _always, _fixed(Priority.MEDIUM), _literacy_reason),
)


def evaluate_interventions(
    record: ClaimRecord,
    catalog: CatalogStore,
    *,
    config: RuleConfig = DEFAULT_RULE_CONFIG,
    rules: Sequence[InterventionRule] = INTERVENTION_RULES,
) -> tuple[InterventionMatch, ...]:
    """Return the interventions triggered by *record*, highest priority first."""
    matches: list[InterventionMatch] = []
    for rule in rules:
        if not rule.trigger(record, config):
            continue
        template = catalog.get_intervention(rule.intervention_id)
        if template is None:
            logger.debug("interventions.template_missing", intervention_id=rule.intervention_id)
            continue
        matches.append(
            InterventionMatch(
                intervention=template,
                priority=rule.priority(record, config),
                reason=rule.reason(record, config),
            )
        )

    matches.sort(key=lambda m: m.priority.rank, reverse=True)
    return tuple(matches)
