"""Service layer -- catalog store, rule sets, recommendation engine and access guard.

Everything here is synchronous, in-memory computation over immutable
inputs; nothing performs I/O except the catalog loaders.
"""

from __future__ import annotations

from src.services.access_guard import (
    AccessView,
    guarded_recommend,
    guarded_recommend_bulk,
    parse_role,
    resolve_access,
)
from src.services.catalog import CatalogStore
from src.services.claim_stats import ClaimStatistics, summarize_claims
from src.services.eligibility import SCHEME_RULES, EligibilityRule, evaluate_schemes
from src.services.interventions import INTERVENTION_RULES, InterventionRule, evaluate_interventions
from src.services.recommendation import RecommendationEngine
from src.services.rule_config import DEFAULT_RULE_CONFIG, RuleConfig

__all__ = [
    "AccessView",
    "CatalogStore",
    "ClaimStatistics",
    "DEFAULT_RULE_CONFIG",
    "EligibilityRule",
    "INTERVENTION_RULES",
    "InterventionRule",
    "RecommendationEngine",
    "RuleConfig",
    "SCHEME_RULES",
    "evaluate_interventions",
    "evaluate_schemes",
    "guarded_recommend",
    "guarded_recommend_bulk",
    "parse_role",
    "resolve_access",
    "summarize_claims",
]
