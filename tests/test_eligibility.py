"""Tests for the scheme eligibility rule set.

Covers each encoded rule (predicate, score, reason), catalog-order
tie-breaking, schemes without a rule, and fail-safe handling of claim
types and statuses outside the known enumerations.

Uses the bundled scheme and intervention catalogs via CatalogStore.from_files().
"""

from __future__ import annotations

import pytest

from src.models.catalog import SchemeDefinition
from src.models.claim import ClaimRecord
from src.services.catalog import CatalogStore
from src.services.eligibility import SCHEME_RULES, EligibilityRule, evaluate_schemes
from src.services.rule_config import RuleConfig


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def catalog() -> CatalogStore:
    """CatalogStore backed by the bundled JSON catalogs."""
    return CatalogStore.from_files()


def make_record(**overrides: object) -> ClaimRecord:
    data: dict[str, object] = {
        "id": "T001",
        "name": "Test Claimant",
        "state": "Madhya Pradesh",
        "district": "Mandla",
        "village": "Bichhiya",
        "claimType": "Individual Forest Rights",
        "claimStatus": "Approved",
        "area": 2.0,
    }
    data.update(overrides)
    return ClaimRecord.model_validate(data)


def scores(record: ClaimRecord, catalog: CatalogStore, config: RuleConfig | None = None) -> dict[str, int]:
    kwargs = {"config": config} if config is not None else {}
    return {m.scheme.scheme_id: m.match_score for m in evaluate_schemes(record, catalog, **kwargs)}


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


class TestRuleTable:
    def test_one_rule_per_bundled_scheme(self, catalog: CatalogStore) -> None:
        assert set(SCHEME_RULES) == {s.scheme_id for s in catalog.schemes}

    def test_rules_addressable_by_id(self) -> None:
        rule = SCHEME_RULES["SCH001"]
        assert isinstance(rule, EligibilityRule)
        assert rule.scheme_id == "SCH001"

    def test_rules_are_independently_callable(self) -> None:
        rule = SCHEME_RULES["SCH004"]
        record = make_record(claimType="Community Forest Rights", area=12.0)
        config = RuleConfig()
        assert rule.predicate(record, config) is True
        assert rule.score(record, config) == 90
        assert "12 ha" in rule.reason(record, config)


# ---------------------------------------------------------------------------
# SCH001 -- PM-KISAN
# ---------------------------------------------------------------------------


class TestKisanRule:
    def test_approved_individual_large_holding(self, catalog: CatalogStore) -> None:
        assert scores(make_record(area=2.5), catalog)["SCH001"] == 95

    def test_approved_individual_small_holding(self, catalog: CatalogStore) -> None:
        assert scores(make_record(area=0.8), catalog)["SCH001"] == 85

    def test_exactly_one_hectare_is_not_large(self, catalog: CatalogStore) -> None:
        assert scores(make_record(area=1.0), catalog)["SCH001"] == 85

    @pytest.mark.parametrize("status", ["Pending", "Rejected"])
    def test_requires_approved_status(self, catalog: CatalogStore, status: str) -> None:
        assert "SCH001" not in scores(make_record(claimStatus=status), catalog)

    def test_requires_individual_claim(self, catalog: CatalogStore) -> None:
        assert "SCH001" not in scores(make_record(claimType="Community Forest Rights"), catalog)

    def test_reason_mentions_area(self, catalog: CatalogStore) -> None:
        match = next(m for m in evaluate_schemes(make_record(area=2.5), catalog) if m.scheme.scheme_id == "SCH001")
        assert "2.5 ha" in match.reason
        assert match.reason.startswith("High priority")


# ---------------------------------------------------------------------------
# SCH002 -- Jal Jeevan Mission
# ---------------------------------------------------------------------------


class TestWaterRule:
    @pytest.mark.parametrize("village", ["Koraput", "Malkangiri"])
    def test_water_scarce_village_scores_98(self, catalog: CatalogStore, village: str) -> None:
        assert scores(make_record(village=village), catalog)["SCH002"] == 98

    def test_other_village_scores_80(self, catalog: CatalogStore) -> None:
        assert scores(make_record(village="Bichhiya"), catalog)["SCH002"] == 80

    @pytest.mark.parametrize("status", ["Approved", "Pending", "Rejected", "Withdrawn"])
    def test_eligible_for_every_record(self, catalog: CatalogStore, status: str) -> None:
        assert "SCH002" in scores(make_record(claimStatus=status, claimType="Unknown"), catalog)

    def test_configured_village_set_is_used(self, catalog: CatalogStore) -> None:
        config = RuleConfig(water_scarce_villages=frozenset({"Bichhiya"}))
        assert scores(make_record(village="Bichhiya"), catalog, config)["SCH002"] == 98
        assert scores(make_record(village="Koraput"), catalog, config)["SCH002"] == 80

    def test_reason_names_village(self, catalog: CatalogStore) -> None:
        match = next(
            m for m in evaluate_schemes(make_record(village="Koraput"), catalog) if m.scheme.scheme_id == "SCH002"
        )
        assert "Koraput" in match.reason


# ---------------------------------------------------------------------------
# SCH003 -- MGNREGA
# ---------------------------------------------------------------------------


class TestEmploymentRule:
    def test_individual_scores_85(self, catalog: CatalogStore) -> None:
        assert scores(make_record(claimStatus="Pending"), catalog)["SCH003"] == 85

    @pytest.mark.parametrize("claim_type", ["Community Forest Rights", "Community Forest Resource Rights"])
    def test_community_scores_75(self, catalog: CatalogStore, claim_type: str) -> None:
        assert scores(make_record(claimType=claim_type), catalog)["SCH003"] == 75

    def test_rejected_excluded(self, catalog: CatalogStore) -> None:
        assert "SCH003" not in scores(make_record(claimStatus="Rejected"), catalog)

    def test_unknown_status_excluded(self, catalog: CatalogStore) -> None:
        assert "SCH003" not in scores(make_record(claimStatus="Withdrawn"), catalog)


# ---------------------------------------------------------------------------
# SCH004 -- Van Dhan Yojana
# ---------------------------------------------------------------------------


class TestForestProduceRule:
    def test_large_community_forest_scores_90(self, catalog: CatalogStore) -> None:
        record = make_record(claimType="Community Forest Resource Rights", area=15.0)
        assert scores(record, catalog)["SCH004"] == 90

    def test_exactly_ten_hectares_scores_70(self, catalog: CatalogStore) -> None:
        record = make_record(claimType="Community Forest Rights", area=10.0)
        assert scores(record, catalog)["SCH004"] == 70

    def test_status_does_not_matter(self, catalog: CatalogStore) -> None:
        record = make_record(claimType="Community Forest Rights", claimStatus="Rejected")
        assert "SCH004" in scores(record, catalog)

    def test_individual_excluded(self, catalog: CatalogStore) -> None:
        assert "SCH004" not in scores(make_record(), catalog)

    def test_unknown_community_like_type_excluded(self, catalog: CatalogStore) -> None:
        record = make_record(claimType="Community Grazing Rights", area=50.0)
        assert "SCH004" not in scores(record, catalog)


# ---------------------------------------------------------------------------
# Unknown enumeration values
# ---------------------------------------------------------------------------


class TestUnknownValues:
    def test_unknown_claim_type_only_matches_type_independent_rules(self, catalog: CatalogStore) -> None:
        result = scores(make_record(claimType="Habitat Rights"), catalog)
        assert set(result) == {"SCH002", "SCH003"}

    def test_unknown_status_only_matches_status_independent_rules(self, catalog: CatalogStore) -> None:
        result = scores(make_record(claimStatus="Under Appeal"), catalog)
        assert set(result) == {"SCH002"}

    def test_lowercase_values_are_not_normalised(self, catalog: CatalogStore) -> None:
        result = scores(make_record(claimType="individual forest rights", claimStatus="approved"), catalog)
        assert "SCH001" not in result


# ---------------------------------------------------------------------------
# Ordering and catalog interaction
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_sorted_by_score_descending(self, catalog: CatalogStore) -> None:
        matches = evaluate_schemes(make_record(village="Koraput", area=2.5), catalog)
        values = [m.match_score for m in matches]
        assert values == sorted(values, reverse=True)
        assert [m.scheme.scheme_id for m in matches] == ["SCH002", "SCH001", "SCH003"]

    def test_equal_scores_keep_catalog_order(self, catalog: CatalogStore) -> None:
        # SCH001 (small holding) and SCH003 (individual) both score 85.
        record = make_record(area=0.5)
        ids = [m.scheme.scheme_id for m in evaluate_schemes(record, catalog)]
        assert ids == ["SCH001", "SCH003", "SCH002"]

        reordered = CatalogStore(tuple(reversed(catalog.schemes)), catalog.interventions)
        ids = [m.scheme.scheme_id for m in evaluate_schemes(record, reordered)]
        assert ids == ["SCH003", "SCH001", "SCH002"]

    def test_scheme_without_rule_is_skipped(self, catalog: CatalogStore) -> None:
        extra = SchemeDefinition(
            scheme_id="SCH999",
            name="Unruled Scheme",
            description="No eligibility rule exists for this scheme.",
            benefits="None",
        )
        store = CatalogStore((*catalog.schemes, extra), catalog.interventions)
        assert "SCH999" not in scores(make_record(), store)

    def test_rule_without_catalog_entry_is_skipped(self, catalog: CatalogStore) -> None:
        store = CatalogStore([s for s in catalog.schemes if s.scheme_id != "SCH002"], catalog.interventions)
        assert "SCH002" not in scores(make_record(), store)

    def test_empty_catalog_yields_nothing(self) -> None:
        assert evaluate_schemes(make_record(), CatalogStore((), ())) == ()

    def test_match_carries_full_scheme(self, catalog: CatalogStore) -> None:
        match = evaluate_schemes(make_record(), catalog)[0]
        assert match.scheme == catalog.get_scheme(match.scheme.scheme_id)
