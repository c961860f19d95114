"""Tests for the access guard: role resolution and guarded evaluation."""

from __future__ import annotations

import pytest

from src.data.seed import load_claims
from src.models.claim import ClaimRecord
from src.models.enums import AccessStatus, CallerRole
from src.models.errors import InvalidRecordError, UnauthorizedRoleError, UnknownRecordError
from src.services.access_guard import (
    AccessView,
    guarded_recommend,
    guarded_recommend_bulk,
    parse_role,
    resolve_access,
)
from src.services.catalog import CatalogStore
from src.services.recommendation import RecommendationEngine


@pytest.fixture(scope="module")
def catalog() -> CatalogStore:
    return CatalogStore.from_files()


@pytest.fixture(scope="module")
def claims() -> tuple[ClaimRecord, ...]:
    return load_claims()


class CountingEngine(RecommendationEngine):
    """Engine that records how often it was invoked."""

    __slots__ = ("calls",)

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def recommend(self, record, catalog):  # type: ignore[no-untyped-def]
        self.calls += 1
        return super().recommend(record, catalog)


# ---------------------------------------------------------------------------
# Role parsing
# ---------------------------------------------------------------------------


class TestParseRole:
    @pytest.mark.parametrize(("raw", "expected"), [("admin", CallerRole.ADMIN), ("user", CallerRole.BENEFICIARY)])
    def test_known_roles(self, raw: str, expected: CallerRole) -> None:
        assert parse_role(raw) is expected

    def test_enum_passthrough(self) -> None:
        assert parse_role(CallerRole.ADMIN) is CallerRole.ADMIN

    @pytest.mark.parametrize("raw", ["officer", "", None, "ADMIN ", 3])
    def test_unknown_roles_rejected(self, raw: object) -> None:
        with pytest.raises(UnauthorizedRoleError) as exc_info:
            parse_role(raw)
        assert exc_info.value.role == raw


# ---------------------------------------------------------------------------
# Record visibility
# ---------------------------------------------------------------------------


class TestResolveAccess:
    def test_admin_sees_all(self, claims) -> None:
        view = resolve_access("admin", None, claims)
        assert view.records == claims
        assert view.status is AccessStatus.OK
        assert view.can_bulk_evaluate

    def test_admin_ignores_owner_id(self, claims) -> None:
        view = resolve_access("admin", "FRA001", claims)
        assert len(view.records) == len(claims)

    def test_beneficiary_sees_own_record(self, claims) -> None:
        view = resolve_access("user", "FRA003", claims)
        assert [r.record_id for r in view.records] == ["FRA003"]
        assert view.status is AccessStatus.OK
        assert not view.can_bulk_evaluate

    def test_beneficiary_without_record(self, claims) -> None:
        view = resolve_access("user", "FRA999", claims)
        assert view.records == ()
        assert view.status is AccessStatus.NO_RECORD_FOUND

    def test_beneficiary_without_owner_id(self, claims) -> None:
        view = resolve_access("user", None, claims)
        assert view.status is AccessStatus.NO_RECORD_FOUND

    def test_unknown_role(self, claims) -> None:
        with pytest.raises(UnauthorizedRoleError):
            resolve_access("auditor", "FRA001", claims)

    def test_accepts_generator(self, claims) -> None:
        view = resolve_access("user", "FRA002", (r for r in claims))
        assert view.records[0].record_id == "FRA002"

    def test_view_lookup(self, claims) -> None:
        view = resolve_access("user", "FRA001", claims)
        assert view.get("FRA001") is not None
        assert view.get("FRA002") is None
        with pytest.raises(UnknownRecordError):
            view.require("FRA002")


# ---------------------------------------------------------------------------
# Guarded evaluation
# ---------------------------------------------------------------------------


class TestGuardedRecommend:
    def test_no_record_found_skips_engine(self, catalog: CatalogStore, claims) -> None:
        engine = CountingEngine()
        view = resolve_access("user", "FRA999", claims)

        guarded = guarded_recommend(engine, catalog, view)

        assert engine.calls == 0
        assert guarded.status is AccessStatus.NO_RECORD_FOUND
        assert guarded.result.schemes == ()
        assert guarded.result.interventions == ()
        assert guarded.to_dict()["status"] == "no_record_found"

    def test_no_record_found_even_without_catalog(self, claims) -> None:
        view = resolve_access("user", None, claims)
        guarded = guarded_recommend(CountingEngine(), None, view)
        assert guarded.status is AccessStatus.NO_RECORD_FOUND

    def test_beneficiary_own_record_by_default(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("user", "FRA001", claims)
        guarded = guarded_recommend(RecommendationEngine(), catalog, view)
        assert guarded.status is AccessStatus.OK
        assert guarded.result.record_id == "FRA001"
        assert guarded.result.schemes

    def test_beneficiary_cannot_reach_other_record(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("user", "FRA001", claims)
        with pytest.raises(UnknownRecordError):
            guarded_recommend(RecommendationEngine(), catalog, view, "FRA002")

    def test_admin_any_record(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("admin", None, claims)
        guarded = guarded_recommend(RecommendationEngine(), catalog, view, "FRA005")
        assert guarded.result.record_id == "FRA005"

    def test_admin_requires_record_id(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("admin", None, claims)
        with pytest.raises(InvalidRecordError):
            guarded_recommend(RecommendationEngine(), catalog, view)

    def test_admin_unknown_record(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("admin", None, claims)
        with pytest.raises(UnknownRecordError):
            guarded_recommend(RecommendationEngine(), catalog, view, "FRA999")

    def test_zero_schemes_is_distinguishable_from_no_record(self, catalog: CatalogStore) -> None:
        record = ClaimRecord(
            record_id="Z1",
            name="Zero Match",
            state="Kerala",
            district="Wayanad",
            village="Thirunelli",
            claim_type="Individual Forest Rights",
            claim_status="Rejected",
            area=0.4,
        )
        empty = CatalogStore(
            [s for s in catalog.schemes if s.scheme_id != "SCH002"],
            catalog.interventions,
        )
        view = resolve_access("user", "Z1", [record])
        guarded = guarded_recommend(RecommendationEngine(), empty, view)
        assert guarded.status is AccessStatus.OK
        assert guarded.result.schemes == ()
        assert guarded.to_dict()["status"] == "ok"


class TestGuardedBulk:
    def test_admin_all_records(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("admin", None, claims)
        results = guarded_recommend_bulk(RecommendationEngine(), catalog, view)
        assert list(results) == [r.record_id for r in claims]

    def test_admin_selected_records(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("admin", None, claims)
        results = guarded_recommend_bulk(RecommendationEngine(), catalog, view, ["FRA004", "FRA001"])
        assert list(results) == ["FRA004", "FRA001"]

    def test_repeated_ids_evaluated_once(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("admin", None, claims)
        engine = CountingEngine()
        results = guarded_recommend_bulk(engine, catalog, view, ["FRA002", "FRA001", "FRA002"])
        assert list(results) == ["FRA002", "FRA001"]
        assert engine.calls == 2

    def test_admin_unknown_id(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("admin", None, claims)
        with pytest.raises(UnknownRecordError):
            guarded_recommend_bulk(RecommendationEngine(), catalog, view, ["FRA001", "NOPE"])

    def test_beneficiary_rejected(self, catalog: CatalogStore, claims) -> None:
        view = resolve_access("user", "FRA001", claims)
        with pytest.raises(UnauthorizedRoleError):
            guarded_recommend_bulk(RecommendationEngine(), catalog, view)

    def test_view_is_immutable(self, claims) -> None:
        view = AccessView(role=CallerRole.ADMIN, records=tuple(claims))
        with pytest.raises(AttributeError):
            view.role = CallerRole.BENEFICIARY  # type: ignore[misc]
