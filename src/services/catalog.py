"""Read-only store for the scheme and intervention catalogs.

Both tables keep their load order (which is the tie-break order for
ranking) and are indexed by id for O(1) lookup.  The store is built
once and never mutated, so it can be shared freely between concurrent
requests.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import structlog

from src.data.seed import load_interventions, load_schemes
from src.models.catalog import InterventionTemplate, SchemeDefinition
from src.models.errors import MissingCatalogError

if TYPE_CHECKING:
    from config.settings import Settings

logger = structlog.get_logger(__name__)

_T = TypeVar("_T", SchemeDefinition, InterventionTemplate)


def _index(entries: tuple[_T, ...], id_attr: str, kind: str) -> dict[str, _T]:
    index: dict[str, _T] = {}
    for entry in entries:
        entry_id = getattr(entry, id_attr)
        if entry_id in index:
            raise ValueError(f"Duplicate {kind} id in catalog: {entry_id!r}")
        index[entry_id] = entry
    return index


class CatalogStore:
    """Scheme definitions and intervention templates, keyed by stable id."""

    __slots__ = ("_intervention_index", "_interventions", "_scheme_index", "_schemes")

    def __init__(
        self,
        schemes: Iterable[SchemeDefinition] | None,
        interventions: Iterable[InterventionTemplate] | None,
    ) -> None:
        if schemes is None:
            raise MissingCatalogError("Scheme catalog was not supplied.")
        if interventions is None:
            raise MissingCatalogError("Intervention catalog was not supplied.")

        self._schemes: tuple[SchemeDefinition, ...] = tuple(schemes)
        self._interventions: tuple[InterventionTemplate, ...] = tuple(interventions)
        self._scheme_index = _index(self._schemes, "scheme_id", "scheme")
        self._intervention_index = _index(self._interventions, "intervention_id", "intervention")

    @classmethod
    def from_files(
        cls,
        schemes_path: Path | None = None,
        interventions_path: Path | None = None,
    ) -> CatalogStore:
        store = cls(load_schemes(schemes_path), load_interventions(interventions_path))
        logger.info(
            "catalog.loaded",
            schemes=len(store.schemes),
            interventions=len(store.interventions),
        )
        return store

    @classmethod
    def from_settings(cls, settings: Settings) -> CatalogStore:
        return cls.from_files(settings.schemes_path, settings.interventions_path)

    @property
    def schemes(self) -> tuple[SchemeDefinition, ...]:
        return self._schemes

    @property
    def interventions(self) -> tuple[InterventionTemplate, ...]:
        return self._interventions

    def get_scheme(self, scheme_id: str) -> SchemeDefinition | None:
        return self._scheme_index.get(scheme_id)

    def get_intervention(self, intervention_id: str) -> InterventionTemplate | None:
        return self._intervention_index.get(intervention_id)

    def __repr__(self) -> str:
        return f"CatalogStore(schemes={len(self._schemes)}, interventions={len(self._interventions)})"
