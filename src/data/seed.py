"""Data seeding utilities for the static catalogs and the claim records.

Loads scheme definitions, intervention templates and FRA claim records
from the bundled JSON files under ``catalogs/`` (or custom paths) into
validated models.  Designed to run once at application startup; the
resulting tuples are treated as immutable for the life of the process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from src.models.catalog import InterventionTemplate, SchemeDefinition
from src.models.claim import ClaimRecord

logger = structlog.get_logger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

_DATA_DIR: Path = Path(__file__).resolve().parent / "catalogs"
SCHEMES_PATH: Path = _DATA_DIR / "schemes.json"
INTERVENTIONS_PATH: Path = _DATA_DIR / "interventions.json"
CLAIMS_PATH: Path = _DATA_DIR / "claims.json"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _read_entries(file_path: Path) -> list[dict]:
    if not file_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {file_path}")

    with file_path.open("r", encoding="utf-8") as f:
        raw_entries = json.load(f)

    if not isinstance(raw_entries, list):
        raise ValueError(f"Catalog file must contain a JSON array: {file_path}")
    return raw_entries


def _load_models(file_path: Path, model: type[_ModelT], kind: str) -> tuple[_ModelT, ...]:
    """Parse every entry of *file_path*, skipping (and logging) invalid ones."""
    items: list[_ModelT] = []
    for raw in _read_entries(file_path):
        try:
            items.append(model.model_validate(raw))
        except ValidationError:
            logger.warning(
                "seed.parse_error",
                kind=kind,
                entry_id=raw.get("id", "unknown") if isinstance(raw, dict) else "unknown",
                exc_info=True,
            )

    logger.info("seed.loaded", kind=kind, count=len(items), source=str(file_path))
    return tuple(items)


def load_schemes(path: Path | None = None) -> tuple[SchemeDefinition, ...]:
    """Load scheme definitions, in file order.

    File order is the catalog order, which breaks ties between schemes
    with equal match scores.

    Raises
    ------
    FileNotFoundError
        If the JSON file does not exist.
    json.JSONDecodeError
        If the JSON is malformed.
    """
    return _load_models(path or SCHEMES_PATH, SchemeDefinition, "scheme")


def load_interventions(path: Path | None = None) -> tuple[InterventionTemplate, ...]:
    """Load intervention templates, in file order."""
    return _load_models(path or INTERVENTIONS_PATH, InterventionTemplate, "intervention")


def load_claims(path: Path | None = None) -> tuple[ClaimRecord, ...]:
    """Load claim records (already normalised by the document-intake pipeline)."""
    return _load_models(path or CLAIMS_PATH, ClaimRecord, "claim")
