"""Application settings loaded from environment variables.

Uses pydantic-settings for validation and type coercion. App-specific
settings use the ``FRADSS_`` prefix; logging settings use their
canonical environment variable names via ``validation_alias``.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Central configuration for the FRA decision-support service.

    Environment variables are loaded from a ``.env`` file when present.
    List-valued keys (the rule sets' location lists) are given as JSON
    arrays, e.g. ``FRADSS_WATER_STRESSED_STATES='["Odisha", "Jharkhand"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FRADSS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # ── App ────────────────────────────────────────────────────────────
    env: Literal["development", "production"] = "development"

    # ── API ────────────────────────────────────────────────────────────
    api_host: str = Field(default="0.0.0.0", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")
    cors_origins: str = ""  # comma-separated, production only

    # ── Logging ────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(default="json", validation_alias="LOG_FORMAT")

    # ── Rule set locations ─────────────────────────────────────────────
    water_scarce_villages: list[str] = Field(default_factory=lambda: ["Malkangiri", "Koraput"])
    water_stressed_states: list[str] = Field(default_factory=lambda: ["Odisha"])
    water_trigger_villages: list[str] = Field(default_factory=lambda: ["Malkangiri"])
    drought_priority_states: list[str] = Field(default_factory=lambda: ["Maharashtra"])

    # ── Catalogs (None -> bundled JSON under src/data/catalogs) ────────
    schemes_path: Path | None = None
    interventions_path: Path | None = None
    claims_path: Path | None = None

    # ── Derived Properties ─────────────────────────────────────────────

    @property
    def is_production(self) -> bool:
        return self.env == Environment.PRODUCTION

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Module-level singleton: import ``settings`` everywhere.
settings = Settings()
