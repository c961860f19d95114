"""Location sets consulted by the eligibility and intervention rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config.settings import Settings


@dataclass(frozen=True, slots=True)
class RuleConfig:
    water_scarce_villages: frozenset[str] = frozenset({"Malkangiri", "Koraput"})
    water_stressed_states: frozenset[str] = frozenset({"Odisha"})
    water_trigger_villages: frozenset[str] = frozenset({"Malkangiri"})
    drought_priority_states: frozenset[str] = frozenset({"Maharashtra"})

    @classmethod
    def from_settings(cls, settings: Settings) -> RuleConfig:
        return cls(
            water_scarce_villages=frozenset(settings.water_scarce_villages),
            water_stressed_states=frozenset(settings.water_stressed_states),
            water_trigger_villages=frozenset(settings.water_trigger_villages),
            drought_priority_states=frozenset(settings.drought_priority_states),
        )


DEFAULT_RULE_CONFIG = RuleConfig()
