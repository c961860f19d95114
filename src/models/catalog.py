from __future__ import annotations

from pydantic import Field

from src.models.base import FrozenModel
from src.models.enums import Priority


class SchemeDefinition(FrozenModel):
    scheme_id: str = Field(alias="id", min_length=1)
    name: str
    description: str
    benefits: str
    ministry: str | None = None
    website: str | None = None


class InterventionTemplate(FrozenModel):
    """An on-the-ground action the intervention rules can propose.

    ``category`` is free text (Water, Forestry, Agriculture, ...); the
    values the bundled catalog uses are listed in
    :class:`~src.models.enums.InterventionCategory`.
    """

    intervention_id: str = Field(alias="id", min_length=1)
    category: str
    name: str
    description: str
    priority: Priority = Priority.MEDIUM
