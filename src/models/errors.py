"""Failure conditions raised by the recommendation service layer.

``NoRecordFound`` is not among them: a beneficiary without a claim
is a normal outcome reported through
:class:`~src.models.enums.AccessStatus`, not an exception.
"""

from __future__ import annotations


class RecommendationError(Exception):
    """Base class for recommendation-layer failures."""


class InvalidRecordError(RecommendationError):
    """The claim record is absent or is not a ``ClaimRecord``."""


class MissingCatalogError(RecommendationError):
    """The scheme or intervention catalog was not supplied (misconfiguration)."""


class UnauthorizedRoleError(RecommendationError):
    """The caller's role is not one the access guard knows."""

    def __init__(self, role: object) -> None:
        super().__init__(f"Unauthorized role: {role!r}")
        self.role = role


class UnknownRecordError(RecommendationError):
    """The requested record id is not visible to the caller."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Claim record not found: {record_id!r}")
        self.record_id = record_id
