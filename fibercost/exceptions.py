"""Custom exception hierarchy for the fibercost engine."""

from __future__ import annotations


class FiberCostError(Exception):
    """Base exception for all fibercost errors."""


class RateReferenceError(FiberCostError, LookupError):
    """Raised when a selection references a rate id missing from its catalog."""

    def __init__(self, category: str, rate_id: str) -> None:
        self.category = category
        self.rate_id = rate_id
        super().__init__(f"Unknown {category} rate id '{rate_id}'")


class InvalidInputError(FiberCostError, ValueError):
    """Raised when an engine input is out of range."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class ConfigurationError(FiberCostError):
    """Raised when environment configuration cannot be parsed."""
