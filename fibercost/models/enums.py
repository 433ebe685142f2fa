"""Enums for the fibercost domain models."""

from enum import StrEnum


class RateCategory(StrEnum):
    """The three rate catalogs a project draws its costs from."""

    UNITS = "units"
    LABOR = "labor"
    MILEAGE = "mileage"
