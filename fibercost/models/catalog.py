"""Rate catalog models: the priced units, labor rates and mileage buckets."""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from fibercost.models.base import ValueRecord


class RateCatalogEntry(ValueRecord):
    """A single priced entry in a rate catalog.

    ``cost`` is currency per ``type`` (per foot, per hour, per each...).
    """

    id: str
    name: str
    cost: float = Field(gt=0)
    type: str


class Unit(RateCatalogEntry):
    """A physical unit of material or equipment (cable, pedestal, drop...)."""


class LaborRate(RateCatalogEntry):
    """A labor rate, usually priced per hour."""


class MileageRate(RateCatalogEntry):
    """A travel bucket: a fixed trip distance priced per mile.

    ``name`` defaults to ``"{distance} miles"``, ``type`` to ``"mile"`` and
    ``cost`` to ``cost_per_mile`` when the catalog provider omits them.
    """

    distance: float = Field(ge=0)
    cost_per_mile: float = Field(gt=0)
    type: str = "mile"

    @model_validator(mode="before")
    @classmethod
    def fill_derived_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        per_mile = data.get("cost_per_mile", data.get("costPerMile"))
        if data.get("cost") is None and per_mile is not None:
            data["cost"] = per_mile
        if not data.get("name") and data.get("distance") is not None:
            data["name"] = f"{float(data['distance']):g} miles"
        return data
