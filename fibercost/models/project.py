"""Project input models for the fibercost engine."""

from __future__ import annotations

from pydantic import Field

from fibercost.models.base import ValueRecord


class ProjectUnit(ValueRecord):
    """Selected quantity of a catalog unit."""

    unit_id: str
    quantity: float = 0.0

    @property
    def rate_id(self) -> str:
        return self.unit_id

    @property
    def amount(self) -> float:
        return self.quantity


class ProjectLaborRate(ValueRecord):
    """Selected quantity (usually hours) of a catalog labor rate."""

    labor_rate_id: str
    quantity: float = 0.0

    @property
    def rate_id(self) -> str:
        return self.labor_rate_id

    @property
    def amount(self) -> float:
        return self.quantity


class ProjectMileageRate(ValueRecord):
    """Number of trips taken at a catalog mileage bucket."""

    mileage_rate_id: str
    trips: float = 0.0

    @property
    def rate_id(self) -> str:
        return self.mileage_rate_id

    @property
    def amount(self) -> float:
        return self.trips


class Project(ValueRecord):
    """A fiber buildout project as supplied by the project store.

    Quantities and customer counts are range-checked by the engine, not
    here, so that an out-of-range value surfaces as an
    :class:`~fibercost.exceptions.InvalidInputError` naming the field.
    """

    name: str
    image_url: str | None = None
    notes: str | None = None
    homes_passed: int = 0
    current_customers: int = 0
    selected_units: list[ProjectUnit] = Field(default_factory=list)
    selected_labor_rates: list[ProjectLaborRate] = Field(default_factory=list)
    selected_mileage_rates: list[ProjectMileageRate] = Field(default_factory=list)


class GlobalAssumptions(ValueRecord):
    """The two tunable global settings that drive the ROI projection."""

    monthly_income_per_customer: float = Field(gt=0)
    projected_growth_percentage: float = 0.0
