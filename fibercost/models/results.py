"""Cost and ROI output models for the fibercost engine."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from pydantic import Field, field_serializer

from fibercost.models.base import ValueRecord
from fibercost.models.enums import RateCategory
from fibercost.models.project import GlobalAssumptions  # noqa: TCH001 (pydantic resolves at runtime)
from fibercost.numeric import percentage


class CostLine(ValueRecord):
    """One itemized cost: ``total`` is always ``quantity * unit_cost``."""

    rate_id: str
    name: str
    type: str
    quantity: float
    unit_cost: float
    total: float


class CostBreakdown(ValueRecord):
    """Itemized lines and totals for the three cost categories."""

    unit_costs: list[CostLine] = Field(default_factory=list)
    labor_costs: list[CostLine] = Field(default_factory=list)
    mileage_costs: list[CostLine] = Field(default_factory=list)
    total_units_cost: float = 0.0
    total_labor_cost: float = 0.0
    total_mileage_cost: float = 0.0
    total_cost: float = 0.0
    cost_per_home: float = 0.0

    def category_totals(self) -> dict[RateCategory, float]:
        return {
            RateCategory.UNITS: self.total_units_cost,
            RateCategory.LABOR: self.total_labor_cost,
            RateCategory.MILEAGE: self.total_mileage_cost,
        }

    def cost_distribution(self) -> dict[RateCategory, float]:
        """Share of total cost per category, in percent (0-100).

        Every share is 0 when the project has no cost at all.
        """
        totals = self.category_totals()
        if self.total_cost <= 0:
            return {category: 0.0 for category in totals}
        return {
            category: percentage(amount, self.total_cost)
            for category, amount in totals.items()
        }


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


class ROIResult(ValueRecord):
    """Take-rate and years-to-payback figures for the three scenarios.

    ROI values are ``math.inf`` when the scenario has no paying customers.
    JSON has no infinity, so those serialize as ``null``.
    """

    current_take_rate: float
    projected_new_customers: int
    total_projected_customers: int
    projected_take_rate: float
    current_roi: float
    projected_roi: float
    full_take_roi: float

    @field_serializer("current_roi", "projected_roi", "full_take_roi", when_used="json")
    def serialize_roi(self, value: float) -> float | None:
        return _finite_or_none(value)


class ScenarioSummary(ValueRecord):
    """Customers, take rate, revenue and payback for a single scenario."""

    name: str
    customers: int
    take_rate: float
    monthly_revenue: float
    annual_revenue: float
    roi_years: float

    @field_serializer("roi_years", when_used="json")
    def serialize_roi_years(self, value: float) -> float | None:
        return _finite_or_none(value)


class ProjectEstimate(ValueRecord):
    """Complete output of the estimator for one project.

    This is the record handed to the presentation layer: itemized costs,
    ROI figures, a row per scenario and the assumptions used.
    """

    project_name: str
    homes_passed: int
    current_customers: int
    costs: CostBreakdown
    roi: ROIResult
    scenarios: list[ScenarioSummary]
    assumptions: GlobalAssumptions
    generated_at: datetime = Field(default_factory=datetime.now)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with formatted strings for display."""
        from fibercost.formatting import format_currency, format_percent, format_years

        distribution = self.costs.cost_distribution()

        return {
            "project_name": self.project_name,
            "homes_passed": self.homes_passed,
            "total_cost_formatted": format_currency(self.costs.total_cost),
            "cost_per_home_formatted": format_currency(self.costs.cost_per_home),
            "current_take_rate_formatted": format_percent(self.roi.current_take_rate),
            "projected_take_rate_formatted": format_percent(self.roi.projected_take_rate),
            "projected_new_customers": self.roi.projected_new_customers,
            "cost_distribution": [
                {
                    "category": category.value,
                    "cost_formatted": format_currency(amount),
                    "percent_of_total": distribution[category],
                }
                for category, amount in self.costs.category_totals().items()
            ],
            "scenarios": [
                {
                    "name": s.name,
                    "customers": s.customers,
                    "take_rate_formatted": format_percent(s.take_rate),
                    "monthly_revenue_formatted": format_currency(s.monthly_revenue),
                    "roi_formatted": format_years(s.roi_years),
                }
                for s in self.scenarios
            ],
            "generated_at_formatted": self.generated_at.strftime("%Y-%m-%d %H:%M"),
        }
