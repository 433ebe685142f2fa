"""ROI projection: take rates and years to payback for three scenarios.

* **Current**: today's paying customers.
* **Projected**: current customers plus growth. Growth is a percentage of
  homes passed (not of current customers), rounded to whole customers and
  clipped so the total never exceeds homes passed. Negative growth counts as
  no new customers.
* **Full take**: every home passed is a customer.

Payback is ``total_cost / (monthly_income_per_customer * customers * 12)``
years, or ``math.inf`` for a scenario with no customers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fibercost.exceptions import InvalidInputError
from fibercost.models.results import ROIResult
from fibercost.numeric import payback_years, percentage, round_half_away_from_zero
from fibercost.validation import (
    require_finite,
    require_non_negative,
    validate_customer_counts,
)

if TYPE_CHECKING:
    from fibercost.models.project import Project


class ROIProjector:
    """Stateless calculator deriving take-rate and ROI figures for a project."""

    def project(
        self,
        project: Project,
        total_cost: float,
        monthly_income_per_customer: float,
        projected_growth_percentage: float,
    ) -> ROIResult:
        """Project take rates and payback for current, projected and full take.

        Raises:
            InvalidInputError: If customer counts are negative or exceed homes
                passed, the total cost is negative, or the monthly income is
                not positive.
        """
        validate_customer_counts(project)
        require_non_negative("total_cost", total_cost)
        require_finite("projected_growth_percentage", projected_growth_percentage)
        require_finite("monthly_income_per_customer", monthly_income_per_customer)
        if monthly_income_per_customer <= 0:
            msg = f"must be positive, got {monthly_income_per_customer}"
            raise InvalidInputError("monthly_income_per_customer", msg)

        homes = project.homes_passed
        current = project.current_customers

        # Negative growth adds no customers and never removes current ones
        growth = round_half_away_from_zero(homes * (projected_growth_percentage / 100))
        projected_new = max(0, growth)
        total_projected = min(current + projected_new, homes)

        return ROIResult(
            current_take_rate=percentage(current, homes),
            projected_new_customers=projected_new,
            total_projected_customers=total_projected,
            projected_take_rate=percentage(total_projected, homes),
            current_roi=payback_years(total_cost, monthly_income_per_customer, current),
            projected_roi=payback_years(total_cost, monthly_income_per_customer, total_projected),
            full_take_roi=payback_years(total_cost, monthly_income_per_customer, homes),
        )


def project_roi(
    project: Project,
    total_cost: float,
    monthly_income_per_customer: float,
    projected_growth_percentage: float,
) -> ROIResult:
    """Module-level shortcut for :meth:`ROIProjector.project`."""
    return ROIProjector().project(
        project, total_cost, monthly_income_per_customer, projected_growth_percentage,
    )
