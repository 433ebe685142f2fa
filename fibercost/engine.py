"""Project estimator: cost aggregation followed by ROI projection.

The ProjectEstimator runs the two stateless calculators in sequence:

1. **Validate**: customer counts must be non-negative and current customers
   may not exceed homes passed.
2. **Aggregate**: price the project's selections against the repository's
   rate catalogs (or catalogs supplied by the caller).
3. **Project**: feed the grand total into the ROI projector with the global
   assumptions.
4. **Summarize**: one row per scenario (current, projected, full take) with
   customers, take rate, revenue and payback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fibercost.aggregator import CostAggregator
from fibercost.models.results import ProjectEstimate, ScenarioSummary
from fibercost.numeric import MONTHS_PER_YEAR, percentage
from fibercost.roi import ROIProjector
from fibercost.validation import validate_customer_counts

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fibercost.data.repository import RateCatalogRepository
    from fibercost.models.catalog import LaborRate, MileageRate, Unit
    from fibercost.models.project import GlobalAssumptions, Project
    from fibercost.models.results import ROIResult

logger = logging.getLogger(__name__)


class ProjectEstimator:
    """Converts a Project into a ProjectEstimate.

    Args:
        repository: Provider of the unit, labor and mileage rate catalogs.
        assumptions: Default global assumptions, used when ``estimate`` is
            called without its own.

    Example::

        from fibercost.data import RateCatalogRepository, SEED_UNITS, ...

        repo = RateCatalogRepository(SEED_UNITS, SEED_LABOR_RATES, SEED_MILEAGE_RATES)
        estimator = ProjectEstimator(repo, assumptions)
        estimate = estimator.estimate(project)
    """

    def __init__(
        self,
        repository: RateCatalogRepository,
        assumptions: GlobalAssumptions,
        aggregator: CostAggregator | None = None,
        projector: ROIProjector | None = None,
    ) -> None:
        self._repository = repository
        self._assumptions = assumptions
        self._aggregator = aggregator or CostAggregator()
        self._projector = projector or ROIProjector()

    @property
    def repository(self) -> RateCatalogRepository:
        return self._repository

    @property
    def assumptions(self) -> GlobalAssumptions:
        return self._assumptions

    def estimate(
        self,
        project: Project,
        assumptions: GlobalAssumptions | None = None,
        units: Sequence[Unit] | None = None,
        labor_rates: Sequence[LaborRate] | None = None,
        mileage_rates: Sequence[MileageRate] | None = None,
    ) -> ProjectEstimate:
        """Produce costs, ROI and scenario rows for a project.

        Any catalog left as ``None`` comes from the repository.

        Raises:
            RateReferenceError: If a selection names an unknown rate id.
            InvalidInputError: If an input is out of range.
        """
        if assumptions is None:
            assumptions = self._assumptions

        # 1. Validate counts before any pricing work
        validate_customer_counts(project)

        # 2. Aggregate costs
        costs = self._aggregator.aggregate(
            project,
            self._repository.units if units is None else units,
            self._repository.labor_rates if labor_rates is None else labor_rates,
            self._repository.mileage_rates if mileage_rates is None else mileage_rates,
        )

        # 3. Project ROI from the grand total
        roi = self._projector.project(
            project,
            costs.total_cost,
            assumptions.monthly_income_per_customer,
            assumptions.projected_growth_percentage,
        )

        logger.info(
            "Estimated project %r: total cost %.2f, %d projected customers",
            project.name,
            costs.total_cost,
            roi.total_projected_customers,
        )

        return ProjectEstimate(
            project_name=project.name,
            homes_passed=project.homes_passed,
            current_customers=project.current_customers,
            costs=costs,
            roi=roi,
            scenarios=self._build_scenarios(project, roi, assumptions),
            assumptions=assumptions,
        )

    @staticmethod
    def _build_scenarios(
        project: Project,
        roi: ROIResult,
        assumptions: GlobalAssumptions,
    ) -> list[ScenarioSummary]:
        """Build the current / projected / full-take rows."""
        income = assumptions.monthly_income_per_customer
        rows = [
            ("Current", project.current_customers, roi.current_take_rate, roi.current_roi),
            (
                "Projected",
                roi.total_projected_customers,
                roi.projected_take_rate,
                roi.projected_roi,
            ),
            (
                "Full take",
                project.homes_passed,
                percentage(project.homes_passed, project.homes_passed),
                roi.full_take_roi,
            ),
        ]
        return [
            ScenarioSummary(
                name=name,
                customers=customers,
                take_rate=take_rate,
                monthly_revenue=income * customers,
                annual_revenue=income * customers * MONTHS_PER_YEAR,
                roi_years=roi_years,
            )
            for name, customers, take_rate, roi_years in rows
        ]
