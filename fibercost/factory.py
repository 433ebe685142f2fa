"""Factory functions for creating pre-configured ProjectEstimator instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fibercost.config import load_assumptions
from fibercost.data.repository import RateCatalogRepository
from fibercost.data.seed import SEED_LABOR_RATES, SEED_MILEAGE_RATES, SEED_UNITS
from fibercost.engine import ProjectEstimator

if TYPE_CHECKING:
    from fibercost.models.project import GlobalAssumptions


def create_default_estimator(
    assumptions: GlobalAssumptions | None = None,
) -> ProjectEstimator:
    """Create a ProjectEstimator wired up with the seed rate catalogs.

    Global assumptions default to the values read by
    :func:`fibercost.config.load_assumptions`.

    Example::

        from fibercost import create_default_estimator, Project

        estimator = create_default_estimator()
        estimate = estimator.estimate(project)
    """
    repository = RateCatalogRepository(SEED_UNITS, SEED_LABOR_RATES, SEED_MILEAGE_RATES)
    return ProjectEstimator(repository, assumptions or load_assumptions())
