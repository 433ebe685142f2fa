"""fibercost: cost and ROI estimation for fiber buildout projects.

Usage::

    from fibercost import create_default_estimator, Project, ProjectUnit

    estimator = create_default_estimator()
    estimate = estimator.estimate(project)
"""

from fibercost.aggregator import CostAggregator, aggregate
from fibercost.engine import ProjectEstimator
from fibercost.exceptions import (
    ConfigurationError,
    FiberCostError,
    InvalidInputError,
    RateReferenceError,
)
from fibercost.factory import create_default_estimator
from fibercost.models.catalog import LaborRate, MileageRate, RateCatalogEntry, Unit
from fibercost.models.project import (
    GlobalAssumptions,
    Project,
    ProjectLaborRate,
    ProjectMileageRate,
    ProjectUnit,
)
from fibercost.models.results import (
    CostBreakdown,
    CostLine,
    ProjectEstimate,
    ROIResult,
    ScenarioSummary,
)
from fibercost.roi import ROIProjector, project_roi

__all__ = [
    "ConfigurationError",
    "CostAggregator",
    "CostBreakdown",
    "CostLine",
    "FiberCostError",
    "GlobalAssumptions",
    "InvalidInputError",
    "LaborRate",
    "MileageRate",
    "Project",
    "ProjectEstimate",
    "ProjectEstimator",
    "ProjectLaborRate",
    "ProjectMileageRate",
    "ProjectUnit",
    "ROIProjector",
    "ROIResult",
    "RateCatalogEntry",
    "RateReferenceError",
    "ScenarioSummary",
    "Unit",
    "aggregate",
    "create_default_estimator",
    "project_roi",
]
