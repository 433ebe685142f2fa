"""Domain models for the fibercost engine."""

from fibercost.models.catalog import LaborRate, MileageRate, RateCatalogEntry, Unit
from fibercost.models.enums import RateCategory
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

__all__ = [
    "CostBreakdown",
    "CostLine",
    "GlobalAssumptions",
    "LaborRate",
    "MileageRate",
    "Project",
    "ProjectEstimate",
    "ProjectLaborRate",
    "ProjectMileageRate",
    "ProjectUnit",
    "ROIResult",
    "RateCatalogEntry",
    "RateCategory",
    "ScenarioSummary",
    "Unit",
]
