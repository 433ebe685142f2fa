"""Rate catalog data layer for the fibercost engine."""

from fibercost.data.repository import RateCatalogRepository
from fibercost.data.seed import SEED_LABOR_RATES, SEED_MILEAGE_RATES, SEED_UNITS

__all__ = [
    "SEED_LABOR_RATES",
    "SEED_MILEAGE_RATES",
    "SEED_UNITS",
    "RateCatalogRepository",
]
