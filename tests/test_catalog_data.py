"""Tests for the rate catalog data layer."""

from __future__ import annotations

import pytest

from fibercost.data.repository import RateCatalogRepository
from fibercost.data.seed import SEED_LABOR_RATES, SEED_MILEAGE_RATES, SEED_UNITS
from fibercost.exceptions import InvalidInputError, RateReferenceError
from fibercost.models.catalog import LaborRate, MileageRate, Unit

# ---------------------------------------------------------------------------
# Seed data integrity
# ---------------------------------------------------------------------------


class TestSeedData:
    @pytest.mark.parametrize(
        "catalog", [SEED_UNITS, SEED_LABOR_RATES, SEED_MILEAGE_RATES],
    )
    def test_ids_are_unique(self, catalog: list[Unit] | list[LaborRate] | list[MileageRate]) -> None:
        ids = [entry.id for entry in catalog]
        assert len(ids) == len(set(ids)), "Duplicate seed ids found"

    def test_all_units_priced(self) -> None:
        for unit in SEED_UNITS:
            assert isinstance(unit, Unit)
            assert unit.cost > 0
            assert unit.type in {"foot", "each"}

    def test_labor_rates_are_hourly(self) -> None:
        for rate in SEED_LABOR_RATES:
            assert rate.type == "hour"
            assert rate.cost > 0

    def test_mileage_rates_derive_name_and_cost(self) -> None:
        for rate in SEED_MILEAGE_RATES:
            assert rate.name == f"{rate.distance:g} miles"
            assert rate.cost == rate.cost_per_mile
            assert rate.type == "mile"

    def test_mileage_buckets_sorted_by_distance(self) -> None:
        distances = [rate.distance for rate in SEED_MILEAGE_RATES]
        assert distances == sorted(distances)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


@pytest.fixture()
def repo() -> RateCatalogRepository:
    return RateCatalogRepository(SEED_UNITS, SEED_LABOR_RATES, SEED_MILEAGE_RATES)


class TestRepositoryLookups:
    def test_get_unit(self, repo: RateCatalogRepository) -> None:
        unit = repo.get_unit("fiber-144ct")
        assert unit.name == "144-count fiber cable"
        assert unit.cost == 2.15

    def test_get_labor_rate(self, repo: RateCatalogRepository) -> None:
        assert repo.get_labor_rate("splicer").cost == 85.0

    def test_get_mileage_rate(self, repo: RateCatalogRepository) -> None:
        assert repo.get_mileage_rate("trip-100").distance == 100

    def test_missing_unit_raises(self, repo: RateCatalogRepository) -> None:
        with pytest.raises(RateReferenceError) as exc_info:
            repo.get_unit("nope")

        assert exc_info.value.category == "units"
        assert exc_info.value.rate_id == "nope"

    def test_missing_labor_rate_raises(self, repo: RateCatalogRepository) -> None:
        with pytest.raises(RateReferenceError) as exc_info:
            repo.get_labor_rate("nope")

        assert exc_info.value.category == "labor"

    def test_missing_mileage_rate_raises(self, repo: RateCatalogRepository) -> None:
        with pytest.raises(RateReferenceError) as exc_info:
            repo.get_mileage_rate("nope")

        assert exc_info.value.category == "mileage"


class TestRepositoryCatalogs:
    def test_catalogs_preserve_order(self, repo: RateCatalogRepository) -> None:
        units, labor_rates, mileage_rates = repo.catalogs()

        assert [u.id for u in units] == [u.id for u in SEED_UNITS]
        assert [r.id for r in labor_rates] == [r.id for r in SEED_LABOR_RATES]
        assert [r.id for r in mileage_rates] == [r.id for r in SEED_MILEAGE_RATES]

    def test_catalogs_are_copies(self, repo: RateCatalogRepository) -> None:
        units, _, _ = repo.catalogs()
        units.clear()

        assert len(repo.units) == len(SEED_UNITS)

    def test_duplicate_ids_rejected(self) -> None:
        units = [
            Unit(id="u1", name="A", cost=1.0, type="foot"),
            Unit(id="u1", name="B", cost=2.0, type="foot"),
        ]

        with pytest.raises(InvalidInputError):
            RateCatalogRepository(units, [], [])
