"""Tests for the fibercost input and output models."""

from __future__ import annotations

import json
import math

import pytest
from pydantic import ValidationError

from fibercost.models import (
    CostBreakdown,
    CostLine,
    GlobalAssumptions,
    LaborRate,
    MileageRate,
    Project,
    ProjectUnit,
    RateCategory,
    ROIResult,
    Unit,
)

# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------


class TestCatalogEntries:
    def test_unit(self) -> None:
        unit = Unit(id="u1", name="Fiber cable", cost=2.15, type="foot")
        assert unit.cost == 2.15

    @pytest.mark.parametrize("cost", [0.0, -1.0])
    def test_non_positive_cost_rejected(self, cost: float) -> None:
        with pytest.raises(ValidationError):
            LaborRate(id="l1", name="Splicer", cost=cost, type="hour")

    def test_mileage_rate_from_camel_case(self) -> None:
        rate = MileageRate.model_validate({"id": "m1", "distance": 50, "costPerMile": 0.67})

        assert rate.cost_per_mile == 0.67
        assert rate.cost == 0.67
        assert rate.name == "50 miles"
        assert rate.type == "mile"

    def test_mileage_rate_keeps_explicit_name(self) -> None:
        rate = MileageRate(id="m1", name="Depot run", distance=12.5, cost_per_mile=0.5)
        assert rate.name == "Depot run"

    def test_mileage_rate_fractional_distance_name(self) -> None:
        rate = MileageRate(id="m1", distance=12.5, cost_per_mile=0.5)
        assert rate.name == "12.5 miles"

    def test_negative_distance_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MileageRate(id="m1", distance=-5, cost_per_mile=0.5)

    def test_entries_are_frozen(self) -> None:
        unit = Unit(id="u1", name="Fiber cable", cost=2.15, type="foot")
        with pytest.raises(ValidationError):
            unit.cost = 3.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------


class TestProject:
    def test_minimal_project(self) -> None:
        project = Project(name="Minimal")

        assert project.homes_passed == 0
        assert project.current_customers == 0
        assert project.image_url is None
        assert project.selected_units == []

    def test_from_camel_case_payload(self) -> None:
        payload = {
            "name": "Maple Hollow",
            "imageUrl": "https://example.com/map.png",
            "homesPassed": 100,
            "currentCustomers": 20,
            "selectedUnits": [{"unitId": "u1", "quantity": 5}],
            "selectedLaborRates": [{"laborRateId": "l1", "quantity": 2}],
            "selectedMileageRates": [{"mileageRateId": "m1", "trips": 3}],
        }

        project = Project.model_validate(payload)

        assert project.image_url == "https://example.com/map.png"
        assert project.homes_passed == 100
        assert project.selected_units[0].unit_id == "u1"
        assert project.selected_labor_rates[0].labor_rate_id == "l1"
        assert project.selected_mileage_rates[0].trips == 3

    def test_json_round_trip_by_alias(self) -> None:
        project = Project(
            name="Round trip",
            homes_passed=10,
            selected_units=[ProjectUnit(unit_id="u1", quantity=1.5)],
        )

        data = json.loads(project.model_dump_json(by_alias=True))
        assert data["homesPassed"] == 10
        assert data["selectedUnits"][0]["unitId"] == "u1"
        assert Project.model_validate(data) == project

    def test_selection_uniform_accessors(self) -> None:
        project = Project.model_validate({
            "name": "Accessors",
            "selectedUnits": [{"unitId": "u1", "quantity": 5}],
            "selectedMileageRates": [{"mileageRateId": "m1", "trips": 3}],
        })

        assert project.selected_units[0].rate_id == "u1"
        assert project.selected_units[0].amount == 5
        assert project.selected_mileage_rates[0].rate_id == "m1"
        assert project.selected_mileage_rates[0].amount == 3


class TestGlobalAssumptions:
    def test_defaults_growth_to_zero(self) -> None:
        assumptions = GlobalAssumptions(monthly_income_per_customer=75.0)
        assert assumptions.projected_growth_percentage == 0.0

    def test_income_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            GlobalAssumptions(monthly_income_per_customer=0.0)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def _line(rate_id: str, quantity: float, unit_cost: float) -> CostLine:
    return CostLine(
        rate_id=rate_id,
        name=rate_id,
        type="each",
        quantity=quantity,
        unit_cost=unit_cost,
        total=quantity * unit_cost,
    )


class TestCostBreakdown:
    def test_cost_distribution(self) -> None:
        breakdown = CostBreakdown(
            unit_costs=[_line("u1", 6, 100.0)],
            labor_costs=[_line("l1", 3, 100.0)],
            mileage_costs=[_line("m1", 1, 100.0)],
            total_units_cost=600.0,
            total_labor_cost=300.0,
            total_mileage_cost=100.0,
            total_cost=1000.0,
        )

        distribution = breakdown.cost_distribution()

        assert distribution == {
            RateCategory.UNITS: 60.0,
            RateCategory.LABOR: 30.0,
            RateCategory.MILEAGE: 10.0,
        }

    def test_cost_distribution_of_empty_project(self) -> None:
        distribution = CostBreakdown().cost_distribution()
        assert set(distribution.values()) == {0.0}


class TestROIResult:
    def _result(self) -> ROIResult:
        return ROIResult(
            current_take_rate=0.0,
            projected_new_customers=10,
            total_projected_customers=10,
            projected_take_rate=10.0,
            current_roi=math.inf,
            projected_roi=2.5,
            full_take_roi=0.25,
        )

    def test_python_dump_keeps_infinity(self) -> None:
        assert self._result().model_dump()["current_roi"] == math.inf

    def test_json_dump_renders_infinity_as_null(self) -> None:
        data = json.loads(self._result().model_dump_json())

        assert data["current_roi"] is None
        assert data["projected_roi"] == 2.5
