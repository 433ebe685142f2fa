"""Boundary helpers between raw form input and engine-ready selections.

The estimator form leaves a quantity blank when a rate is not selected. Those
blanks are converted here to a concrete ``0.0`` so the engine never receives
a missing quantity.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeVar

from fibercost.exceptions import InvalidInputError
from fibercost.models.project import (
    Project,
    ProjectLaborRate,
    ProjectMileageRate,
    ProjectUnit,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

SelectionT = TypeVar("SelectionT", ProjectUnit, ProjectLaborRate, ProjectMileageRate)


def parse_quantity(raw: str | float | None, field: str = "quantity") -> float:
    """Convert optional raw input to a non-negative float, 0.0 when blank.

    Raises:
        InvalidInputError: If the input is not a finite, non-negative number.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(field, f"must be a number, got '{raw}'") from exc
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(field, f"must be a non-negative number, got {raw}")
    return value


def _parse_count(raw: str | float | None, field: str) -> int:
    value = parse_quantity(raw, field)
    if not value.is_integer():
        raise InvalidInputError(field, f"must be a whole number, got {raw}")
    return int(value)


def _upsert(
    selections: Sequence[SelectionT],
    updated: SelectionT | None,
    matches: Callable[[SelectionT], bool],
) -> list[SelectionT]:
    # An edited selection keeps its position; duplicates of it are dropped
    result: list[SelectionT] = []
    placed = False
    for selection in selections:
        if not matches(selection):
            result.append(selection)
        elif not placed and updated is not None:
            result.append(updated)
            placed = True
    if not placed and updated is not None:
        result.append(updated)
    return result


def set_unit_quantity(
    selections: Sequence[ProjectUnit], unit_id: str, quantity: float,
) -> list[ProjectUnit]:
    """Return selections with ``unit_id`` set to ``quantity``.

    The selection is appended when new and dropped when ``quantity`` is 0.
    """
    quantity = parse_quantity(quantity)
    updated = ProjectUnit(unit_id=unit_id, quantity=quantity) if quantity > 0 else None
    return _upsert(selections, updated, lambda s: s.unit_id == unit_id)


def set_labor_rate_quantity(
    selections: Sequence[ProjectLaborRate], labor_rate_id: str, quantity: float,
) -> list[ProjectLaborRate]:
    """Return selections with ``labor_rate_id`` set to ``quantity``."""
    quantity = parse_quantity(quantity)
    updated = (
        ProjectLaborRate(labor_rate_id=labor_rate_id, quantity=quantity)
        if quantity > 0
        else None
    )
    return _upsert(selections, updated, lambda s: s.labor_rate_id == labor_rate_id)


def set_mileage_trips(
    selections: Sequence[ProjectMileageRate], mileage_rate_id: str, trips: float,
) -> list[ProjectMileageRate]:
    """Return selections with ``mileage_rate_id`` set to ``trips``."""
    trips = parse_quantity(trips, "trips")
    updated = (
        ProjectMileageRate(mileage_rate_id=mileage_rate_id, trips=trips)
        if trips > 0
        else None
    )
    return _upsert(selections, updated, lambda s: s.mileage_rate_id == mileage_rate_id)


def _optional_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def project_from_form(
    form: Mapping[str, str | None],
    selected_units: Sequence[ProjectUnit] = (),
    selected_labor_rates: Sequence[ProjectLaborRate] = (),
    selected_mileage_rates: Sequence[ProjectMileageRate] = (),
) -> Project:
    """Build a Project from submitted project-form fields.

    Expects the form's ``name``, ``imageUrl``, ``notes``, ``homesPassed`` and
    ``currentCustomers`` fields; blank optional text becomes ``None`` and
    blank counts become 0.

    Raises:
        InvalidInputError: If the name is blank or a count is not a
            non-negative whole number.
    """
    name = _optional_text(form.get("name"))
    if name is None:
        raise InvalidInputError("name", "is required")

    return Project(
        name=name,
        image_url=_optional_text(form.get("imageUrl")),
        notes=_optional_text(form.get("notes")),
        homes_passed=_parse_count(form.get("homesPassed"), "homes_passed"),
        current_customers=_parse_count(form.get("currentCustomers"), "current_customers"),
        selected_units=list(selected_units),
        selected_labor_rates=list(selected_labor_rates),
        selected_mileage_rates=list(selected_mileage_rates),
    )
