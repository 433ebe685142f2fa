"""Cost aggregation: turns a project's selections into itemized cost lines.

Each of the three selection lists (units, labor, mileage) is resolved against
its own rate catalog:

1. **Index**: the catalog is keyed by id once per call; duplicate ids are
   rejected.
2. **Resolve**: every selection with a positive quantity must name an id
   present in the catalog. A dangling id raises :class:`RateReferenceError`
   and is never dropped. Zero-quantity selections are skipped unresolved.
3. **Emit**: one :class:`CostLine` per catalog entry with a positive selected
   quantity, in catalog order. Zero quantities produce no line.
4. **Total**: category totals, the grand total and the cost per home passed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, TypeVar

from fibercost.exceptions import InvalidInputError, RateReferenceError
from fibercost.models.catalog import LaborRate, MileageRate, RateCatalogEntry, Unit
from fibercost.models.enums import RateCategory
from fibercost.models.results import CostBreakdown, CostLine
from fibercost.numeric import per_unit
from fibercost.validation import require_non_negative

if TYPE_CHECKING:
    from fibercost.models.project import Project

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", bound=RateCatalogEntry)


class Selection(Protocol):
    @property
    def rate_id(self) -> str: ...

    @property
    def amount(self) -> float: ...


def index_catalog(category: RateCategory, catalog: Sequence[EntryT]) -> dict[str, EntryT]:
    """Key a catalog by entry id, rejecting duplicate ids."""
    index: dict[str, EntryT] = {}
    for entry in catalog:
        if entry.id in index:
            raise InvalidInputError(
                f"{category.value}_catalog", f"duplicate rate id '{entry.id}'"
            )
        index[entry.id] = entry
    logger.debug("Indexed %d %s rates", len(index), category.value)
    return index


def _rate_line(entry: Unit | LaborRate, quantity: float) -> CostLine:
    return CostLine(
        rate_id=entry.id,
        name=entry.name,
        type=entry.type,
        quantity=quantity,
        unit_cost=entry.cost,
        total=quantity * entry.cost,
    )


def _mileage_line(entry: MileageRate, trips: float) -> CostLine:
    return CostLine(
        rate_id=entry.id,
        name=f"{entry.distance:g} miles",
        type=entry.type,
        quantity=trips,
        unit_cost=entry.cost_per_mile,
        total=trips * entry.cost_per_mile,
    )


class CostAggregator:
    """Stateless calculator that prices a project against three rate catalogs.

    Example::

        breakdown = CostAggregator().aggregate(project, units, labor, mileage)
        breakdown.total_cost
    """

    def aggregate(
        self,
        project: Project,
        units: Sequence[Unit],
        labor_rates: Sequence[LaborRate],
        mileage_rates: Sequence[MileageRate],
    ) -> CostBreakdown:
        """Price every selection of ``project`` and total the results.

        Raises:
            RateReferenceError: If a selection names an id absent from its
                catalog.
            InvalidInputError: If a quantity or homes passed is negative, or
                a catalog repeats an id.
        """
        require_non_negative("homes_passed", project.homes_passed)

        unit_costs = self._price_category(
            RateCategory.UNITS, "selected_units", project.selected_units, units, _rate_line,
        )
        labor_costs = self._price_category(
            RateCategory.LABOR,
            "selected_labor_rates",
            project.selected_labor_rates,
            labor_rates,
            _rate_line,
        )
        mileage_costs = self._price_category(
            RateCategory.MILEAGE,
            "selected_mileage_rates",
            project.selected_mileage_rates,
            mileage_rates,
            _mileage_line,
        )

        total_units_cost = sum((line.total for line in unit_costs), 0.0)
        total_labor_cost = sum((line.total for line in labor_costs), 0.0)
        total_mileage_cost = sum((line.total for line in mileage_costs), 0.0)
        total_cost = total_units_cost + total_labor_cost + total_mileage_cost

        return CostBreakdown(
            unit_costs=unit_costs,
            labor_costs=labor_costs,
            mileage_costs=mileage_costs,
            total_units_cost=total_units_cost,
            total_labor_cost=total_labor_cost,
            total_mileage_cost=total_mileage_cost,
            total_cost=total_cost,
            cost_per_home=per_unit(total_cost, project.homes_passed),
        )

    @staticmethod
    def _price_category(
        category: RateCategory,
        field: str,
        selections: Sequence[Selection],
        catalog: Sequence[EntryT],
        build_line: Callable[[EntryT, float], CostLine],
    ) -> list[CostLine]:
        """Resolve one selection list and emit its lines in catalog order."""
        index = index_catalog(category, catalog)

        # Repeated selections of the same rate are summed into one line
        quantities: dict[str, float] = {}
        for position, selection in enumerate(selections):
            require_non_negative(f"{field}[{position}]", selection.amount)
            # A zero quantity is the same as no selection
            if selection.amount == 0:
                continue
            if selection.rate_id not in index:
                raise RateReferenceError(category.value, selection.rate_id)
            quantities[selection.rate_id] = (
                quantities.get(selection.rate_id, 0.0) + selection.amount
            )

        return [
            build_line(entry, quantities[entry.id])
            for entry in catalog
            if entry.id in quantities
        ]


def aggregate(
    project: Project,
    units: Sequence[Unit],
    labor_rates: Sequence[LaborRate],
    mileage_rates: Sequence[MileageRate],
) -> CostBreakdown:
    """Module-level shortcut for :meth:`CostAggregator.aggregate`."""
    return CostAggregator().aggregate(project, units, labor_rates, mileage_rates)
