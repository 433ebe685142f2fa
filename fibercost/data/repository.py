"""Rate catalog repository: the provider of the three ordered rate catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from fibercost.aggregator import index_catalog
from fibercost.exceptions import RateReferenceError
from fibercost.models.enums import RateCategory

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fibercost.models.catalog import LaborRate, MileageRate, RateCatalogEntry, Unit

EntryT = TypeVar("EntryT", bound="RateCatalogEntry")


class RateCatalogRepository:
    """Repository holding the unit, labor and mileage rate catalogs.

    Catalogs keep their given order, which is the order cost lines are
    emitted in. Lookups by id raise :class:`RateReferenceError` rather than
    returning ``None``.
    """

    def __init__(
        self,
        units: Sequence[Unit],
        labor_rates: Sequence[LaborRate],
        mileage_rates: Sequence[MileageRate],
    ) -> None:
        self._units = list(units)
        self._labor_rates = list(labor_rates)
        self._mileage_rates = list(mileage_rates)
        self._unit_index = index_catalog(RateCategory.UNITS, self._units)
        self._labor_index = index_catalog(RateCategory.LABOR, self._labor_rates)
        self._mileage_index = index_catalog(RateCategory.MILEAGE, self._mileage_rates)

    @property
    def units(self) -> list[Unit]:
        return list(self._units)

    @property
    def labor_rates(self) -> list[LaborRate]:
        return list(self._labor_rates)

    @property
    def mileage_rates(self) -> list[MileageRate]:
        return list(self._mileage_rates)

    def catalogs(self) -> tuple[list[Unit], list[LaborRate], list[MileageRate]]:
        """Return copies of the (units, labor_rates, mileage_rates) catalogs."""
        return self.units, self.labor_rates, self.mileage_rates

    def get_unit(self, unit_id: str) -> Unit:
        return _lookup(RateCategory.UNITS, self._unit_index, unit_id)

    def get_labor_rate(self, labor_rate_id: str) -> LaborRate:
        return _lookup(RateCategory.LABOR, self._labor_index, labor_rate_id)

    def get_mileage_rate(self, mileage_rate_id: str) -> MileageRate:
        return _lookup(RateCategory.MILEAGE, self._mileage_index, mileage_rate_id)


def _lookup(category: RateCategory, index: dict[str, EntryT], rate_id: str) -> EntryT:
    entry = index.get(rate_id)
    if entry is None:
        raise RateReferenceError(category.value, rate_id)
    return entry
