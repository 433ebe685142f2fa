"""Environment-driven global assumptions.

Settings come from ``os.environ`` after loading a ``.env`` file from the
working directory (existing environment variables win):

* ``FIBERCOST_MONTHLY_INCOME_PER_CUSTOMER``: monthly revenue per customer.
* ``FIBERCOST_PROJECTED_GROWTH_PERCENTAGE``: growth as a percent of homes
  passed.
"""

from __future__ import annotations

import math
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from fibercost.exceptions import ConfigurationError
from fibercost.models.project import GlobalAssumptions

MONTHLY_INCOME_ENV = "FIBERCOST_MONTHLY_INCOME_PER_CUSTOMER"
GROWTH_PERCENTAGE_ENV = "FIBERCOST_PROJECTED_GROWTH_PERCENTAGE"

DEFAULT_MONTHLY_INCOME_PER_CUSTOMER = 75.0
DEFAULT_PROJECTED_GROWTH_PERCENTAGE = 10.0

_ENV_BY_FIELD = {
    "monthly_income_per_customer": MONTHLY_INCOME_ENV,
    "projected_growth_percentage": GROWTH_PERCENTAGE_ENV,
}


def _read_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number, got '{raw}'"
        raise ConfigurationError(msg) from exc
    if not math.isfinite(value):
        msg = f"{name} must be a finite number, got '{raw}'"
        raise ConfigurationError(msg)
    return value


def load_assumptions(*, dotenv: bool = True) -> GlobalAssumptions:
    """Build :class:`GlobalAssumptions` from the environment.

    Raises:
        ConfigurationError: If a variable is not a finite number or the
            monthly income is not positive.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    settings = {
        "monthly_income_per_customer": _read_float(
            MONTHLY_INCOME_ENV, DEFAULT_MONTHLY_INCOME_PER_CUSTOMER,
        ),
        "projected_growth_percentage": _read_float(
            GROWTH_PERCENTAGE_ENV, DEFAULT_PROJECTED_GROWTH_PERCENTAGE,
        ),
    }
    try:
        return GlobalAssumptions(**settings)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = _field_for_location(error["loc"])
        name = _ENV_BY_FIELD.get(field, field)
        msg = f"{name} is invalid ({error['msg']}), got {settings.get(field)}"
        raise ConfigurationError(msg) from exc


def _field_for_location(loc: tuple[int | str, ...]) -> str:
    # Error locations report the camelCase alias
    head = str(loc[0]) if loc else ""
    for field, info in GlobalAssumptions.model_fields.items():
        if head in (field, info.alias):
            return field
    return head
