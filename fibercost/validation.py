"""Input range checks that raise :class:`InvalidInputError` with the field name."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from fibercost.exceptions import InvalidInputError

if TYPE_CHECKING:
    from fibercost.models.project import Project


def require_finite(field: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(field, f"must be a finite number, got {value}")


def require_non_negative(field: str, value: float) -> None:
    require_finite(field, value)
    if value < 0:
        raise InvalidInputError(field, f"must not be negative, got {value}")


def validate_customer_counts(project: Project) -> None:
    """Check homes passed and current customers are usable counts."""
    require_non_negative("homes_passed", project.homes_passed)
    require_non_negative("current_customers", project.current_customers)
    if project.current_customers > project.homes_passed:
        msg = (
            f"must not exceed homes_passed ({project.homes_passed}), "
            f"got {project.current_customers}"
        )
        raise InvalidInputError("current_customers", msg)
