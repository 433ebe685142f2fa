"""Numeric helpers shared by the cost aggregator and ROI projector."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

MONTHS_PER_YEAR = 12


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which would undercount customers at exact halves.
    """
    # Decimal(value) is exact, so values just below a half never round up
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def percentage(part: float, whole: float) -> float:
    """``part / whole * 100``, or 0 when ``whole`` is 0."""
    if whole == 0:
        return 0.0
    return part * 100.0 / whole


def per_unit(total: float, count: float) -> float:
    """``total / count``, or 0 when ``count`` is 0."""
    if count == 0:
        return 0.0
    return total / count


def payback_years(total_cost: float, monthly_income_per_customer: float, customers: int) -> float:
    """Years of revenue at ``customers`` needed to recover ``total_cost``.

    Returns ``math.inf`` when there are no customers.
    """
    if customers == 0:
        return math.inf
    return total_cost / (monthly_income_per_customer * customers * MONTHS_PER_YEAR)
