"""Formatting helpers for estimate output.

The engine returns raw floats; these helpers turn them into display strings
the way the project summary shows them.
"""

from __future__ import annotations

import math


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$1,234,567')
    - Amounts < $10,000: with cents (e.g., '$9,876.54')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_percent(value: float) -> str:
    """Format a 0-100 percentage with one decimal, e.g. '70.0%'."""
    return f"{value:.1f}%"


def format_years(years: float) -> str:
    """Format a payback period, e.g. '3.2 years'; infinite means no payback."""
    if not math.isfinite(years):
        return "Never"
    return f"{years:.1f} years"
