"""
fin_metrics/growth.py
=====================
Compound and year-over-year growth rates, as percentages.
"""
from __future__ import annotations
from typing import List, Sequence, Tuple

from .rounding import round_half_up
from .types import AnnualFinancials


def calculate_cagr(start_value: float, end_value: float, years: float) -> float:
    """
    Compound annual growth rate in percent, 1 decimal.
    Both endpoints must be positive and the span > 0, otherwise 0.
    """
    if start_value <= 0 or end_value <= 0 or years <= 0:
        return 0.0
    cagr = ((end_value / start_value) ** (1 / years) - 1) * 100
    return round_half_up(cagr, 1)


def calculate_yoy_growth(current: float, previous: float) -> float:
    """Growth vs. previous period; |previous| keeps the sign tracking direction."""
    if previous == 0:
        return 0.0
    growth = (current - previous) / abs(previous) * 100
    return round_half_up(growth, 1)


def calculate_yoy_series(
    financials: Sequence[AnnualFinancials],
    attr: str = "revenue",
) -> List[Tuple[int, float]]:
    """(year, growth%) for every year after the first, chronological."""
    ordered = sorted(financials, key=lambda f: f.year)
    series: List[Tuple[int, float]] = []
    for prev, curr in zip(ordered, ordered[1:]):
        series.append((curr.year, calculate_yoy_growth(getattr(curr, attr), getattr(prev, attr))))
    return series
