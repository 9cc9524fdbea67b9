"""
fin_metrics/efficiency.py
=========================
Return on equity and leverage.
"""
from __future__ import annotations
from typing import Sequence

from .rounding import round_half_up
from .types import AnnualFinancials


def calculate_roe(earnings: float, shareholder_equity: float) -> float:
    """
    ROE in percent, 1 decimal. Non-positive equity → 0.
    Negative earnings give a negative ROE; it is not clamped.
    """
    if shareholder_equity <= 0:
        return 0.0
    return round_half_up(earnings / shareholder_equity * 100, 1)


def calculate_average_roe(financials: Sequence[AnnualFinancials]) -> float:
    """Mean ROE over years with positive equity AND positive earnings."""
    values = [
        calculate_roe(f.earnings, f.shareholder_equity)
        for f in financials
        if f.shareholder_equity > 0 and f.earnings > 0
    ]
    if not values:
        return 0.0
    return round_half_up(sum(values) / len(values), 1)


def calculate_debt_to_equity(total_liabilities: float, shareholder_equity: float) -> float:
    """Raw ratio (not x100), 2 decimals."""
    if shareholder_equity <= 0:
        return 0.0
    return round_half_up(total_liabilities / shareholder_equity, 2)
