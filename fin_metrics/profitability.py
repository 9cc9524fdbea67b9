"""
fin_metrics/profitability.py
============================
Profitability trajectory classifier and net-margin statistics.

Classification order (most recent year first):
  1. no history / latest revenue <= 0      → pre-revenue
  2. latest earnings <= 0                  → pre-profit
  3. streak of positive years from latest  ≥ 3 → profitable
  4. streak 1-2                            → recently-profitable
  5. some but not all years profitable     → intermittent
  6. otherwise                             → pre-profit
The current streak always wins over the intermittent fallback.
"""
from __future__ import annotations
from typing import Optional, Sequence

from .config import MetricsConfig
from .rounding import round_half_up
from .types import (
    AnnualFinancials, ProfitabilityInfo,
    Profitable, RecentlyProfitable, PreProfit, PreRevenue, Intermittent,
)


def calculate_profitability_status(
    financials: Sequence[AnnualFinancials],
    config: Optional[MetricsConfig] = None,
) -> ProfitabilityInfo:
    cfg = config or MetricsConfig()

    if not financials:
        return PreRevenue()

    ordered = sorted(financials, key=lambda f: f.year, reverse=True)
    latest = ordered[0]

    if latest.revenue <= 0:
        return PreRevenue()
    if latest.earnings <= 0:
        return PreProfit()

    streak = 0
    for f in ordered:
        if f.earnings <= 0:
            break
        streak += 1

    if streak >= cfg.profitable_streak_years:
        return Profitable(consecutive_years=streak)
    if streak >= 1:
        return RecentlyProfitable(profitable_since=ordered[streak - 1].year)

    # Only reachable if the latest-year earnings guard changes.
    profitable_years = sum(1 for f in ordered if f.earnings > 0)
    if 0 < profitable_years < len(ordered):
        return Intermittent(profitable_years_count=profitable_years, total_years=len(ordered))
    return PreProfit()


def calculate_profit_margin(revenue: float, earnings: float) -> float:
    """Net margin in percent; 0 when there is no revenue."""
    if revenue <= 0:
        return 0.0
    return round_half_up(earnings / revenue * 100, 1)


def calculate_average_profit_margin(financials: Sequence[AnnualFinancials]) -> float:
    """Mean margin over profitable years only; loss years are left out, not zeroed."""
    margins = [
        calculate_profit_margin(f.revenue, f.earnings)
        for f in financials
        if f.earnings > 0
    ]
    if not margins:
        return 0.0
    return round_half_up(sum(margins) / len(margins), 1)
