"""
fin_metrics/cashflow.py
=======================
Operating cash-flow health over the most recent years.
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from .config import MetricsConfig
from .types import AnnualFinancials, CashFlowInfo, CashFlowStatus


def most_recent(financials: Sequence[AnnualFinancials], n: int) -> List[AnnualFinancials]:
    """Latest `n` years, newest first. Shorter histories return what exists."""
    return sorted(financials, key=lambda f: f.year, reverse=True)[:n]


def calculate_cash_flow_status(
    financials: Sequence[AnnualFinancials],
    currency: str,
    config: Optional[MetricsConfig] = None,
) -> CashFlowInfo:
    cfg = config or MetricsConfig()

    window = most_recent(financials, cfg.cash_flow_window)
    total = sum((f.operating_cash_flow for f in window), 0.0)

    status: CashFlowStatus
    if total > cfg.cash_flow_threshold:
        status = "generative"
    elif total < -cfg.cash_flow_threshold:
        status = "burning"
    else:
        status = "neutral"

    return CashFlowInfo(status=status, five_year_total=total, currency=currency)


def calculate_cumulative_cash_flow(financials: Sequence[AnnualFinancials]) -> float:
    """Operating cash flow summed over the whole history given."""
    return sum((f.operating_cash_flow for f in financials), 0.0)
