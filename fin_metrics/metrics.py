"""
fin_metrics/metrics.py
======================
Aggregates the growth, profitability, efficiency and cash-flow calculators
over a company's full history into one CalculatedMetrics record.

Window conventions:
  - CAGR spans first → last year, `years = count - 1` transitions
  - "current" figures come from the latest year
  - averages use the full history
  - cumulative cash flow uses the 5 most recent years
"""
from __future__ import annotations
import dataclasses
import logging
from typing import Optional, Sequence

from .cashflow import calculate_cash_flow_status
from .config import MetricsConfig
from .efficiency import calculate_roe, calculate_average_roe, calculate_debt_to_equity
from .growth import calculate_cagr
from .profitability import (
    calculate_profitability_status,
    calculate_profit_margin,
    calculate_average_profit_margin,
)
from .rounding import round_half_up
from .types import CalculatedMetrics, CapitalRaise, CompanyData

logger = logging.getLogger(__name__)


def calculate_total_capital_raised(raises: Sequence[CapitalRaise]) -> float:
    return sum((r.amount_raised for r in raises), 0.0)


def calculate_dilution(shares_outstanding: float, raises: Sequence[CapitalRaise]) -> float:
    """
    Dilution since the first raise in the order given, in percent.

    Only the first raise's `shares_before` is used as the baseline; raises
    are not re-sorted, so callers must pass them chronologically.
    """
    if not raises or shares_outstanding <= 0:
        return 0.0
    first = raises[0]
    added = shares_outstanding - (first.shares_before or 0)
    return round_half_up(added / shares_outstanding * 100, 1)


def calculate_all_metrics(
    company: CompanyData,
    config: Optional[MetricsConfig] = None,
) -> CalculatedMetrics:
    cfg = config or MetricsConfig()

    total_raised = calculate_total_capital_raised(company.capital_raises)
    dilution = calculate_dilution(company.shares_outstanding, company.capital_raises)

    if not company.financials:
        logger.debug("%s: no financial history, financial metrics zeroed", company.ticker)
        return CalculatedMetrics(
            total_capital_raised=total_raised,
            dilution_percentage=dilution,
        )

    ordered = sorted(company.financials, key=lambda f: f.year)
    first, last = ordered[0], ordered[-1]
    years = len(ordered) - 1
    logger.debug("%s: %d years (%d-%d)", company.ticker, len(ordered), first.year, last.year)

    revenue_cagr = calculate_cagr(first.revenue, last.revenue, years)

    # CAGR over losses is meaningless
    earnings_cagr = 0.0
    if first.earnings > 0 and last.earnings > 0:
        earnings_cagr = calculate_cagr(first.earnings, last.earnings, years)

    cash_flow_5y = calculate_cash_flow_status(ordered, company.currency, cfg).five_year_total

    return CalculatedMetrics(
        revenue_cagr_10y=revenue_cagr,
        earnings_cagr_10y=earnings_cagr,
        average_profit_margin=calculate_average_profit_margin(ordered),
        current_profit_margin=calculate_profit_margin(last.revenue, last.earnings),
        current_roe=calculate_roe(last.earnings, last.shareholder_equity),
        average_roe=calculate_average_roe(ordered),
        cumulative_cash_flow_5y=cash_flow_5y,
        total_capital_raised=total_raised,
        dilution_percentage=dilution,
        current_debt_to_equity=calculate_debt_to_equity(
            last.total_liabilities, last.shareholder_equity
        ),
    )


def refresh_company(company: CompanyData, config: Optional[MetricsConfig] = None) -> CompanyData:
    """
    Copy of `company` with profitability, cash-flow status and current
    debt-to-equity recomputed from its own financials.
    """
    if company.financials:
        latest = max(company.financials, key=lambda f: f.year)
        debt_to_equity = calculate_debt_to_equity(latest.total_liabilities, latest.shareholder_equity)
    else:
        debt_to_equity = 0.0
    return dataclasses.replace(
        company,
        profitability=calculate_profitability_status(company.financials, config),
        cash_flow=calculate_cash_flow_status(company.financials, company.currency, config),
        current_debt_to_equity=debt_to_equity,
    )
