"""
fin_metrics/assessment.py
=========================
Ratings and plain-language assessment of a company.

Ratings:
  ROE       ≥15 Excellent · ≥10 Good · ≥5 Moderate · >0 Poor · else Negative
  Leverage  D/E ≤0.3 Conservative · ≤0.6 Moderate · else Highly Leveraged

`generate_assessment` emits items in a fixed order: profitability, revenue
growth, earnings growth, cash flow, debt, capital raising, ROE, and finally
a risk warning for companies that are not yet profitable.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Literal

from .formatting import format_currency
from .rounding import round_half_up
from .types import (
    CalculatedMetrics, CompanyData,
    Profitable, RecentlyProfitable, PreProfit, PreRevenue, Intermittent,
)

Tone = Literal["positive", "warning", "negative"]


@dataclass(frozen=True)
class Rating:
    label: str
    tone: Tone


@dataclass(frozen=True)
class AssessmentItem:
    text: str
    type: Tone

    @property
    def icon(self) -> str:
        return "✓" if self.type == "positive" else "⚠"


def roe_rating(roe: float) -> Rating:
    if roe >= 15:
        return Rating("Excellent", "positive")
    if roe >= 10:
        return Rating("Good", "positive")
    if roe >= 5:
        return Rating("Moderate", "warning")
    if roe > 0:
        return Rating("Poor", "warning")
    return Rating("Negative", "negative")


def debt_rating(debt_to_equity: float) -> Rating:
    if debt_to_equity <= 0.3:
        return Rating("Conservative", "positive")
    if debt_to_equity <= 0.6:
        return Rating("Moderate", "warning")
    return Rating("Highly Leveraged", "negative")


def _whole(value: float) -> str:
    return f"{round_half_up(value, 0):.0f}"


def generate_assessment(company: CompanyData, metrics: CalculatedMetrics) -> List[AssessmentItem]:
    """
    Plain-language findings for `company`. Statuses and debt-to-equity are
    read from the company record; growth, ROE and capital totals from
    `metrics`.
    """
    items: List[AssessmentItem] = []
    info = company.profitability

    if isinstance(info, Profitable):
        items.append(AssessmentItem(
            f"This company has been profitable for {info.consecutive_years} consecutive years",
            "positive"))
    elif isinstance(info, RecentlyProfitable):
        items.append(AssessmentItem(f"Turned profitable in {info.profitable_since}", "positive"))
    elif isinstance(info, PreProfit):
        items.append(AssessmentItem(
            "This company is not yet profitable (has revenue but operating at a loss)",
            "warning"))
    elif isinstance(info, PreRevenue):
        items.append(AssessmentItem("This company is in pre-revenue stage (no sales yet)", "negative"))
    elif isinstance(info, Intermittent):
        items.append(AssessmentItem(
            f"Profitable in {info.profitable_years_count} of last {info.total_years} years "
            "(inconsistent profitability)",
            "warning"))

    if metrics.revenue_cagr_10y > 0:
        items.append(AssessmentItem(
            f"Revenue has grown {_whole(metrics.revenue_cagr_10y)}% annually over the last decade",
            "positive"))
    elif metrics.revenue_cagr_10y < 0:
        items.append(AssessmentItem(
            f"Revenue has declined {_whole(abs(metrics.revenue_cagr_10y))}% annually over the last decade",
            "negative"))

    if metrics.earnings_cagr_10y > 0 and isinstance(info, Profitable):
        items.append(AssessmentItem(
            f"Earnings have grown {_whole(metrics.earnings_cagr_10y)}% annually", "positive"))

    cash_flow = company.cash_flow
    if cash_flow.status == "generative":
        amount = format_currency(cash_flow.five_year_total, company.currency)
        items.append(AssessmentItem(
            f"The business generates positive cash flow ({amount} over 5 years)", "positive"))
    elif cash_flow.status == "burning":
        amount = format_currency(abs(cash_flow.five_year_total), company.currency)
        items.append(AssessmentItem(f"Has burned {amount} in cash over the last 5 years", "negative"))

    debt_pct = _whole(company.current_debt_to_equity * 100)
    level = debt_rating(company.current_debt_to_equity).label
    if level == "Conservative":
        items.append(AssessmentItem(f"Uses conservative debt ({debt_pct}% of capital structure)", "positive"))
    elif level == "Moderate":
        items.append(AssessmentItem(f"Uses moderate debt ({debt_pct}% of capital structure)", "positive"))
    else:
        items.append(AssessmentItem(f"Highly leveraged ({debt_pct}% debt)", "warning"))

    rounds = len(company.capital_raises)
    if rounds == 0:
        items.append(AssessmentItem("No equity capital raised (self-funded growth)", "positive"))
    else:
        total = format_currency(metrics.total_capital_raised, company.currency)
        if rounds <= 2:
            items.append(AssessmentItem(
                f"Raised {total} in equity capital across {rounds} rounds", "positive"))
        else:
            items.append(AssessmentItem(
                f"Raised {total} in equity capital across {rounds} rounds (frequent capital raising)",
                "warning"))

    roe = metrics.current_roe
    if roe >= 15:
        items.append(AssessmentItem(
            f"Returns {roe:.1f}% on shareholder equity (above 15% is excellent)", "positive"))
    elif roe >= 10:
        items.append(AssessmentItem(
            f"Returns {roe:.1f}% on shareholder equity (solid performance)", "positive"))
    elif roe > 0:
        items.append(AssessmentItem(
            f"Returns {roe:.1f}% on shareholder equity (below 10% is modest)", "warning"))

    if isinstance(info, (PreProfit, PreRevenue)):
        items.append(AssessmentItem(
            "High-risk investment dependent on achieving profitability", "negative"))

    return items
