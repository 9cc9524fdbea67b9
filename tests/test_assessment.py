"""
tests/test_assessment.py
========================
ROE / leverage ratings and the plain-language assessment.
"""
import dataclasses

import pytest

from fin_metrics.assessment import (
    AssessmentItem,
    Rating,
    debt_rating,
    generate_assessment,
    roe_rating,
)
from fin_metrics.metrics import calculate_all_metrics, refresh_company
from fin_metrics.types import (
    CalculatedMetrics, CapitalRaise, CashFlowInfo, CompanyData,
    Profitable, RecentlyProfitable, PreProfit, PreRevenue, Intermittent,
)


def _company(**kwargs):
    base = CompanyData(ticker="TEST", currency="USD", shares_outstanding=1_000)
    return dataclasses.replace(base, **kwargs)


def _raises(n):
    return [
        CapitalRaise(date=f"20{10 + i}-01-01", type="Placement", amount_raised=1_000_000,
                     shares_before=100, shares_after=110, currency="USD")
        for i in range(n)
    ]


def _texts(items):
    return [i.text for i in items]


# ═══════════════════════════════════════════════════════════════════════════════
# 1. RATINGS
# ═══════════════════════════════════════════════════════════════════════════════

class TestROERating:

    @pytest.mark.parametrize("roe,label,tone", [
        (25.0, "Excellent", "positive"),
        (15.0, "Excellent", "positive"),
        (14.9, "Good", "positive"),
        (10.0, "Good", "positive"),
        (9.9, "Moderate", "warning"),
        (5.0, "Moderate", "warning"),
        (4.9, "Poor", "warning"),
        (0.1, "Poor", "warning"),
        (0.0, "Negative", "negative"),
        (-3.0, "Negative", "negative"),
    ])
    def test_thresholds(self, roe, label, tone):
        assert roe_rating(roe) == Rating(label, tone)


class TestDebtRating:

    @pytest.mark.parametrize("ratio,label,tone", [
        (0.0, "Conservative", "positive"),
        (0.3, "Conservative", "positive"),
        (0.31, "Moderate", "warning"),
        (0.6, "Moderate", "warning"),
        (0.61, "Highly Leveraged", "negative"),
        (2.5, "Highly Leveraged", "negative"),
    ])
    def test_thresholds(self, ratio, label, tone):
        assert debt_rating(ratio) == Rating(label, tone)


# ═══════════════════════════════════════════════════════════════════════════════
# 2. ASSESSMENT ITEMS
# ═══════════════════════════════════════════════════════════════════════════════

class TestAssessmentItem:

    def test_icons(self):
        assert AssessmentItem("a", "positive").icon == "✓"
        assert AssessmentItem("b", "warning").icon == "⚠"
        assert AssessmentItem("c", "negative").icon == "⚠"


class TestProfitabilityItems:

    def test_profitable(self):
        items = generate_assessment(_company(profitability=Profitable(7)), CalculatedMetrics())
        assert items[0] == AssessmentItem(
            "This company has been profitable for 7 consecutive years", "positive")

    def test_recently_profitable(self):
        items = generate_assessment(_company(profitability=RecentlyProfitable(2022)), CalculatedMetrics())
        assert items[0] == AssessmentItem("Turned profitable in 2022", "positive")

    def test_intermittent(self):
        items = generate_assessment(_company(profitability=Intermittent(4, 10)), CalculatedMetrics())
        assert items[0].text == "Profitable in 4 of last 10 years (inconsistent profitability)"
        assert items[0].type == "warning"

    def test_pre_profit_adds_risk_warning_last(self):
        items = generate_assessment(_company(profitability=PreProfit()), CalculatedMetrics())
        assert items[0].type == "warning"
        assert items[-1] == AssessmentItem(
            "High-risk investment dependent on achieving profitability", "negative")

    def test_pre_revenue_is_negative_and_risky(self):
        items = generate_assessment(_company(profitability=PreRevenue()), CalculatedMetrics())
        assert items[0] == AssessmentItem("This company is in pre-revenue stage (no sales yet)", "negative")
        assert "High-risk investment dependent on achieving profitability" in _texts(items)

    def test_profitable_has_no_risk_warning(self):
        items = generate_assessment(_company(profitability=Profitable(3)), CalculatedMetrics())
        assert "High-risk investment dependent on achieving profitability" not in _texts(items)


class TestGrowthItems:

    def test_revenue_growth(self):
        items = generate_assessment(_company(), CalculatedMetrics(revenue_cagr_10y=12.5))
        assert "Revenue has grown 13% annually over the last decade" in _texts(items)

    def test_revenue_decline(self):
        items = generate_assessment(_company(), CalculatedMetrics(revenue_cagr_10y=-4.2))
        assert AssessmentItem("Revenue has declined 4% annually over the last decade", "negative") in items

    def test_flat_revenue_has_no_item(self):
        items = generate_assessment(_company(), CalculatedMetrics())
        assert not any("Revenue has" in t for t in _texts(items))

    def test_earnings_growth_only_when_profitable(self):
        metrics = CalculatedMetrics(earnings_cagr_10y=8.0)
        profitable = generate_assessment(_company(profitability=Profitable(5)), metrics)
        recent = generate_assessment(_company(profitability=RecentlyProfitable(2023)), metrics)
        assert "Earnings have grown 8% annually" in _texts(profitable)
        assert "Earnings have grown 8% annually" not in _texts(recent)


class TestCashFlowItems:

    def test_generative(self):
        company = _company(cash_flow=CashFlowInfo("generative", 2_500_000_000, "USD"))
        items = generate_assessment(company, CalculatedMetrics())
        assert AssessmentItem(
            "The business generates positive cash flow ($2.5B over 5 years)", "positive") in items

    def test_burning_uses_absolute_amount(self):
        company = _company(currency="AUD", cash_flow=CashFlowInfo("burning", -12_300_000, "AUD"))
        items = generate_assessment(company, CalculatedMetrics())
        assert AssessmentItem("Has burned 12.3M AUD in cash over the last 5 years", "negative") in items

    def test_neutral_has_no_item(self):
        items = generate_assessment(_company(), CalculatedMetrics())
        assert not any("cash" in t.lower() and "flow" in t.lower() for t in _texts(items))


class TestDebtItems:

    @pytest.mark.parametrize("ratio,text,tone", [
        (0.3, "Uses conservative debt (30% of capital structure)", "positive"),
        (0.45, "Uses moderate debt (45% of capital structure)", "positive"),
        (0.6, "Uses moderate debt (60% of capital structure)", "positive"),
        (1.25, "Highly leveraged (125% debt)", "warning"),
    ])
    def test_debt_levels(self, ratio, text, tone):
        items = generate_assessment(_company(current_debt_to_equity=ratio), CalculatedMetrics())
        assert AssessmentItem(text, tone) in items


class TestCapitalRaiseItems:

    def test_no_raises(self):
        items = generate_assessment(_company(), CalculatedMetrics())
        assert AssessmentItem("No equity capital raised (self-funded growth)", "positive") in items

    def test_two_rounds_is_positive(self):
        company = _company(capital_raises=_raises(2))
        items = generate_assessment(company, CalculatedMetrics(total_capital_raised=2_000_000))
        assert AssessmentItem("Raised $2.0M in equity capital across 2 rounds", "positive") in items

    def test_three_rounds_is_frequent(self):
        company = _company(capital_raises=_raises(3))
        items = generate_assessment(company, CalculatedMetrics(total_capital_raised=3_000_000))
        assert AssessmentItem(
            "Raised $3.0M in equity capital across 3 rounds (frequent capital raising)",
            "warning") in items


class TestROEItems:

    @pytest.mark.parametrize("roe,text,tone", [
        (15.0, "Returns 15.0% on shareholder equity (above 15% is excellent)", "positive"),
        (10.0, "Returns 10.0% on shareholder equity (solid performance)", "positive"),
        (9.9, "Returns 9.9% on shareholder equity (below 10% is modest)", "warning"),
        (0.1, "Returns 0.1% on shareholder equity (below 10% is modest)", "warning"),
    ])
    def test_roe_levels(self, roe, text, tone):
        items = generate_assessment(_company(), CalculatedMetrics(current_roe=roe))
        assert AssessmentItem(text, tone) in items

    @pytest.mark.parametrize("roe", [0.0, -5.0])
    def test_non_positive_roe_has_no_item(self, roe):
        items = generate_assessment(_company(), CalculatedMetrics(current_roe=roe))
        assert not any(t.startswith("Returns") for t in _texts(items))


class TestFullAssessment:

    def test_order_for_growth_company(self, growth_company):
        company = refresh_company(growth_company)
        items = generate_assessment(company, calculate_all_metrics(company))
        assert _texts(items) == [
            "This company has been profitable for 6 consecutive years",
            "Revenue has grown 10% annually over the last decade",
            "Earnings have grown 10% annually",
            "The business generates positive cash flow ($1.4M over 5 years)",
            "Uses moderate debt (60% of capital structure)",
            "Raised $7.0M in equity capital across 2 rounds",
            "Returns 10.7% on shareholder equity (solid performance)",
        ]
