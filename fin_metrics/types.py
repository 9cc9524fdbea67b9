"""
fin_metrics/types.py
====================
Dataclasses for company fundamentals and the metrics derived from them.
Field names are snake_case; `to_dict()` helpers emit the camelCase keys
used by the company JSON payloads.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Union, Any

# ─── Enumerations ─────────────────────────────────────────────────────────────

CapitalRaiseType = Literal["IPO", "Rights Issue", "Placement", "Other"]
CAPITAL_RAISE_TYPES = ("IPO", "Rights Issue", "Placement", "Other")

ProfitabilityStatus = Literal[
    "profitable",
    "recently-profitable",
    "pre-profit",
    "pre-revenue",
    "intermittent",
]
CashFlowStatus = Literal["generative", "neutral", "burning"]


# ─── Raw Inputs ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AnnualFinancials:
    """One fiscal year. All amounts in the company's reporting currency."""
    year: int
    revenue: float
    earnings: float
    operating_cash_flow: float = 0.0
    total_assets: float = 0.0
    total_liabilities: float = 0.0
    shareholder_equity: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "revenue": self.revenue,
            "earnings": self.earnings,
            "operatingCashFlow": self.operating_cash_flow,
            "totalAssets": self.total_assets,
            "totalLiabilities": self.total_liabilities,
            "shareholderEquity": self.shareholder_equity,
        }


@dataclass(frozen=True)
class CapitalRaise:
    date: str
    type: CapitalRaiseType
    amount_raised: float
    shares_before: float
    shares_after: float
    currency: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "type": self.type,
            "amountRaised": self.amount_raised,
            "sharesBefore": self.shares_before,
            "sharesAfter": self.shares_after,
            "currency": self.currency,
        }


# ─── Profitability (sum type) ─────────────────────────────────────────────────
# Each variant carries only its own fields; `status` is the wire tag.

@dataclass(frozen=True)
class Profitable:
    consecutive_years: int

    @property
    def status(self) -> ProfitabilityStatus:
        return "profitable"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "consecutiveYears": self.consecutive_years}


@dataclass(frozen=True)
class RecentlyProfitable:
    profitable_since: int

    @property
    def status(self) -> ProfitabilityStatus:
        return "recently-profitable"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "profitableSince": self.profitable_since}


@dataclass(frozen=True)
class PreProfit:

    @property
    def status(self) -> ProfitabilityStatus:
        return "pre-profit"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status}


@dataclass(frozen=True)
class PreRevenue:

    @property
    def status(self) -> ProfitabilityStatus:
        return "pre-revenue"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status}


@dataclass(frozen=True)
class Intermittent:
    profitable_years_count: int
    total_years: int

    @property
    def status(self) -> ProfitabilityStatus:
        return "intermittent"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "profitableYearsCount": self.profitable_years_count,
            "totalYears": self.total_years,
        }


ProfitabilityInfo = Union[Profitable, RecentlyProfitable, PreProfit, PreRevenue, Intermittent]


# ─── Cash Flow ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CashFlowInfo:
    status: CashFlowStatus
    five_year_total: float
    currency: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "fiveYearTotal": self.five_year_total,
            "currency": self.currency,
        }


# ─── Aggregate Output ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CalculatedMetrics:
    """Composite metrics for one company, rebuilt on every call."""
    revenue_cagr_10y: float = 0.0
    earnings_cagr_10y: float = 0.0
    average_profit_margin: float = 0.0
    current_profit_margin: float = 0.0
    current_roe: float = 0.0
    average_roe: float = 0.0
    cumulative_cash_flow_5y: float = 0.0
    total_capital_raised: float = 0.0
    dilution_percentage: float = 0.0
    current_debt_to_equity: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "revenueCAGR10Y": self.revenue_cagr_10y,
            "earningsCAGR10Y": self.earnings_cagr_10y,
            "averageProfitMargin": self.average_profit_margin,
            "currentProfitMargin": self.current_profit_margin,
            "currentROE": self.current_roe,
            "averageROE": self.average_roe,
            "cumulativeCashFlow5Y": self.cumulative_cash_flow_5y,
            "totalCapitalRaised": self.total_capital_raised,
            "dilutionPercentage": self.dilution_percentage,
            "currentDebtToEquity": self.current_debt_to_equity,
        }


# ─── Company Record ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RevenueStream:
    name: str
    description: str
    percentage_of_revenue: float


@dataclass(frozen=True)
class Product:
    name: str
    description: str


@dataclass(frozen=True)
class BusinessModel:
    description: str = ""
    founded: int = 0
    headquarters: str = ""
    employees: int = 0
    markets: List[str] = field(default_factory=list)
    revenue_streams: List[RevenueStream] = field(default_factory=list)
    key_products: List[Product] = field(default_factory=list)


@dataclass(frozen=True)
class CompanyData:
    ticker: str
    currency: str
    shares_outstanding: float
    financials: List[AnnualFinancials] = field(default_factory=list)
    capital_raises: List[CapitalRaise] = field(default_factory=list)
    company_name: str = ""
    exchange: str = ""
    last_updated: str = ""
    sector: str = ""
    industry: str = ""
    current_share_price: float = 0.0
    market_cap: float = 0.0
    business_model: BusinessModel = field(default_factory=BusinessModel)
    profitability: ProfitabilityInfo = field(default_factory=PreRevenue)
    cash_flow: CashFlowInfo = field(
        default_factory=lambda: CashFlowInfo(status="neutral", five_year_total=0.0, currency="")
    )
    current_debt_to_equity: float = 0.0


@dataclass(frozen=True)
class CompanySearchResult:
    ticker: str
    company_name: str
    industry: str
    profitability_status: ProfitabilityStatus
