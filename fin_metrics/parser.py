"""
fin_metrics/parser.py
=====================
Loads company records from the JSON payloads served per ticker
(`companies/<TICKER>.json`) and the search index (`companies.json`).

Payload keys are camelCase, e.g.
    {"ticker": "ACME", "currency": "USD", "sharesOutstanding": 1.2e9,
     "financials": [{"year": 2023, "revenue": ..., "earnings": ...}, ...],
     "capitalRaises": [...], "profitability": {"status": "profitable", ...}}

Also provides the search filter and a pandas view of the annual history.
"""
from __future__ import annotations
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import pandas as pd

from .efficiency import calculate_roe, calculate_debt_to_equity
from .growth import calculate_yoy_growth
from .profitability import calculate_profit_margin
from .types import (
    CAPITAL_RAISE_TYPES, AnnualFinancials, CapitalRaise, CashFlowInfo,
    BusinessModel, RevenueStream, Product, CompanyData, CompanySearchResult,
    ProfitabilityInfo, Profitable, RecentlyProfitable, PreProfit, PreRevenue,
    Intermittent,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class CompanyDataError(ValueError):
    """Payload is missing required keys or holds values of the wrong kind."""


class CompanyNotFoundError(CompanyDataError):
    """No record exists for the requested ticker."""


# ─── Numeric Normalisation ────────────────────────────────────────────────────

def to_numeric(val: Any) -> Optional[float]:
    """Convert numbers and numeric strings ("$1,200", "(350)") to float."""
    if val is None or val == "":
        return None
    if isinstance(val, bool):
        return float(val)
    if isinstance(val, (int, float)):
        return None if math.isnan(val) else float(val)
    s = str(val).strip()
    # Parenthetical negatives: (1234) → -1234
    if s.startswith('(') and s.endswith(')'):
        s = '-' + s[1:-1]
    s = s.replace(',', '').replace('$', '').strip()
    if s in ('', '-', '--', 'N/A', 'NA', 'n/a', 'nan', 'None'):
        return None
    try:
        return float(s)
    except ValueError:
        return None


def _num(payload: Dict[str, Any], key: str, default: float = 0.0) -> float:
    v = to_numeric(payload.get(key))
    return default if v is None else v


def _expect_object(payload: Any, where: str) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise CompanyDataError(f"{where}: expected an object, got {type(payload).__name__}")
    return payload


def _require(payload: Dict[str, Any], key: str, where: str) -> Any:
    _expect_object(payload, where)
    if key not in payload or payload[key] is None:
        raise CompanyDataError(f"{where}: missing required key '{key}'")
    return payload[key]


def _list(payload: Dict[str, Any], key: str, where: str, objects: bool = True) -> List[Any]:
    """Optional list field; `null` or absent → []. Elements must be objects unless `objects` is False."""
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CompanyDataError(f"{where}: '{key}' must be a list, got {type(value).__name__}")
    if objects:
        for i, item in enumerate(value):
            if not isinstance(item, dict):
                raise CompanyDataError(
                    f"{where}: '{key}'[{i}] must be an object, got {type(item).__name__}"
                )
    return value


def _object(payload: Dict[str, Any], key: str, where: str) -> Optional[Dict[str, Any]]:
    value = payload.get(key)
    if value is not None and not isinstance(value, dict):
        raise CompanyDataError(f"{where}: '{key}' must be an object, got {type(value).__name__}")
    return value


# ─── Record Parsers ───────────────────────────────────────────────────────────

def parse_annual_financials(payload: Dict[str, Any]) -> AnnualFinancials:
    raw_year = _require(payload, "year", "financials")
    year = to_numeric(raw_year)
    if year is None or not float(year).is_integer():
        raise CompanyDataError(f"financials: invalid year {raw_year!r}")
    return AnnualFinancials(
        year=int(year),
        revenue=_num(payload, "revenue"),
        earnings=_num(payload, "earnings"),
        operating_cash_flow=_num(payload, "operatingCashFlow"),
        total_assets=_num(payload, "totalAssets"),
        total_liabilities=_num(payload, "totalLiabilities"),
        shareholder_equity=_num(payload, "shareholderEquity"),
    )


def parse_financials(rows: Iterable[Dict[str, Any]]) -> List[AnnualFinancials]:
    """Parse yearly rows in the order given. Duplicate years are logged, not removed."""
    out = [parse_annual_financials(r) for r in rows]
    seen: set = set()
    for f in out:
        if f.year in seen:
            logger.warning("Duplicate fiscal year %d in financial history", f.year)
        seen.add(f.year)
    return out


def parse_capital_raise(payload: Dict[str, Any]) -> CapitalRaise:
    _expect_object(payload, "capitalRaises")
    raise_type = payload.get("type", "Other")
    if raise_type not in CAPITAL_RAISE_TYPES:
        raise CompanyDataError(
            f"capitalRaises: unknown type {raise_type!r}; expected one of {CAPITAL_RAISE_TYPES}"
        )
    return CapitalRaise(
        date=str(payload.get("date", "")),
        type=raise_type,
        amount_raised=_num(payload, "amountRaised"),
        shares_before=_num(payload, "sharesBefore"),
        shares_after=_num(payload, "sharesAfter"),
        currency=str(payload.get("currency", "")),
    )


def parse_profitability(payload: Optional[Dict[str, Any]]) -> ProfitabilityInfo:
    if not payload:
        return PreRevenue()
    status = payload.get("status")
    if status == "profitable":
        return Profitable(consecutive_years=int(_num(payload, "consecutiveYears")))
    if status == "recently-profitable":
        return RecentlyProfitable(profitable_since=int(_num(payload, "profitableSince")))
    if status == "pre-profit":
        return PreProfit()
    if status == "pre-revenue":
        return PreRevenue()
    if status == "intermittent":
        return Intermittent(
            profitable_years_count=int(_num(payload, "profitableYearsCount")),
            total_years=int(_num(payload, "totalYears")),
        )
    raise CompanyDataError(f"profitability: unknown status {status!r}")


def parse_cash_flow(payload: Optional[Dict[str, Any]], currency: str) -> CashFlowInfo:
    if not payload:
        return CashFlowInfo(status="neutral", five_year_total=0.0, currency=currency)
    status = payload.get("status")
    if status not in ("generative", "neutral", "burning"):
        raise CompanyDataError(f"cashFlow: unknown status {status!r}")
    return CashFlowInfo(
        status=status,
        five_year_total=_num(payload, "fiveYearTotal"),
        currency=str(payload.get("currency") or currency),
    )


def parse_business_model(payload: Optional[Dict[str, Any]]) -> BusinessModel:
    if not payload:
        return BusinessModel()
    return BusinessModel(
        description=str(payload.get("description", "")),
        founded=int(_num(payload, "founded")),
        headquarters=str(payload.get("headquarters", "")),
        employees=int(_num(payload, "employees")),
        markets=[str(m) for m in _list(payload, "markets", "businessModel", objects=False)],
        revenue_streams=[
            RevenueStream(
                name=str(s.get("name", "")),
                description=str(s.get("description", "")),
                percentage_of_revenue=_num(s, "percentageOfRevenue"),
            )
            for s in _list(payload, "revenueStreams", "businessModel")
        ],
        key_products=[
            Product(name=str(p.get("name", "")), description=str(p.get("description", "")))
            for p in _list(payload, "keyProducts", "businessModel")
        ],
    )


def parse_company(payload: Dict[str, Any]) -> CompanyData:
    """Build a CompanyData from a decoded company JSON object."""
    ticker = str(_require(payload, "ticker", "company"))
    currency = str(payload.get("currency", "USD"))
    shares = to_numeric(_require(payload, "sharesOutstanding", ticker))
    if shares is None:
        raise CompanyDataError(f"{ticker}: sharesOutstanding is not numeric")

    return CompanyData(
        ticker=ticker,
        currency=currency,
        shares_outstanding=shares,
        financials=parse_financials(_list(payload, "financials", ticker)),
        capital_raises=[parse_capital_raise(r) for r in _list(payload, "capitalRaises", ticker)],
        company_name=str(payload.get("companyName", "")),
        exchange=str(payload.get("exchange", "")),
        last_updated=str(payload.get("lastUpdated", "")),
        sector=str(payload.get("sector", "")),
        industry=str(payload.get("industry", "")),
        current_share_price=_num(payload, "currentSharePrice"),
        market_cap=_num(payload, "marketCap"),
        business_model=parse_business_model(_object(payload, "businessModel", ticker)),
        profitability=parse_profitability(_object(payload, "profitability", ticker)),
        cash_flow=parse_cash_flow(_object(payload, "cashFlow", ticker), currency),
        current_debt_to_equity=_num(payload, "currentDebtToEquity"),
    )


def load_company(path: PathLike, ticker: Optional[str] = None) -> CompanyData:
    """
    Load one company. `path` is either the JSON file itself, or a directory
    holding `<TICKER>.json` files when `ticker` is given.
    """
    p = Path(path)
    if ticker is not None:
        if not ticker or "/" in ticker or "\\" in ticker or ".." in ticker:
            raise CompanyNotFoundError(f'Company with ticker "{ticker}" not found (invalid ticker)')
        candidates = [p / f"{ticker}.json", p / f"{ticker.upper()}.json"]
        p = next((c for c in candidates if c.is_file()), candidates[-1])
    if not p.is_file():
        label = ticker.upper() if ticker else str(p)
        raise CompanyNotFoundError(f'Company with ticker "{label}" not found ({p})')

    with open(p, "r", encoding="utf-8") as fh:
        try:
            payload = json.load(fh)
        except json.JSONDecodeError as exc:
            raise CompanyDataError(f"{p}: invalid JSON ({exc})") from exc
    logger.debug("Loaded company payload from %s", p)
    return parse_company(payload)


# ─── Search Index ─────────────────────────────────────────────────────────────

def parse_search_results(rows: Iterable[Dict[str, Any]]) -> List[CompanySearchResult]:
    return [
        CompanySearchResult(
            ticker=str(_require(r, "ticker", "search index")),
            company_name=str(r.get("companyName", "")),
            industry=str(r.get("industry", "")),
            profitability_status=parse_profitability({"status": r.get("profitabilityStatus")}).status,
        )
        for r in rows
    ]


def load_search_index(path: PathLike) -> List[CompanySearchResult]:
    with open(path, "r", encoding="utf-8") as fh:
        return parse_search_results(json.load(fh))


def search_companies(companies: Sequence[CompanySearchResult], query: str) -> List[CompanySearchResult]:
    """Case-insensitive substring match on ticker or company name; empty query → all."""
    if not query:
        return list(companies)
    q = query.lower()
    return [c for c in companies if q in c.ticker.lower() or q in c.company_name.lower()]


# ─── Tabular View ─────────────────────────────────────────────────────────────

FRAME_COLUMNS = [
    "revenue", "earnings", "operating_cash_flow", "total_assets",
    "total_liabilities", "shareholder_equity",
    "profit_margin", "roe", "debt_to_equity", "revenue_growth", "earnings_growth",
]


def financials_frame(financials: Sequence[AnnualFinancials]) -> pd.DataFrame:
    """
    One row per year (ascending, indexed by year) with the per-year derived
    ratios alongside the raw figures. Growth of the first year is 0.
    """
    ordered = sorted(financials, key=lambda f: f.year)
    rows: List[Dict[str, Any]] = []
    prev: Optional[AnnualFinancials] = None
    for f in ordered:
        rows.append({
            "year": f.year,
            "revenue": f.revenue,
            "earnings": f.earnings,
            "operating_cash_flow": f.operating_cash_flow,
            "total_assets": f.total_assets,
            "total_liabilities": f.total_liabilities,
            "shareholder_equity": f.shareholder_equity,
            "profit_margin": calculate_profit_margin(f.revenue, f.earnings),
            "roe": calculate_roe(f.earnings, f.shareholder_equity),
            "debt_to_equity": calculate_debt_to_equity(f.total_liabilities, f.shareholder_equity),
            "revenue_growth": calculate_yoy_growth(f.revenue, prev.revenue) if prev else 0.0,
            "earnings_growth": calculate_yoy_growth(f.earnings, prev.earnings) if prev else 0.0,
        })
        prev = f

    if not rows:
        return pd.DataFrame(columns=FRAME_COLUMNS, index=pd.Index([], name="year"))
    return pd.DataFrame(rows).set_index("year")[FRAME_COLUMNS]
