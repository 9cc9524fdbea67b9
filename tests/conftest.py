"""
tests/conftest.py
=================
Shared pytest fixtures for the metrics engine test suite.
"""
import sys
import os

# Ensure the project root is on the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from fin_metrics.types import AnnualFinancials, CapitalRaise, CompanyData


def make_year(year, revenue=1_000_000.0, earnings=100_000.0, ocf=0.0,
              assets=0.0, liabilities=0.0, equity=0.0):
    return AnnualFinancials(
        year=year,
        revenue=revenue,
        earnings=earnings,
        operating_cash_flow=ocf,
        total_assets=assets,
        total_liabilities=liabilities,
        shareholder_equity=equity,
    )


@pytest.fixture
def growth_company():
    """Six years, supplied out of order, growing revenue and earnings."""
    financials = [
        make_year(2021, revenue=1_331_000, earnings=133_100, ocf=300_000,
                  assets=2_000_000, liabilities=800_000, equity=1_200_000),
        make_year(2018, revenue=1_000_000, earnings=100_000, ocf=100_000,
                  assets=1_500_000, liabilities=700_000, equity=800_000),
        make_year(2023, revenue=1_610_510, earnings=161_051, ocf=400_000,
                  assets=2_400_000, liabilities=900_000, equity=1_500_000),
        make_year(2019, revenue=1_100_000, earnings=110_000, ocf=150_000,
                  assets=1_600_000, liabilities=700_000, equity=900_000),
        make_year(2022, revenue=1_464_100, earnings=146_410, ocf=350_000,
                  assets=2_200_000, liabilities=850_000, equity=1_350_000),
        make_year(2020, revenue=1_210_000, earnings=121_000, ocf=200_000,
                  assets=1_800_000, liabilities=750_000, equity=1_000_000),
    ]
    raises = [
        CapitalRaise(date="2018-03-01", type="IPO", amount_raised=5_000_000,
                     shares_before=80_000_000, shares_after=100_000_000, currency="USD"),
        CapitalRaise(date="2021-06-15", type="Placement", amount_raised=2_000_000,
                     shares_before=100_000_000, shares_after=110_000_000, currency="USD"),
    ]
    return CompanyData(
        ticker="GROW",
        company_name="Growth Industries",
        currency="USD",
        shares_outstanding=125_000_000,
        financials=financials,
        capital_raises=raises,
    )


@pytest.fixture
def company_payload():
    """Company JSON as served by the data endpoint (camelCase keys)."""
    return {
        "ticker": "ACME",
        "companyName": "Acme Corp",
        "exchange": "NASDAQ",
        "currency": "USD",
        "lastUpdated": "2024-02-01",
        "sector": "Industrials",
        "industry": "Machinery",
        "currentSharePrice": 42.5,
        "marketCap": 4_250_000_000,
        "sharesOutstanding": 100_000_000,
        "businessModel": {
            "description": "Makes anvils.",
            "founded": 1949,
            "headquarters": "Phoenix, AZ",
            "employees": 1200,
            "markets": ["US", "EU"],
            "revenueStreams": [
                {"name": "Anvils", "description": "Heavy", "percentageOfRevenue": 80},
                {"name": "Rockets", "description": "Fast", "percentageOfRevenue": 20},
            ],
            "keyProducts": [{"name": "Anvil X", "description": "Flagship"}],
        },
        "financials": [
            {"year": 2022, "revenue": 900_000, "earnings": -50_000,
             "operatingCashFlow": 400_000, "totalAssets": 3_000_000,
             "totalLiabilities": 1_000_000, "shareholderEquity": 2_000_000},
            {"year": 2023, "revenue": "1,000,000", "earnings": 120_000,
             "operatingCashFlow": "(200,000)", "totalAssets": 3_200_000,
             "totalLiabilities": 1_100_000, "shareholderEquity": 2_100_000},
        ],
        "profitability": {"status": "recently-profitable", "profitableSince": 2023},
        "cashFlow": {"status": "neutral", "fiveYearTotal": 200_000, "currency": "USD"},
        "capitalRaises": [
            {"date": "2015-01-01", "type": "IPO", "amountRaised": 50_000_000,
             "sharesBefore": 60_000_000, "sharesAfter": 80_000_000, "currency": "USD"},
        ],
        "currentDebtToEquity": 0.52,
    }
