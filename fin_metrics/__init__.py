"""Company fundamentals metrics engine: growth, profitability, efficiency, cash flow."""
from .types import *
from .formatting import *
from .config import MetricsConfig, DEFAULT_CONFIG, setup_logger
from .growth import calculate_cagr, calculate_yoy_growth, calculate_yoy_series
from .profitability import (
    calculate_profitability_status,
    calculate_profit_margin,
    calculate_average_profit_margin,
)
from .efficiency import calculate_roe, calculate_average_roe, calculate_debt_to_equity
from .cashflow import calculate_cash_flow_status, calculate_cumulative_cash_flow
from .metrics import (
    calculate_all_metrics,
    calculate_dilution,
    calculate_total_capital_raised,
    refresh_company,
)
from .parser import (
    CompanyDataError,
    CompanyNotFoundError,
    parse_company,
    load_company,
    load_search_index,
    search_companies,
    financials_frame,
)
from .assessment import (
    AssessmentItem,
    Rating,
    debt_rating,
    generate_assessment,
    roe_rating,
)
