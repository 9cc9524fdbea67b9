"""
fin_metrics/formatting.py
=========================
Display helpers: K/M/B/T scaling, currency, percent, year labels and
colour/label lookups for the status enums.
"""
from __future__ import annotations
from typing import Optional

from .rounding import round_half_up

_SCALES = (
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def format_number(value: Optional[float]) -> str:
    """
    Scale to K / M / B / T with one decimal.
    e.g. 96_773_000 → 96.8M, -2_722_000_000 → -2.7B, 500 → 500
    """
    if value is None:
        return "—"
    abs_val = abs(value)
    sign = "-" if value < 0 else ""
    for threshold, suffix in _SCALES:
        if abs_val >= threshold:
            return f"{sign}{round_half_up(abs_val / threshold, 1):.1f}{suffix}"
    return f"{sign}{round_half_up(abs_val, 0):.0f}"


def format_currency(value: Optional[float], currency: str = "USD") -> str:
    """USD gets a `$` prefix; other codes are appended."""
    if value is None:
        return "—"
    formatted = format_number(value)
    return f"${formatted}" if currency == "USD" else f"{formatted} {currency}"


def format_percentage(value: Optional[float]) -> str:
    if value is None:
        return "—"
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}%"


def format_ratio(value: Optional[float], decimals: int = 2) -> str:
    if value is None:
        return "—"
    return f"{value:.{decimals}f}x"


def format_year(year: int) -> str:
    return str(year)


def get_growth_color(value: float) -> str:
    if value > 0:
        return "#16a34a"
    if value < 0:
        return "#dc2626"
    return "#4b5563"


PROFITABILITY_LABELS = {
    "profitable": "Profitable",
    "recently-profitable": "Recently Profitable",
    "pre-profit": "Not Yet Profitable",
    "pre-revenue": "Pre-Revenue",
    "intermittent": "Intermittently Profitable",
}

CASH_FLOW_LABELS = {
    "generative": "Generating Cash",
    "neutral": "Break-Even Cash Flow",
    "burning": "Burning Cash",
}


def profitability_label(status: str) -> str:
    return PROFITABILITY_LABELS.get(status, status)


def cash_flow_label(status: str) -> str:
    return CASH_FLOW_LABELS.get(status, status)


def get_profitability_color(status: str) -> str:
    return {
        "profitable": "#10b981",
        "recently-profitable": "#3b82f6",
        "intermittent": "#f59e0b",
        "pre-profit": "#f97316",
        "pre-revenue": "#6b7280",
    }.get(status, "#6b7280")


def get_cash_flow_color(status: str) -> str:
    return {"generative": "#10b981", "neutral": "#f59e0b", "burning": "#ef4444"}.get(status, "#6b7280")
