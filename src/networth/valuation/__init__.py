"""Valuation engine: currency-normalized holding values and net worth aggregation."""

from networth.valuation.conversion import convert_to_base, lookup_rate
from networth.valuation.formatting import format_currency, format_percent
from networth.valuation.holdings import (
    GainLoss,
    cash_total,
    cash_total_simple,
    gain_loss,
    investment_cost,
    investment_value,
)
from networth.valuation.portfolio import (
    AllocationSlice,
    PortfolioSummary,
    asset_allocation,
    summarize_portfolio,
)

__all__ = [
    "AllocationSlice",
    "GainLoss",
    "PortfolioSummary",
    "asset_allocation",
    "cash_total",
    "cash_total_simple",
    "convert_to_base",
    "format_currency",
    "format_percent",
    "gain_loss",
    "investment_cost",
    "investment_value",
    "lookup_rate",
    "summarize_portfolio",
]
