"""Holding valuation: cash totals, market value, cost basis, gain/loss.

All functions are pure and synchronous. They never raise for data-quality
gaps: a missing exchange rate falls back to the raw amount and a missing
stock price contributes zero market value.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from networth.currencies import DEFAULT_CURRENCY
from networth.logging import get_logger
from networth.models import CashHolding, ExchangeRates, StockHolding, StockPriceData
from networth.valuation.conversion import convert_to_base

logger = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class GainLoss:
    """Unrealized gain/loss of a set of stock holdings."""

    absolute: Decimal
    percent: Decimal


def cash_total(
    holdings: Iterable[CashHolding],
    base_currency: str = DEFAULT_CURRENCY,
    rates: ExchangeRates | None = None,
) -> Decimal:
    """Sum cash balances expressed in the base currency.

    Every holding contributes: converted when a rate exists, raw otherwise.
    Empty input returns 0.
    """
    return sum(
        (convert_to_base(h.balance, h.currency, base_currency, rates) for h in holdings),
        ZERO,
    )


def cash_total_simple(holdings: Iterable[CashHolding]) -> Decimal:
    """Sum raw balances without any currency conversion."""
    return sum((h.balance for h in holdings), ZERO)


def investment_value(
    holdings: Iterable[StockHolding],
    prices: Mapping[str, StockPriceData],
    base_currency: str = DEFAULT_CURRENCY,
    rates: ExchangeRates | None = None,
) -> Decimal:
    """Compute market value of stock holdings in the base currency.

    Prices are keyed by upper-case ticker and quoted in their native
    currency. shares * price is converted to base with the same inversion
    rule as cash. A holding without a price contributes 0.

    Args:
        holdings: Stock positions.
        prices: Latest quotes keyed by upper-case ticker.
        base_currency: Reporting currency.
        rates: Rates relative to base_currency.

    Returns:
        Total market value in base currency.
    """
    total = ZERO
    for h in holdings:
        price_data = prices.get(h.ticker.upper())
        if price_data is None:
            logger.warning("stock_price_missing", ticker=h.ticker.upper())
            continue

        native_value = h.shares * price_data.price
        total += convert_to_base(native_value, price_data.currency, base_currency, rates)
    return total


def investment_cost(holdings: Iterable[StockHolding]) -> Decimal:
    """Sum of shares * cost_basis_per_share, as entered (no conversion)."""
    return sum((h.shares * h.cost_basis_per_share for h in holdings), ZERO)


def gain_loss(
    holdings: Iterable[StockHolding],
    prices: Mapping[str, StockPriceData],
    base_currency: str = DEFAULT_CURRENCY,
    rates: ExchangeRates | None = None,
) -> GainLoss:
    """Compute unrealized gain/loss.

    absolute = market value - cost basis
    percent  = absolute / cost basis * 100, or 0 when cost basis <= 0
    """
    holdings = list(holdings)
    current_value = investment_value(holdings, prices, base_currency, rates)
    cost_basis = investment_cost(holdings)
    absolute = current_value - cost_basis
    percent = absolute / cost_basis * HUNDRED if cost_basis > ZERO else ZERO
    return GainLoss(absolute=absolute, percent=percent)
