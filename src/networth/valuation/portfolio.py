"""Net worth aggregation across account types and asset allocation.

CPF and SRS accounts are cash-like but form a separate retirement bucket:
they count towards total net worth and are excluded from liquid net worth.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from networth.models import Account, AccountType, ExchangeRates, StockPriceData
from networth.valuation.holdings import (
    HUNDRED,
    ZERO,
    GainLoss,
    cash_total,
    investment_cost,
    investment_value,
)


@dataclass(frozen=True)
class PortfolioSummary:
    """Per-bucket totals, all expressed in base_currency."""

    base_currency: str
    cash: Decimal
    investments: Decimal
    cpf: Decimal
    srs: Decimal
    investment_cost: Decimal
    gain_loss: GainLoss

    @property
    def retirement(self) -> Decimal:
        return self.cpf + self.srs

    @property
    def liquid_net_worth(self) -> Decimal:
        return self.cash + self.investments

    @property
    def total_net_worth(self) -> Decimal:
        return self.liquid_net_worth + self.retirement


@dataclass(frozen=True)
class AllocationSlice:
    name: str
    value: Decimal
    percent: Decimal


def summarize_portfolio(
    accounts: Iterable[Account],
    prices: Mapping[str, StockPriceData],
    base_currency: str,
    rates: ExchangeRates | None = None,
) -> PortfolioSummary:
    """Aggregate every account into currency-consistent bucket totals.

    Stock holdings are valued from every account that carries them; cash
    holdings are bucketed by their account's type.

    Args:
        accounts: Accounts with their holdings.
        prices: Latest quotes keyed by upper-case ticker.
        base_currency: Reporting currency.
        rates: Rates relative to base_currency.

    Returns:
        PortfolioSummary in base_currency.
    """
    cash_by_type: dict[AccountType, list] = {t: [] for t in AccountType}
    stocks = []
    for account in accounts:
        cash_by_type[account.type].extend(account.cash_holdings)
        stocks.extend(account.stock_holdings)

    market_value = investment_value(stocks, prices, base_currency, rates)
    cost = investment_cost(stocks)
    absolute = market_value - cost

    return PortfolioSummary(
        base_currency=base_currency,
        cash=cash_total(cash_by_type[AccountType.CASH], base_currency, rates),
        investments=market_value,
        cpf=cash_total(cash_by_type[AccountType.CPF], base_currency, rates),
        srs=cash_total(cash_by_type[AccountType.SRS], base_currency, rates),
        investment_cost=cost,
        gain_loss=GainLoss(
            absolute=absolute,
            percent=absolute / cost * HUNDRED if cost > ZERO else ZERO,
        ),
    )


def asset_allocation(summary: PortfolioSummary) -> list[AllocationSlice]:
    """Split net worth into Cash / Investments / CPF / SRS slices.

    Only positive buckets are included; percentages are relative to the sum
    of the included slices. Returns an empty list when nothing is positive.
    """
    buckets = [
        ("Cash", summary.cash),
        ("Investments", summary.investments),
        ("CPF", summary.cpf),
        ("SRS", summary.srs),
    ]
    positive = [(name, value) for name, value in buckets if value > ZERO]
    total = sum((value for _, value in positive), ZERO)
    if total == ZERO:
        return []

    return [
        AllocationSlice(name=name, value=value, percent=value / total * HUNDRED)
        for name, value in positive
    ]
