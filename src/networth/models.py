"""Shared data models for the net worth tracker.

CRITICAL: All monetary values use Decimal. Never use float for balances, prices, or rates.

Records here are input snapshots handed over by the persistence layer; the
engine reads them and never mutates them.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

#: Currency code -> units of that currency per 1 unit of the base currency.
#: The base currency itself maps to 1. A missing or zero entry means "unknown".
ExchangeRates = dict[str, Decimal]


class AccountType(str, Enum):
    """Account kind. Determines which holdings and valuation path apply."""

    CASH = "cash"
    INVESTMENT = "investment"
    CPF = "cpf"
    SRS = "srs"


@dataclass(frozen=True)
class CashHolding:
    """A balance held in a single currency. CPF balances carry OA/SA/MA as label."""

    id: str
    account_id: str
    balance: Decimal
    currency: str
    label: str | None = None


@dataclass(frozen=True)
class StockHolding:
    """Aggregate position in one ticker (not per-lot)."""

    id: str
    account_id: str
    ticker: str
    shares: Decimal
    cost_basis_per_share: Decimal = Decimal("0")


@dataclass(frozen=True)
class Account:
    """An account with its holdings.

    cash/cpf/srs accounts carry cash_holdings; investment accounts carry
    stock_holdings.
    """

    id: str
    type: AccountType
    name: str = ""
    cash_holdings: tuple[CashHolding, ...] = ()
    stock_holdings: tuple[StockHolding, ...] = ()


@dataclass(frozen=True)
class StockPriceData:
    """Latest known quote in the security's native currency."""

    price: Decimal
    currency: str = "USD"


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Aggregated valuation for one calendar day, in the base currency active then."""

    snapshot_date: date
    total_value: Decimal
    cash_value: Decimal
    investment_value: Decimal
    currency: str = "USD"


@dataclass(frozen=True)
class Expense:
    """A single logged expense."""

    amount: Decimal
    currency: str
    category: str  # "recurring" or "non_recurring"
    subcategory: str
    expense_date: date
    description: str | None = None
    id: str = field(default="", compare=False)
