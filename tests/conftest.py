"""Shared test fixtures for the net worth tracker."""

from datetime import date
from decimal import Decimal

import pytest

from networth.config import AppSettings, CurrencySettings, FireSettings, HistorySettings
from networth.models import (
    Account,
    AccountType,
    CashHolding,
    ExchangeRates,
    StockHolding,
    StockPriceData,
)
from networth.providers import StaticPriceProvider, StaticRateProvider
from networth.service import NetWorthService


@pytest.fixture
def as_of() -> date:
    """Fixed 'today' so windowed results are deterministic."""
    return date(2025, 3, 15)


@pytest.fixture
def usd_rates() -> ExchangeRates:
    """Rates FROM USD TO other currencies."""
    return {
        "USD": Decimal("1"),
        "EUR": Decimal("0.8"),
        "SGD": Decimal("1.25"),
        "JPY": Decimal("150"),
    }


@pytest.fixture
def prices() -> dict[str, StockPriceData]:
    return {
        "AAPL": StockPriceData(price=Decimal("150"), currency="USD"),
        "D05.SI": StockPriceData(price=Decimal("40"), currency="SGD"),
    }


@pytest.fixture
def accounts() -> list[Account]:
    """One account of each type.

    In USD (rates above): cash 1000 + 500/0.8 = 1625, investments
    10 * 150 + 100 * 40 / 1.25 = 4700, CPF 25000 / 1.25 = 20000, SRS 1000.
    """
    return [
        Account(
            id="acc-cash",
            type=AccountType.CASH,
            name="Bank",
            cash_holdings=(
                CashHolding("c1", "acc-cash", Decimal("1000"), "USD"),
                CashHolding("c2", "acc-cash", Decimal("500"), "EUR"),
            ),
        ),
        Account(
            id="acc-brokerage",
            type=AccountType.INVESTMENT,
            name="Brokerage",
            stock_holdings=(
                StockHolding("s1", "acc-brokerage", "aapl", Decimal("10"), Decimal("100")),
                StockHolding("s2", "acc-brokerage", "D05.SI", Decimal("100"), Decimal("30")),
            ),
        ),
        Account(
            id="acc-cpf",
            type=AccountType.CPF,
            name="CPF",
            cash_holdings=(
                CashHolding("p1", "acc-cpf", Decimal("15000"), "SGD", label="OA"),
                CashHolding("p2", "acc-cpf", Decimal("10000"), "SGD", label="SA"),
            ),
        ),
        Account(
            id="acc-srs",
            type=AccountType.SRS,
            name="SRS",
            cash_holdings=(CashHolding("r1", "acc-srs", Decimal("1000"), "USD"),),
        ),
    ]


@pytest.fixture
def app_settings() -> AppSettings:
    """AppSettings with a small reference FX table matching usd_rates."""
    return AppSettings(
        log_level="DEBUG",
        currency=CurrencySettings(
            base_currency="USD",
            reference_currency="USD",
            reference_rates={
                "USD": Decimal("1"),
                "EUR": Decimal("0.8"),
                "SGD": Decimal("1.25"),
                "JPY": Decimal("150"),
            },
        ),
        fire=FireSettings(),
        history=HistorySettings(),
    )


@pytest.fixture
def service(app_settings: AppSettings, prices: dict[str, StockPriceData]) -> NetWorthService:
    return NetWorthService(
        rate_provider=StaticRateProvider(app_settings.currency.reference_rates),
        price_provider=StaticPriceProvider(prices),
        fire_settings=app_settings.fire,
        history_settings=app_settings.history,
    )
