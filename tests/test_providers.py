"""Tests for the in-memory rate and price providers."""

from decimal import Decimal

import pytest

from networth.exceptions import (
    ExchangeRateUnavailableError,
    ProviderError,
    StockPriceUnavailableError,
)
from networth.models import StockPriceData
from networth.providers import StaticPriceProvider, StaticRateProvider

REFERENCE = {"USD": Decimal("1"), "EUR": Decimal("0.8"), "SGD": Decimal("1.25")}


class TestStaticRateProvider:
    def test_reference_base_is_identity(self) -> None:
        rates = StaticRateProvider(REFERENCE).get_rates("USD")
        assert rates == REFERENCE

    def test_cross_rates(self) -> None:
        rates = StaticRateProvider(REFERENCE).get_rates("EUR")
        assert rates["EUR"] == Decimal("1")
        assert rates["USD"] == Decimal("1.25")
        assert rates["SGD"] == Decimal("1.5625")

    def test_reference_currency_added_when_absent(self) -> None:
        provider = StaticRateProvider({"EUR": Decimal("0.8")})
        assert provider.get_rates("EUR")["USD"] == Decimal("1.25")

    def test_unknown_base_raises(self) -> None:
        with pytest.raises(ExchangeRateUnavailableError, match="XYZ"):
            StaticRateProvider(REFERENCE).get_rates("XYZ")

    def test_error_is_a_provider_error(self) -> None:
        with pytest.raises(ProviderError):
            StaticRateProvider(REFERENCE).get_rates("XYZ")


class TestStaticPriceProvider:
    def test_returns_known_subset_upper_case(self) -> None:
        provider = StaticPriceProvider({"aapl": StockPriceData(Decimal("150"))})
        prices = provider.get_prices(["AAPL", "msft"])
        assert prices == {"AAPL": StockPriceData(Decimal("150"), "USD")}

    def test_lookup_is_case_insensitive(self) -> None:
        provider = StaticPriceProvider({"D05.SI": StockPriceData(Decimal("40"), "SGD")})
        assert "D05.SI" in provider.get_prices(["d05.si"])

    def test_empty_table_knows_no_tickers(self) -> None:
        assert StaticPriceProvider({}).get_prices(["AAPL"]) == {}

    def test_no_table_means_no_feed(self) -> None:
        with pytest.raises(StockPriceUnavailableError):
            StaticPriceProvider().get_prices(["AAPL"])

    def test_feed_failure_is_a_provider_error(self) -> None:
        with pytest.raises(ProviderError):
            StaticPriceProvider().get_prices([])
