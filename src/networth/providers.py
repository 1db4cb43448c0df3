"""Contracts for the injected rate and price feeds, plus in-memory implementations.

The engine never performs I/O. Callers pass a RateProvider and a
PriceProvider; network-backed implementations live outside this package.
Provider failures raise ProviderError subclasses and are not absorbed here.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Protocol

from networth.exceptions import ExchangeRateUnavailableError, StockPriceUnavailableError
from networth.logging import get_logger
from networth.models import ExchangeRates, StockPriceData

logger = get_logger(__name__)


class RateProvider(Protocol):
    def get_rates(self, base_currency: str) -> ExchangeRates:
        """Return rates FROM base_currency TO other currencies; base maps to 1."""
        ...


class PriceProvider(Protocol):
    def get_prices(self, tickers: Iterable[str]) -> dict[str, StockPriceData]:
        """Return quotes keyed by upper-case ticker; unknown tickers are omitted."""
        ...


class StaticRateProvider:
    """Rate provider backed by a fixed table quoted against one reference currency.

    A table for any base is derived by cross rates:
        rate[c] = reference_rates[c] / reference_rates[base]

    Args:
        reference_rates: Units of each currency per 1 unit of reference_currency.
        reference_currency: Currency the table is quoted against.
    """

    def __init__(
        self,
        reference_rates: Mapping[str, Decimal],
        reference_currency: str = "USD",
    ) -> None:
        self._reference_currency = reference_currency
        self._rates = dict(reference_rates)
        self._rates.setdefault(reference_currency, Decimal("1"))

    def get_rates(self, base_currency: str) -> ExchangeRates:
        base_rate = self._rates.get(base_currency)
        if not base_rate:
            raise ExchangeRateUnavailableError(
                f"No exchange rate for base currency {base_currency} "
                f"against {self._reference_currency}"
            )

        rates = {
            code: rate / base_rate
            for code, rate in self._rates.items()
            if code != base_currency and rate
        }
        rates[base_currency] = Decimal("1")
        logger.debug("exchange_rates_derived", base_currency=base_currency, count=len(rates))
        return rates


class StaticPriceProvider:
    """Price provider backed by a fixed quote table.

    Without a table there is no price feed at all: any batch request raises
    StockPriceUnavailableError. An empty table is a working feed that knows
    no tickers.

    Args:
        prices: Quotes keyed by ticker (any case), or None for no feed.
    """

    def __init__(self, prices: Mapping[str, StockPriceData] | None = None) -> None:
        self._prices = (
            None if prices is None else {ticker.upper(): data for ticker, data in prices.items()}
        )

    def get_prices(self, tickers: Iterable[str]) -> dict[str, StockPriceData]:
        if self._prices is None:
            raise StockPriceUnavailableError("No stock price feed is configured")
        result: dict[str, StockPriceData] = {}
        for ticker in tickers:
            symbol = ticker.upper()
            if symbol in self._prices:
                result[symbol] = self._prices[symbol]
        return result
