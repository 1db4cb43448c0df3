"""Custom exceptions for the net worth tracker.

Data-quality gaps (missing rates, missing prices, unknown currency codes)
are never raised; they degrade to documented fallbacks. Only failures of
injected collaborators and caller mistakes surface as exceptions.
"""


class NetWorthError(Exception):
    """Base exception for all net worth tracker errors."""


class ProviderError(NetWorthError):
    """Raised when an injected upstream feed fails outright."""


class ExchangeRateUnavailableError(ProviderError):
    """Raised when no exchange rate table can be produced for a base currency."""


class StockPriceUnavailableError(ProviderError):
    """Raised when the stock price feed fails for a whole batch."""


class InvalidSortKeyError(NetWorthError):
    """Raised when a table sort is requested without a key."""
