"""Supported currency directory: codes, display symbols, and names."""

from dataclasses import dataclass

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str


SUPPORTED_CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "US Dollar", "$"),
    Currency("EUR", "Euro", "€"),
    Currency("GBP", "British Pound", "£"),
    Currency("SGD", "Singapore Dollar", "S$"),
    Currency("JPY", "Japanese Yen", "¥"),
    Currency("AUD", "Australian Dollar", "A$"),
    Currency("CAD", "Canadian Dollar", "C$"),
    Currency("CHF", "Swiss Franc", "CHF"),
    Currency("CNY", "Chinese Yuan", "¥"),
    Currency("HKD", "Hong Kong Dollar", "HK$"),
)

_BY_CODE: dict[str, Currency] = {c.code: c for c in SUPPORTED_CURRENCIES}

#: ISO 4217 currencies without minor units.
ZERO_DECIMAL_CURRENCIES = frozenset({
    "BIF", "CLP", "DJF", "GNF", "ISK", "JPY", "KMF", "KRW",
    "PYG", "RWF", "UGX", "VND", "VUV", "XAF", "XOF", "XPF",
})

# Display symbols for common codes outside the supported directory.
_EXTRA_SYMBOLS: dict[str, str] = {
    "KRW": "₩",
    "VND": "₫",
    "INR": "₹",
    "ILS": "₪",
    "PHP": "₱",
    "TWD": "NT$",
    "NZD": "NZ$",
    "MXN": "MX$",
    "BRL": "R$",
}


def get_currency_symbol(code: str) -> str:
    """Return the display symbol, or the code itself when unknown."""
    currency = _BY_CODE.get(code)
    return currency.symbol if currency else code


def get_currency_name(code: str) -> str:
    """Return the display name, or the code itself when unknown."""
    currency = _BY_CODE.get(code)
    return currency.name if currency else code


def is_supported(code: str) -> bool:
    return code in _BY_CODE


def currency_decimals(code: str) -> int:
    """Number of fraction digits used when displaying amounts in ``code``."""
    return 0 if code in ZERO_DECIMAL_CURRENCIES else 2


def display_symbol(code: str) -> str:
    """Symbol used when formatting amounts.

    Supported currencies use their directory symbol; a few common codes
    outside the directory have a known symbol; anything else shows the code.
    """
    currency = _BY_CODE.get(code)
    if currency:
        return currency.symbol
    return _EXTRA_SYMBOLS.get(code, code)
