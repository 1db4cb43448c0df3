"""Currency conversion into the base currency.

Exchange rates are expressed FROM the base currency TO every other currency
(units of that currency per 1 unit of base). Converting an amount FROM a
foreign currency TO base therefore DIVIDES by the rate.

A missing or zero rate is a data-quality gap, not an error: the amount is
returned unconverted and a warning is logged.
"""

from decimal import Decimal

from networth.logging import get_logger
from networth.models import ExchangeRates

logger = get_logger(__name__)


def lookup_rate(currency: str, rates: ExchangeRates | None) -> Decimal | None:
    """Return the usable rate for ``currency`` or None when unknown (absent or zero)."""
    if not rates:
        return None
    rate = rates.get(currency)
    if rate is None or rate == 0:
        return None
    return rate


def convert_to_base(
    amount: Decimal,
    from_currency: str,
    base_currency: str,
    rates: ExchangeRates | None,
) -> Decimal:
    """Convert ``amount`` from ``from_currency`` into ``base_currency``.

    Args:
        amount: Amount expressed in from_currency.
        from_currency: Currency code of the amount.
        base_currency: Target reporting currency.
        rates: Rates relative to base_currency.

    Returns:
        amount / rate, or amount unchanged when the currencies match or the
        rate is unknown.
    """
    if from_currency == base_currency:
        return amount

    rate = lookup_rate(from_currency, rates)
    if rate is None:
        logger.warning(
            "exchange_rate_missing",
            currency=from_currency,
            base_currency=base_currency,
            fallback="raw_value",
        )
        return amount

    return amount / rate
