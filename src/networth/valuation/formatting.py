"""Display helpers for monetary amounts and percentages (en-US style)."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from networth.currencies import DEFAULT_CURRENCY, currency_decimals, display_symbol


def _to_decimal(value: Decimal | int | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _grouped(value: Decimal, places: int) -> tuple[str, str]:
    """Round half away from zero and return (sign, grouped digits).

    Non-finite values come back as ``Infinity`` / ``NaN`` text.
    """
    if not value.is_finite():
        sign = "-" if value.is_infinite() and value.is_signed() else ""
        return sign, str(value.copy_abs())

    exponent = Decimal(1).scaleb(-places)
    # integer digits + fraction digits + room for a rounding carry
    with localcontext() as ctx:
        ctx.prec = max(value.adjusted() + 1, 1) + places + 2
        rounded = value.quantize(exponent, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return sign, f"{rounded.copy_abs():,f}"


def format_currency(value: Decimal | int | float, currency_code: str = DEFAULT_CURRENCY) -> str:
    """Format an amount with its currency symbol, e.g. ``$1,234.56`` or ``-€5.00``.

    Zero-decimal currencies (JPY, KRW, ...) drop the minor units. Unknown
    codes never raise: the code itself is used as the symbol.
    """
    sign, digits = _grouped(_to_decimal(value), currency_decimals(currency_code))
    return f"{sign}{display_symbol(currency_code)}{digits}"


def format_percent(value: Decimal | int | float) -> str:
    """Format a percentage value (12.345 -> ``12.35%``)."""
    sign, digits = _grouped(_to_decimal(value), 2)
    return f"{sign}{digits}%"
