from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps the shortest repr, so 9.99 stays 9.99 instead of 9.9900000000000002131...
        return Decimal(str(value))
    return Decimal(value)


def number_format(value, decimals: int = 2, decimal_point: str = ".", thousands_separator: str = ",") -> str:
    """
    Round half up to ``decimals`` places and group the integer part.

    >>> number_format(Decimal("6000"), 2, ",", ".")
    '6.000,00'
    """
    decimals = max(int(decimals), 0)
    rounded = to_decimal(value).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)

    sign = "-" if rounded < 0 else ""
    integer, _, fraction = f"{abs(rounded):,f}".partition(".")
    integer = integer.replace(",", thousands_separator)

    if not decimals:
        return f"{sign}{integer}"
    return f"{sign}{integer}{decimal_point}{fraction}"
