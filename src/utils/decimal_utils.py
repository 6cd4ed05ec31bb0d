"""Helpers for Decimal normalization."""

from decimal import Decimal


ZERO = Decimal("0")
HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, settings or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str) and not value.strip():
        return Decimal("0")
    return Decimal(str(value))


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide two Decimals, returning zero when the denominator is zero.

    Args:
        numerator: Dividend.
        denominator: Divisor.

    Returns:
        Decimal: Quotient, or 0 for a zero denominator.
    """
    if denominator == 0:
        return ZERO
    return numerator / denominator


__all__ = ["ZERO", "HUNDRED", "coerce_decimal", "safe_divide"]
