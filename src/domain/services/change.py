"""Period-over-period change and allocation helpers."""

from decimal import Decimal

from src.utils.decimal_utils import HUNDRED, ZERO, coerce_decimal


def calculate_percentage_change(current: Decimal, previous: Decimal) -> Decimal:
    """Return the change from ``previous`` in percent, 0 for a zero baseline."""
    current = coerce_decimal(current)
    previous = coerce_decimal(previous)
    if previous == 0:
        return ZERO
    return (current - previous) / abs(previous) * HUNDRED


def calculate_net_worth(total_assets: Decimal, total_liabilities: Decimal) -> Decimal:
    return coerce_decimal(total_assets) - coerce_decimal(total_liabilities)


def calculate_allocation_percentage(value: Decimal, total: Decimal) -> Decimal:
    """Return the share of ``total`` held by ``value`` in percent."""
    total = coerce_decimal(total)
    if total <= 0:
        return ZERO
    return coerce_decimal(value) / total * HUNDRED


__all__ = [
    "calculate_percentage_change",
    "calculate_net_worth",
    "calculate_allocation_percentage",
]
