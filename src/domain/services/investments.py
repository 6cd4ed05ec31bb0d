"""Domain services for investment holdings.

Holdings are assumed to share one currency; no conversion is applied.
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import Literal

from src.domain.models.metrics import HoldingMetrics, InvestmentMetrics
from src.domain.models.records import Holding
from src.utils.decimal_utils import HUNDRED, ZERO, coerce_decimal


YieldType = Literal["none", "fixed", "percent_purchase", "percent_market"]


def calculate_gain_loss_percent(gain_loss: Decimal, total_cost: Decimal) -> Decimal:
    """Return gain as a percentage of cost, or 0 without a positive cost."""
    if total_cost > 0:
        return gain_loss / total_cost * HUNDRED
    return ZERO


def calculate_holding_metrics(holding: Holding) -> HoldingMetrics:
    """Compute cost, market value and gain for one holding."""
    quantity = coerce_decimal(holding.quantity)
    total_cost = quantity * coerce_decimal(holding.average_price)
    market_value = quantity * coerce_decimal(holding.current_price)
    gain_loss = market_value - total_cost
    return HoldingMetrics(
        total_cost=total_cost,
        market_value=market_value,
        gain_loss=gain_loss,
        gain_loss_percent=calculate_gain_loss_percent(gain_loss, total_cost),
    )


def aggregate_investments(holdings: Sequence[Holding]) -> InvestmentMetrics:
    """Compute portfolio totals for a set of holdings.

    Args:
        holdings: Holding snapshots.

    Returns:
        InvestmentMetrics: Value, cost, gain and projected dividends.
        ``total_dividends`` multiplies quantity by the per-share
        ``dividend_yield``.
    """
    total_value = ZERO
    total_cost = ZERO
    total_dividends = ZERO
    for holding in holdings:
        metrics = calculate_holding_metrics(holding)
        total_value += metrics.market_value
        total_cost += metrics.total_cost
        total_dividends += coerce_decimal(holding.quantity) * coerce_decimal(
            holding.dividend_yield
        )

    total_gain = total_value - total_cost
    return InvestmentMetrics(
        total_value=total_value,
        total_cost=total_cost,
        total_gain=total_gain,
        total_gain_percent=calculate_gain_loss_percent(total_gain, total_cost),
        total_dividends=total_dividends,
    )


def find_top_performer(holdings: Sequence[Holding]) -> Holding | None:
    """Return the holding with the highest gain percentage.

    Ties keep the earliest holding.
    """
    best: Holding | None = None
    best_percent: Decimal | None = None
    for holding in holdings:
        percent = calculate_holding_metrics(holding).gain_loss_percent
        if best_percent is None or percent > best_percent:
            best = holding
            best_percent = percent
    return best


def find_largest_holding(holdings: Sequence[Holding]) -> Holding | None:
    """Return the holding with the highest market value."""
    largest: Holding | None = None
    largest_value: Decimal | None = None
    for holding in holdings:
        value = calculate_holding_metrics(holding).market_value
        if largest_value is None or value > largest_value:
            largest = holding
            largest_value = value
    return largest


def calculate_annual_yield(
    yield_type: YieldType,
    yield_value: Decimal,
    quantity: Decimal,
    average_price: Decimal,
    market_price: Decimal,
) -> Decimal:
    """Compute the annual yield of a yield-bearing asset.

    Args:
        yield_type: ``fixed`` for an absolute yearly amount,
            ``percent_purchase`` / ``percent_market`` for a percentage of the
            purchase cost or the market value, ``none`` for no yield.
        yield_value: Amount or percentage, depending on ``yield_type``.
        quantity: Units held.
        average_price: Average purchase price per unit.
        market_price: Current price per unit.

    Returns:
        Decimal: Yearly yield in the asset currency.
    """
    yield_value = coerce_decimal(yield_value)
    if yield_type == "fixed":
        return yield_value
    if yield_type == "percent_purchase":
        base = coerce_decimal(quantity) * coerce_decimal(average_price)
        return yield_value / HUNDRED * base
    if yield_type == "percent_market":
        base = coerce_decimal(quantity) * coerce_decimal(market_price)
        return yield_value / HUNDRED * base
    return ZERO


def calculate_yield_percent(annual_yield: Decimal, base: Decimal) -> Decimal:
    """Return the yield as a percentage of cost or market value."""
    base = coerce_decimal(base)
    if base > 0:
        return coerce_decimal(annual_yield) / base * HUNDRED
    return ZERO


__all__ = [
    "YieldType",
    "calculate_gain_loss_percent",
    "calculate_holding_metrics",
    "aggregate_investments",
    "find_top_performer",
    "find_largest_holding",
    "calculate_annual_yield",
    "calculate_yield_percent",
]
