"""Tests for investment metrics."""

from decimal import Decimal

from src.domain.models.records import Holding
from src.domain.services.investments import (
    aggregate_investments,
    calculate_annual_yield,
    calculate_holding_metrics,
    calculate_yield_percent,
    find_largest_holding,
    find_top_performer,
)


def _holding(holding_id, quantity, average, current, dividend=None) -> Holding:
    return Holding(
        id=holding_id,
        quantity=Decimal(quantity),
        average_price=Decimal(average),
        current_price=Decimal(current),
        dividend_yield=Decimal(dividend) if dividend is not None else None,
    )


def test_aggregate_investments_totals() -> None:
    """Totals should sum quantity-weighted prices and dividends."""
    holdings = [
        _holding("a", "10", "100", "120", "2.5"),
        _holding("b", "4", "50", "40"),
    ]

    result = aggregate_investments(holdings)

    assert result.total_value == Decimal("1360")
    assert result.total_cost == Decimal("1200")
    assert result.total_gain == Decimal("160")
    assert result.total_gain_percent == Decimal("160") / Decimal("1200") * 100
    assert result.total_dividends == Decimal("25")


def test_unchanged_prices_yield_zero_gain() -> None:
    """Holdings at cost should report no gain."""
    holdings = [
        _holding("a", "3", "10.10", "10.10"),
        _holding("b", "7", "99.99", "99.99"),
    ]

    result = aggregate_investments(holdings)

    assert result.total_gain == 0
    assert result.total_gain_percent == 0


def test_zero_cost_portfolio_has_zero_gain_percent() -> None:
    """Gain percent should degrade to zero without cost."""
    result = aggregate_investments([_holding("a", "5", "0", "12")])

    assert result.total_gain == Decimal("60")
    assert result.total_gain_percent == Decimal("0")


def test_empty_portfolio_returns_zeros() -> None:
    result = aggregate_investments([])

    assert result.total_value == 0
    assert result.total_dividends == 0
    assert result.total_gain_percent == 0


def test_holding_metrics_and_rankings() -> None:
    """Per-holding metrics should drive the top performer and largest."""
    winner = _holding("w", "1", "10", "20")
    big = _holding("b", "100", "10", "11")
    loser = _holding("l", "2", "10", "5")

    metrics = calculate_holding_metrics(loser)

    assert metrics.total_cost == Decimal("20")
    assert metrics.market_value == Decimal("10")
    assert metrics.gain_loss == Decimal("-10")
    assert metrics.gain_loss_percent == Decimal("-50")
    assert find_top_performer([big, loser, winner]) is winner
    assert find_largest_holding([winner, loser, big]) is big
    assert find_top_performer([]) is None
    assert find_largest_holding([]) is None


def test_annual_yield_by_type() -> None:
    """Yield types should use the right base."""
    args = (Decimal("10"), Decimal("20"), Decimal("30"))

    assert calculate_annual_yield("none", Decimal("5"), *args) == 0
    assert calculate_annual_yield("fixed", Decimal("5"), *args) == Decimal("5")
    assert calculate_annual_yield(
        "percent_purchase", Decimal("5"), *args
    ) == Decimal("10")
    assert calculate_annual_yield(
        "percent_market", Decimal("5"), *args
    ) == Decimal("15")
    assert calculate_yield_percent(Decimal("10"), Decimal("200")) == Decimal("5")
    assert calculate_yield_percent(Decimal("10"), Decimal("0")) == 0
