"""Tests for progressive zoned interest."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models.records import RateZone
from src.domain.services.interest import (
    calculate_effective_rate,
    calculate_zoned_interest,
    describe_zone_problems,
)


def _zone(lower, upper, rate) -> RateZone:
    return RateZone(
        lower_bound=Decimal(lower),
        upper_bound=Decimal(upper) if upper is not None else None,
        annual_rate_percent=Decimal(rate),
    )


TWO_ZONES = [_zone("0", "1000", "1"), _zone("1000", None, "2")]


def test_upper_bound_belongs_to_next_zone() -> None:
    """A balance equal to a zone edge earns nothing in the upper zone."""
    assert calculate_zoned_interest(Decimal("1000"), TWO_ZONES) == Decimal("10")


def test_balance_spanning_zones_is_split() -> None:
    """Each portion should earn its own zone rate."""
    assert calculate_zoned_interest(Decimal("1500"), TWO_ZONES) == Decimal("20")


@pytest.mark.parametrize("balance", ["0", "-250"])
def test_non_positive_balance_earns_nothing(balance: str) -> None:
    """Zero and negative balances should yield zero for any zones."""
    assert calculate_zoned_interest(Decimal(balance), TWO_ZONES) == 0
    assert calculate_zoned_interest(Decimal(balance), []) == 0


def test_zone_order_does_not_matter() -> None:
    """Unsorted zones should give the same result as sorted ones."""
    zones = [
        _zone("50000", None, "0.5"),
        _zone("0", "10000", "4"),
        _zone("10000", "50000", "2"),
    ]

    result = calculate_zoned_interest(Decimal("60000"), zones)

    assert result == Decimal("400") + Decimal("800") + Decimal("50")
    assert result == calculate_zoned_interest(
        Decimal("60000"),
        list(reversed(zones)),
    )


def test_empty_zones_yield_zero() -> None:
    """Missing zone data should not fail."""
    assert calculate_zoned_interest(Decimal("1000"), []) == 0
    assert calculate_zoned_interest(Decimal("1000"), None) == 0


def test_balance_above_last_bounded_zone_is_capped() -> None:
    """Without an open-ended zone only covered amounts earn interest."""
    zones = [_zone("0", "1000", "1"), _zone("1000", "2000", "2")]

    assert calculate_zoned_interest(Decimal("5000"), zones) == Decimal("30")


def test_gap_between_zones_earns_nothing() -> None:
    """The uncovered range of a gap should be skipped."""
    zones = [_zone("0", "1000", "1"), _zone("2000", None, "3")]

    assert calculate_zoned_interest(Decimal("2500"), zones) == Decimal("25")


def test_overlapping_zones_are_summed_and_reported() -> None:
    """Overlapping ranges earn both rates and log a warning."""
    zones = [_zone("0", "1000", "1"), _zone("500", None, "2")]
    logger = MagicMock()

    result = calculate_zoned_interest(Decimal("1500"), zones, logger)

    assert result == Decimal("10") + Decimal("20")
    logger.warning.assert_called_once_with(
        "Zone configuration issue: overlap between 500 and 1000"
    )


def test_well_formed_zones_log_nothing() -> None:
    logger = MagicMock()

    calculate_zoned_interest(Decimal("1500"), TWO_ZONES, logger)

    logger.warning.assert_not_called()


def test_effective_rate_divides_interest_by_balance() -> None:
    """The effective rate should reproduce the zoned interest."""
    assert calculate_effective_rate(Decimal("2000"), TWO_ZONES) == Decimal("1.5")
    assert calculate_effective_rate(Decimal("0"), TWO_ZONES) == 0


def test_describe_zone_problems_reports_gaps_and_overlaps() -> None:
    """Malformed zone sets should be described, well-formed ones not."""
    assert describe_zone_problems(TWO_ZONES) == []

    problems = describe_zone_problems(
        [
            _zone("100", "1000", "1"),
            _zone("900", "2000", "2"),
            _zone("2500", "3000", "3"),
        ]
    )

    assert problems == [
        "first zone starts at 100, not 0",
        "overlap between 900 and 1000",
        "gap between 2000 and 2500",
        "no open-ended zone above 3000",
    ]


def test_from_raw_treats_zero_upper_bound_as_unbounded() -> None:
    """Stored zones use 0 as the open-ended upper bound."""
    zone = RateZone.from_raw(Decimal("1000"), Decimal("0"), Decimal("2"))

    assert zone.is_unbounded
    assert calculate_zoned_interest(
        Decimal("3000"),
        [_zone("0", "1000", "1"), zone],
    ) == Decimal("50")
