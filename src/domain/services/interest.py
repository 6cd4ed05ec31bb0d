"""Progressive (tiered) interest for zoned savings accounts.

A zoned account earns each zone's rate only on the part of the balance that
falls inside ``[lower_bound, upper_bound)``, the same way tax brackets are
applied. Zone data may be stale or incomplete, so malformed configurations
(gaps, overlaps, no open-ended top zone) still produce a best-effort sum
instead of an error.
"""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from src.domain.models.records import RateZone
from src.utils.decimal_utils import HUNDRED, ZERO, coerce_decimal, safe_divide


def sort_zones(zones: Sequence[RateZone]) -> list[RateZone]:
    """Return zones ordered by lower bound."""
    return sorted(zones, key=lambda zone: coerce_decimal(zone.lower_bound))


def calculate_zoned_interest(
    balance: Decimal,
    zones: Sequence[RateZone] | None,
    logger: Logger | None = None,
) -> Decimal:
    """Compute yearly interest for a balance under progressive zones.

    Args:
        balance: Account balance in the account currency.
        zones: Rate zones, in any order.
        logger: Optional logger for malformed zone diagnostics.

    Returns:
        Decimal: Yearly interest in the account currency. Zero for a
        non-positive balance or when no zones are given.
    """
    balance = coerce_decimal(balance)
    if balance <= 0 or not zones:
        return ZERO

    ordered = sort_zones(zones)
    if logger is not None:
        for problem in describe_zone_problems(ordered):
            logger.warning(f"Zone configuration issue: {problem}")

    total = ZERO
    for zone in ordered:
        lower = coerce_decimal(zone.lower_bound)
        if balance <= lower:
            continue
        if zone.upper_bound is None:
            top = balance
        else:
            top = min(balance, coerce_decimal(zone.upper_bound))
        portion = top - lower
        if portion <= 0:
            continue
        total += portion * coerce_decimal(zone.annual_rate_percent) / HUNDRED
    return total


def calculate_effective_rate(
    balance: Decimal,
    zones: Sequence[RateZone] | None,
) -> Decimal:
    """Return the flat rate equivalent to the zoned interest.

    Returns:
        Decimal: ``interest / balance * 100``, or 0 for a non-positive
        balance.
    """
    balance = coerce_decimal(balance)
    if balance <= 0:
        return ZERO
    interest = calculate_zoned_interest(balance, zones)
    return safe_divide(interest, balance) * HUNDRED


def describe_zone_problems(zones: Sequence[RateZone]) -> list[str]:
    """List gaps, overlaps and misplaced open-ended zones.

    Args:
        zones: Zones already sorted by lower bound.

    Returns:
        list[str]: Human-readable problems; empty for a well-formed set.
    """
    problems: list[str] = []
    if not zones:
        return problems
    first_lower = coerce_decimal(zones[0].lower_bound)
    if first_lower != 0:
        problems.append(f"first zone starts at {first_lower}, not 0")
    for index, (current, following) in enumerate(zip(zones, zones[1:])):
        if current.upper_bound is None:
            problems.append(
                f"open-ended zone at position {index} is not the last zone"
            )
            continue
        upper = coerce_decimal(current.upper_bound)
        next_lower = coerce_decimal(following.lower_bound)
        if next_lower > upper:
            problems.append(f"gap between {upper} and {next_lower}")
        elif next_lower < upper:
            problems.append(f"overlap between {next_lower} and {upper}")
    if zones[-1].upper_bound is not None:
        problems.append(
            f"no open-ended zone above {coerce_decimal(zones[-1].upper_bound)}"
        )
    return problems


__all__ = [
    "sort_zones",
    "calculate_zoned_interest",
    "calculate_effective_rate",
    "describe_zone_problems",
]
