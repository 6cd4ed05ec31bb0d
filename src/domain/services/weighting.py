"""Weighted average accumulation shared by the aggregators."""

from decimal import Decimal

from src.utils.decimal_utils import ZERO


class WeightedAverage:
    """Accumulate ``Σ(weight * value) / Σ weight`` in Decimal arithmetic.

    An accumulator whose total weight is not positive averages to 0, which
    covers the empty case and overdrawn balances outweighing the rest.
    """

    def __init__(self) -> None:
        self._weighted_sum = ZERO
        self._total_weight = ZERO

    def add(self, weight: Decimal, value: Decimal) -> None:
        self._weighted_sum += weight * value
        self._total_weight += weight

    @property
    def total_weight(self) -> Decimal:
        return self._total_weight

    @property
    def value(self) -> Decimal:
        if self._total_weight <= 0:
            return ZERO
        return self._weighted_sum / self._total_weight


__all__ = ["WeightedAverage"]
