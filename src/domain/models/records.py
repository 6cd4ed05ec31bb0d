"""Domain models for accounts, holdings and loans.

Records are read-only snapshots supplied by a data source for one
computation cycle. Monetary values are Decimals in the record's own currency.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal


AccountType = Literal["savings", "checking"]


@dataclass(frozen=True)
class RateZone:
    """Balance range earning its own annual rate.

    Attributes:
        lower_bound: Inclusive lower edge of the zone.
        upper_bound: Exclusive upper edge, or None when unbounded.
        annual_rate_percent: Annual rate applied to the portion in the zone.
    """

    lower_bound: Decimal
    upper_bound: Decimal | None
    annual_rate_percent: Decimal

    @property
    def is_unbounded(self) -> bool:
        return self.upper_bound is None

    @classmethod
    def from_raw(
        cls,
        lower_bound: Decimal,
        upper_bound: Decimal | None,
        annual_rate_percent: Decimal,
    ) -> "RateZone":
        """Build a zone from stored values.

        Stored zones use an upper bound of 0 (or no value) for the open-ended
        top zone.
        """
        if upper_bound is not None and upper_bound == 0:
            upper_bound = None
        return cls(
            lower_bound=lower_bound,
            upper_bound=upper_bound,
            annual_rate_percent=annual_rate_percent,
        )


@dataclass(frozen=True)
class Account:
    """Savings or checking account snapshot."""

    id: str
    currency: str
    balance: Decimal
    account_type: AccountType = "savings"
    interest_rate: Decimal | None = None
    has_zone_designation: bool = False
    zones: tuple[RateZone, ...] | None = None
    exclude_from_balance: bool = False
    name: str = ""


@dataclass(frozen=True)
class Holding:
    """Investment holding snapshot.

    ``dividend_yield`` is the annual dividend per share, not a percentage.
    """

    id: str
    quantity: Decimal
    average_price: Decimal
    current_price: Decimal
    dividend_yield: Decimal | None = None
    ticker: str = ""


@dataclass(frozen=True)
class Loan:
    """Loan snapshot."""

    id: str
    currency: str
    principal: Decimal
    monthly_payment: Decimal
    interest_rate: Decimal
    name: str = ""


__all__ = ["AccountType", "RateZone", "Account", "Holding", "Loan"]
