"""Currency conversion into the reporting currency."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from src.domain.exceptions import UnsupportedCurrencyError
from src.domain.services.normalization import normalize_currency
from src.utils.decimal_utils import ZERO, coerce_decimal


DEFAULT_REPORTING_CURRENCY = "CZK"

# 1 unit of currency = X CZK.
DEFAULT_EXCHANGE_RATES: dict[str, Decimal] = {
    "CZK": Decimal("1"),
    "EUR": Decimal("25.0"),
    "USD": Decimal("23.0"),
    "GBP": Decimal("29.0"),
    "CNY": Decimal("3.2"),
    "JPY": Decimal("0.15"),
    "CHF": Decimal("26.0"),
    "HKD": Decimal("3.0"),
}


@dataclass(frozen=True)
class ExchangeRateTable:
    """Static multiplicative rates into a single reporting currency.

    Attributes:
        reporting_currency: Currency every amount is normalized into.
        rates: Mapping of currency code to units of reporting currency per
            unit of that currency.
        base_currency: Currency ``rates`` are quoted in when it differs from
            the reporting currency. The rates are then rebased so that each
            one becomes ``rate / rates[reporting_currency]``. After
            construction it always equals ``reporting_currency``.
    """

    reporting_currency: str = DEFAULT_REPORTING_CURRENCY
    rates: Mapping[str, Decimal] = field(
        default_factory=lambda: dict(DEFAULT_EXCHANGE_RATES)
    )
    base_currency: Optional[str] = None

    def __post_init__(self) -> None:
        reporting = normalize_currency(self.reporting_currency)
        if reporting is None:
            raise ValueError("Reporting currency must not be empty")
        normalized = {
            normalize_currency(code): coerce_decimal(rate)
            for code, rate in self.rates.items()
            if normalize_currency(code)
        }
        base = normalize_currency(self.base_currency) or reporting
        if base != reporting:
            normalized[base] = Decimal("1")
            factor = normalized.get(reporting, ZERO)
            if factor <= 0:
                raise UnsupportedCurrencyError(reporting)
            normalized = {
                code: rate / factor for code, rate in normalized.items()
            }
        normalized[reporting] = Decimal("1")
        object.__setattr__(self, "reporting_currency", reporting)
        object.__setattr__(self, "rates", normalized)
        object.__setattr__(self, "base_currency", reporting)

    def get_rate(self, currency: str) -> Decimal:
        """Return the rate for a currency.

        Raises:
            UnsupportedCurrencyError: If the currency is not in the table.
        """
        normalized = normalize_currency(currency)
        try:
            return self.rates[normalized]
        except KeyError as exc:
            raise UnsupportedCurrencyError(str(currency)) from exc

    def supports(self, currency: str) -> bool:
        return normalize_currency(currency) in self.rates

    def with_rates(self, overrides: Mapping[str, Decimal]) -> "ExchangeRateTable":
        """Return a copy of the table with some rates replaced."""
        merged = dict(self.rates)
        merged.update(overrides)
        return ExchangeRateTable(
            reporting_currency=self.reporting_currency,
            rates=merged,
        )


def to_reporting_currency(
    amount: Decimal,
    source_currency: str,
    rates: ExchangeRateTable,
) -> Decimal:
    """Convert an amount into the reporting currency.

    Args:
        amount: Amount in the source currency.
        source_currency: Currency code of the amount.
        rates: Exchange rate table.

    Returns:
        Decimal: Amount in the reporting currency. Amounts already in the
        reporting currency are returned unchanged.

    Raises:
        UnsupportedCurrencyError: If the source currency has no rate.
    """
    if normalize_currency(source_currency) == rates.reporting_currency:
        return amount
    return amount * rates.get_rate(source_currency)


def from_reporting_currency(
    amount: Decimal,
    target_currency: str,
    rates: ExchangeRateTable,
) -> Decimal:
    """Convert an amount from the reporting currency into another currency.

    Raises:
        UnsupportedCurrencyError: If the target currency has no usable rate.
    """
    if normalize_currency(target_currency) == rates.reporting_currency:
        return amount
    rate = rates.get_rate(target_currency)
    if rate == 0:
        raise UnsupportedCurrencyError(str(target_currency))
    return amount / rate


def convert_between(
    amount: Decimal,
    source_currency: str,
    target_currency: str,
    rates: ExchangeRateTable,
) -> Decimal:
    """Convert between two currencies through the reporting currency."""
    if normalize_currency(source_currency) == normalize_currency(
        target_currency
    ):
        return amount
    in_reporting = to_reporting_currency(amount, source_currency, rates)
    return from_reporting_currency(in_reporting, target_currency, rates)


__all__ = [
    "DEFAULT_REPORTING_CURRENCY",
    "DEFAULT_EXCHANGE_RATES",
    "ExchangeRateTable",
    "to_reporting_currency",
    "from_reporting_currency",
    "convert_between",
]
