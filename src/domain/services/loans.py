"""Domain services for loans: portfolio totals and annuity schedules."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger
from typing import Literal

from src.domain.exceptions import UnsupportedCurrencyError
from src.domain.models.metrics import (
    AmortizationRow,
    AmortizationSchedule,
    LoanMetrics,
)
from src.domain.models.records import Loan
from src.domain.services.fx import ExchangeRateTable, to_reporting_currency
from src.domain.services.weighting import WeightedAverage
from src.utils.decimal_utils import HUNDRED, ZERO, coerce_decimal


PaymentPeriodicity = Literal["monthly", "quarterly", "semi_annually", "annually"]

PERIODS_PER_YEAR: dict[str, int] = {
    "monthly": 12,
    "quarterly": 4,
    "semi_annually": 2,
    "annually": 1,
}


def aggregate_loans(
    loans: Sequence[Loan],
    rates: ExchangeRateTable,
    *,
    logger: Logger | None = None,
) -> LoanMetrics:
    """Compute totals and the principal-weighted rate for loans.

    Args:
        loans: Loan snapshots.
        rates: Exchange rate table for the reporting currency.
        logger: Optional logger for skipped records.

    Returns:
        LoanMetrics: Aggregated figures in the reporting currency.
    """
    total_principal = ZERO
    total_payment = ZERO
    average_rate = WeightedAverage()
    for loan in loans:
        try:
            principal = to_reporting_currency(
                coerce_decimal(loan.principal),
                loan.currency,
                rates,
            )
            payment = to_reporting_currency(
                coerce_decimal(loan.monthly_payment),
                loan.currency,
                rates,
            )
        except UnsupportedCurrencyError as exc:
            if logger is not None:
                logger.warning(f"Skipping loan {loan.id}: {exc}")
            continue
        total_principal += principal
        total_payment += payment
        average_rate.add(principal, coerce_decimal(loan.interest_rate))

    return LoanMetrics(
        total_principal=total_principal,
        total_monthly_payment=total_payment,
        average_interest_rate=average_rate.value,
        count=len(loans),
        currency_code=rates.reporting_currency,
    )


def calculate_annuity_payment(
    principal: Decimal,
    annual_rate_percent: Decimal,
    total_periods: int,
    periods_per_year: int,
) -> Decimal:
    """Return the periodic payment of an annuity loan.

    Uses ``P * r(1+r)^n / ((1+r)^n - 1)`` with the periodic rate ``r``;
    an interest-free loan is repaid in equal parts.
    """
    principal = coerce_decimal(principal)
    if principal <= 0 or total_periods <= 0:
        return ZERO
    periodic_rate = coerce_decimal(annual_rate_percent) / HUNDRED / periods_per_year
    if periodic_rate == 0:
        return principal / total_periods
    compound = (1 + periodic_rate) ** total_periods
    return principal * (periodic_rate * compound) / (compound - 1)


def build_amortization_schedule(
    principal: Decimal,
    annual_rate_percent: Decimal,
    total_periods: int,
    periods_per_year: int,
) -> AmortizationSchedule:
    """Build the full payment plan of an annuity loan."""
    payment = calculate_annuity_payment(
        principal,
        annual_rate_percent,
        total_periods,
        periods_per_year,
    )
    if payment == 0:
        return AmortizationSchedule(
            periodic_payment=ZERO,
            total_payments=ZERO,
            total_interest=ZERO,
            rows=[],
        )

    periodic_rate = coerce_decimal(annual_rate_percent) / HUNDRED / periods_per_year
    months_per_period = 12 // periods_per_year
    remaining = coerce_decimal(principal)
    total_interest = ZERO
    rows: list[AmortizationRow] = []
    for period in range(1, total_periods + 1):
        interest_part = remaining * periodic_rate
        principal_part = payment - interest_part
        remaining = max(ZERO, remaining - principal_part)
        total_interest += interest_part
        total_months = period * months_per_period
        rows.append(
            AmortizationRow(
                period_number=period,
                year=(total_months + 11) // 12,
                month=(total_months - 1) % 12 + 1,
                payment=payment,
                principal_payment=principal_part,
                interest_payment=interest_part,
                remaining_balance=remaining,
            )
        )

    return AmortizationSchedule(
        periodic_payment=payment,
        total_payments=payment * total_periods,
        total_interest=total_interest,
        rows=rows,
    )


def total_periods_for_months(months: int, periods_per_year: int) -> int:
    """Convert a term in months into a number of payment periods."""
    months_per_period = 12 // periods_per_year
    return -(-months // months_per_period)


__all__ = [
    "PaymentPeriodicity",
    "PERIODS_PER_YEAR",
    "aggregate_loans",
    "calculate_annuity_payment",
    "build_amortization_schedule",
    "total_periods_for_months",
]
