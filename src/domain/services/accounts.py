"""Domain service aggregating savings and checking accounts."""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from logging import Logger

from src.domain.exceptions import UnsupportedCurrencyError
from src.domain.models.metrics import AccountMetrics
from src.domain.models.records import Account, RateZone
from src.domain.services.fx import ExchangeRateTable, to_reporting_currency
from src.domain.services.interest import calculate_zoned_interest
from src.domain.services.weighting import WeightedAverage
from src.utils.decimal_utils import HUNDRED, ZERO, coerce_decimal, safe_divide


def aggregate_accounts(
    accounts: Sequence[Account],
    rates: ExchangeRateTable,
    *,
    zones_by_account: Mapping[str, Sequence[RateZone]] | None = None,
    logger: Logger | None = None,
) -> AccountMetrics:
    """Compute balances and interest figures for a set of accounts.

    Excluded accounts are left out of every sum but still counted in
    ``account_count``. Zoned accounts whose zones have not been resolved yet
    contribute to balances only; they join the interest figures once their
    zones are available.

    Args:
        accounts: Account snapshots.
        rates: Exchange rate table for the reporting currency.
        zones_by_account: Optional zones keyed by account id, taking
            precedence over zones attached to the account records.
        logger: Optional logger for skipped records.

    Returns:
        AccountMetrics: Aggregated figures in the reporting currency.
    """
    total_balance = ZERO
    savings_balance = ZERO
    checking_balance = ZERO
    expected_interest = ZERO
    average_rate = WeightedAverage()

    for account in accounts:
        if account.exclude_from_balance:
            continue
        balance = coerce_decimal(account.balance)
        try:
            balance_reporting = to_reporting_currency(
                balance,
                account.currency,
                rates,
            )
        except UnsupportedCurrencyError as exc:
            _warn(logger, f"Skipping account {account.id}: {exc}")
            continue

        total_balance += balance_reporting
        if account.account_type == "savings":
            savings_balance += balance_reporting
        elif account.account_type == "checking":
            checking_balance += balance_reporting

        if account.has_zone_designation:
            zones = _resolve_zones(account, zones_by_account)
            if not zones:
                if logger is not None:
                    logger.info(
                        f"Zones not resolved for account {account.id}; "
                        "leaving it out of interest figures"
                    )
                continue
            interest = calculate_zoned_interest(balance, zones, logger)
            expected_interest += to_reporting_currency(
                interest,
                account.currency,
                rates,
            )
            effective_rate = (
                safe_divide(interest, balance) * HUNDRED
                if balance > 0
                else ZERO
            )
            average_rate.add(balance_reporting, effective_rate)
            continue

        rate = coerce_decimal(account.interest_rate)
        if rate <= 0:
            continue
        expected_interest += balance_reporting * rate / HUNDRED
        average_rate.add(balance_reporting, rate)

    return AccountMetrics(
        total_balance=total_balance,
        savings_balance=savings_balance,
        checking_balance=checking_balance,
        account_count=len(accounts),
        average_interest_rate=average_rate.value,
        expected_yearly_interest=expected_interest,
        currency_code=rates.reporting_currency,
    )


def _resolve_zones(
    account: Account,
    zones_by_account: Mapping[str, Sequence[RateZone]] | None,
) -> Sequence[RateZone] | None:
    if zones_by_account is not None:
        zones = zones_by_account.get(account.id)
        if zones:
            return zones
    return account.zones


def _warn(logger: Logger | None, message: str) -> None:
    if logger is not None:
        logger.warning(message)


__all__ = ["aggregate_accounts"]
