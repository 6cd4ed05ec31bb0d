"""Use case computing account metrics with zone data joined in."""

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.metrics import AccountMetrics
from src.domain.models.records import Account, RateZone
from src.domain.services.accounts import aggregate_accounts
from src.domain.services.fx import ExchangeRateTable
from src.infrastructure.logging.logger import get_app_logger


class GetAccountMetricsUseCase:
    """Compute balances and interest figures for bank accounts."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        rates: ExchangeRateTable,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing account and zone records.
            rates: Exchange rate table for the reporting currency.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._rates = rates
        self._logger = logger or get_app_logger()

    def execute(self) -> AccountMetrics:
        """Return account metrics for the current snapshot.

        Zoned accounts whose zones cannot be loaded are reported as
        unresolved and left out of the interest figures for this run.

        Returns:
            AccountMetrics: Aggregated account figures.
        """
        accounts = self._repository.fetch_accounts()
        zones_by_account = self._load_zones(accounts)
        metrics = aggregate_accounts(
            accounts,
            self._rates,
            zones_by_account=zones_by_account,
            logger=self._logger,
        )
        self._logger.info(
            f"Account metrics computed: accounts={metrics.account_count}, "
            f"total={metrics.total_balance} {metrics.currency_code}, "
            f"zoned_resolved={len(zones_by_account)}"
        )
        return metrics

    def _load_zones(self, accounts: list[Account]) -> dict[str, list[RateZone]]:
        zones_by_account: dict[str, list[RateZone]] = {}
        for account in accounts:
            if not account.has_zone_designation or account.exclude_from_balance:
                continue
            if account.zones:
                continue
            try:
                zones = self._repository.fetch_account_zones(account.id)
            except SQLAlchemyError as exc:
                self._logger.warning(
                    f"Zones unavailable for account {account.id}: {exc}"
                )
                continue
            if zones:
                zones_by_account[account.id] = zones
        return zones_by_account


__all__ = ["GetAccountMetricsUseCase", "AccountMetrics"]
