"""Use case combining account, investment and loan metrics."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.get_account_metrics import (
    GetAccountMetricsUseCase,
)
from src.application.use_cases.get_investment_metrics import (
    GetInvestmentMetricsUseCase,
)
from src.application.use_cases.get_loan_metrics import GetLoanMetricsUseCase
from src.domain.models.metrics import FinanceOverview
from src.domain.services.change import calculate_net_worth
from src.domain.services.fx import ExchangeRateTable
from src.infrastructure.logging.logger import get_app_logger


class GetFinanceOverviewUseCase:
    """Compute every metric group and the resulting net worth.

    Investment values are taken as already expressed in the reporting
    currency.
    """

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        rates: ExchangeRateTable,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing finance records.
            rates: Exchange rate table for the reporting currency.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._rates = rates
        self._logger = logger or get_app_logger()
        self._accounts = GetAccountMetricsUseCase(
            repository,
            rates,
            logger=self._logger,
        )
        self._investments = GetInvestmentMetricsUseCase(
            repository,
            logger=self._logger,
        )
        self._loans = GetLoanMetricsUseCase(
            repository,
            rates,
            logger=self._logger,
        )

    def execute(self) -> FinanceOverview:
        """Return the combined overview.

        Returns:
            FinanceOverview: Metric groups with asset and liability totals.
        """
        accounts = self._accounts.execute()
        investments = self._investments.execute()
        loans = self._loans.execute()

        total_assets = accounts.total_balance + investments.total_value
        total_liabilities = loans.total_principal
        net_worth = calculate_net_worth(total_assets, total_liabilities)

        self._logger.info(
            f"Net worth computed: assets={total_assets}, "
            f"liabilities={total_liabilities}"
        )
        return FinanceOverview(
            accounts=accounts,
            investments=investments,
            loans=loans,
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            net_worth=net_worth,
            currency_code=self._rates.reporting_currency,
        )


__all__ = ["GetFinanceOverviewUseCase", "FinanceOverview"]
