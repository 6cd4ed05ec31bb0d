"""Use case computing loan metrics."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.metrics import LoanMetrics
from src.domain.services.fx import ExchangeRateTable
from src.domain.services.loans import aggregate_loans
from src.infrastructure.logging.logger import get_app_logger


class GetLoanMetricsUseCase:
    """Compute principal, payment and rate figures for loans."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        rates: ExchangeRateTable,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing loan records.
            rates: Exchange rate table for the reporting currency.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._rates = rates
        self._logger = logger or get_app_logger()

    def execute(self) -> LoanMetrics:
        loans = self._repository.fetch_loans()
        metrics = aggregate_loans(loans, self._rates, logger=self._logger)
        self._logger.info(
            f"Loan metrics computed: loans={metrics.count}, "
            f"principal={metrics.total_principal} {metrics.currency_code}"
        )
        return metrics


__all__ = ["GetLoanMetricsUseCase", "LoanMetrics"]
