"""Use case computing investment portfolio metrics."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.metrics import InvestmentMetrics
from src.domain.services.investments import aggregate_investments
from src.infrastructure.logging.logger import get_app_logger


class GetInvestmentMetricsUseCase:
    """Compute value, gain and dividend totals for holdings."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> InvestmentMetrics:
        holdings = self._repository.fetch_holdings()
        metrics = aggregate_investments(holdings)
        self._logger.info(
            f"Investment metrics computed: holdings={len(holdings)}, "
            f"value={metrics.total_value}, gain={metrics.total_gain}"
        )
        return metrics


__all__ = ["GetInvestmentMetricsUseCase", "InvestmentMetrics"]
