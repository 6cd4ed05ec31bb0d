"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.get_finance_overview import (
    GetFinanceOverviewUseCase,
)
from src.domain.services.fx import ExchangeRateTable
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_rate_table(settings: FinanceSettings | None = None) -> ExchangeRateTable:
    """Return the exchange rate table configured for this process."""
    resolved = settings or FinanceSettings.from_env()
    return resolved.rate_table()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> FinanceRepositoryPort:
    """Return the finance records repository."""
    resolved_db = db_port or build_database_adapter()
    resolved = settings or FinanceSettings.from_env()
    return SqlAlchemyFinanceRepository(
        resolved_db,
        default_currency=resolved.reporting_currency,
    )


def build_finance_overview_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetFinanceOverviewUseCase:
    """Return the overview use case wired to the configured store."""
    settings = FinanceSettings.from_env()
    return GetFinanceOverviewUseCase(
        repository=build_finance_repository(db_port, settings=settings),
        rates=build_rate_table(settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_rate_table",
    "build_finance_repository",
    "build_finance_overview_use_case",
]
