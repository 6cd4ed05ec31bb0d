"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_finance_overview import (
    GetFinanceOverviewUseCase,
)
from src.infrastructure import container
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository
from src.infrastructure.settings import FinanceSettings


def test_build_rate_table_uses_settings() -> None:
    settings = FinanceSettings(
        reporting_currency="EUR",
        exchange_rates={"CZK": Decimal("0.04")},
        rates_base_currency="EUR",
    )

    table = container.build_rate_table(settings)

    assert table.reporting_currency == "EUR"
    assert table.get_rate("CZK") == Decimal("0.04")


def test_build_finance_repository_defaults_to_reporting_currency() -> None:
    db_port = MagicMock()
    settings = FinanceSettings(reporting_currency="EUR")

    repository = container.build_finance_repository(db_port, settings=settings)

    assert isinstance(repository, SqlAlchemyFinanceRepository)
    assert repository._currency(None) == "EUR"


def test_build_finance_overview_use_case(monkeypatch) -> None:
    monkeypatch.setattr(
        container.FinanceSettings,
        "from_env",
        classmethod(lambda cls: FinanceSettings()),
    )
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    use_case = container.build_finance_overview_use_case(db_port=MagicMock())

    assert isinstance(use_case, GetFinanceOverviewUseCase)
