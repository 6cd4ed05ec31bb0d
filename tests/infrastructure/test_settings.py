"""Tests for infrastructure settings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.exceptions import UnsupportedCurrencyError
from src.domain.services.fx import to_reporting_currency
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import FinanceSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in ("REPORTING_CURRENCY", "EXCHANGE_RATES", "FINANCE_DB_URL"):
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults() -> None:
    """Without environment values the CZK fallback table is used."""
    settings = FinanceSettings.from_env()

    assert settings.reporting_currency == "CZK"
    assert settings.exchange_rates["EUR"] == Decimal("25.0")
    assert settings.database_url is None


def test_from_env_reads_json_rates(monkeypatch) -> None:
    """JSON overrides should replace individual fallback rates."""
    monkeypatch.setenv("REPORTING_CURRENCY", "czk")
    monkeypatch.setenv("EXCHANGE_RATES", '{"eur": 24.35, "usd": "22.10"}')
    monkeypatch.setenv("FINANCE_DB_URL", "sqlite:///finance.db")

    settings = FinanceSettings.from_env()
    table = settings.rate_table()

    assert table.get_rate("EUR") == Decimal("24.35")
    assert table.get_rate("USD") == Decimal("22.10")
    assert table.get_rate("GBP") == Decimal("29.0")
    assert settings.database_url == "sqlite:///finance.db"


def test_parse_rates_ignores_invalid_pairs() -> None:
    """Invalid entries should be logged and skipped."""
    logger = MagicMock()

    parsed = FinanceSettings._parse_rates(
        "EUR=24.5, USD=abc, GBP, CHF=-1, JPY=0.16",
        logger=logger,
    )

    assert parsed == {"EUR": Decimal("24.5"), "JPY": Decimal("0.16")}
    assert logger.warning.call_count == 3


def test_parse_rates_rejects_malformed_json() -> None:
    logger = MagicMock()

    assert FinanceSettings._parse_rates("{not json", logger=logger) == {}
    logger.warning.assert_called_once()


def test_from_env_rebases_rates_onto_reporting_currency(monkeypatch) -> None:
    """A non-CZK reporting currency should rebase the CZK-quoted rates."""
    monkeypatch.setenv("REPORTING_CURRENCY", "EUR")

    table = FinanceSettings.from_env().rate_table()

    assert table.reporting_currency == "EUR"
    assert to_reporting_currency(Decimal("2500"), "CZK", table) == Decimal("100")
    assert to_reporting_currency(Decimal("100"), "USD", table) == Decimal("92")
    assert to_reporting_currency(Decimal("7"), "EUR", table) == Decimal("7")


def test_from_env_rebases_overrides_quoted_in_czk(monkeypatch) -> None:
    """Overrides are quoted in CZK even when reporting in another currency."""
    monkeypatch.setenv("REPORTING_CURRENCY", "USD")
    monkeypatch.setenv("EXCHANGE_RATES", "USD=20,EUR=25")

    table = FinanceSettings.from_env().rate_table()

    assert table.get_rate("EUR") == Decimal("1.25")
    assert table.get_rate("CZK") == Decimal("0.05")


def test_rate_table_rejects_reporting_currency_without_rate() -> None:
    """A reporting currency missing from the quoted table cannot be rebased."""
    settings = FinanceSettings(reporting_currency="SEK")

    with pytest.raises(UnsupportedCurrencyError):
        settings.rate_table()
