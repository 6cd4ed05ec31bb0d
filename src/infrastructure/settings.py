"""Settings helpers for infrastructure adapters."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import json
import os
from typing import Optional

import dotenv

from src.domain.services.fx import (
    DEFAULT_EXCHANGE_RATES,
    DEFAULT_REPORTING_CURRENCY,
    ExchangeRateTable,
)
from src.domain.services.normalization import normalize_currency
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the metrics engine and its data source.

    Attributes:
        reporting_currency: Currency all metrics are reported in.
        exchange_rates: Units of ``rates_base_currency`` per unit of currency.
        database_url: Optional URL of the finance store.
        rates_base_currency: Currency ``exchange_rates`` are quoted in. The
            fallback table and ``EXCHANGE_RATES`` overrides are quoted in
            CZK and get rebased onto the reporting currency.
    """

    reporting_currency: str = DEFAULT_REPORTING_CURRENCY
    exchange_rates: Mapping[str, Decimal] = field(
        default_factory=lambda: dict(DEFAULT_EXCHANGE_RATES)
    )
    database_url: Optional[str] = None
    rates_base_currency: str = DEFAULT_REPORTING_CURRENCY

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        ``EXCHANGE_RATES`` accepts a JSON object (``{"EUR": 24.5}``) or a
        comma-separated list (``EUR=24.5,USD=22.1``) and overrides the
        CZK-quoted fallback rates entry by entry. The table returned by
        ``rate_table`` is rebased onto ``REPORTING_CURRENCY``.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        reporting = normalize_currency(os.getenv("REPORTING_CURRENCY"))
        rates = dict(DEFAULT_EXCHANGE_RATES)
        raw_rates = os.getenv("EXCHANGE_RATES")
        if raw_rates:
            rates.update(cls._parse_rates(raw_rates, logger=logger))
        return cls(
            reporting_currency=reporting or DEFAULT_REPORTING_CURRENCY,
            exchange_rates=rates,
            database_url=os.getenv("FINANCE_DB_URL") or None,
        )

    def rate_table(self) -> ExchangeRateTable:
        """Return the exchange rate table described by these settings."""
        return ExchangeRateTable(
            reporting_currency=self.reporting_currency,
            rates=self.exchange_rates,
            base_currency=self.rates_base_currency,
        )

    @staticmethod
    def _parse_rates(raw_rates: str, logger) -> dict[str, Decimal]:
        """Parse exchange rate overrides.

        Args:
            raw_rates: JSON object or ``CODE=rate`` pairs.
            logger: Logger used for warnings.

        Returns:
            dict[str, Decimal]: Valid positive rates keyed by currency code.
        """
        raw_rates = raw_rates.strip()
        if raw_rates.startswith("{"):
            try:
                items = list(json.loads(raw_rates).items())
            except (json.JSONDecodeError, AttributeError):
                logger.warning("EXCHANGE_RATES is not a valid JSON object")
                return {}
        else:
            items = []
            for chunk in raw_rates.split(","):
                if not chunk.strip():
                    continue
                code, sep, value = chunk.partition("=")
                if not sep:
                    logger.warning(f"Ignoring exchange rate entry '{chunk}'")
                    continue
                items.append((code, value))

        parsed: dict[str, Decimal] = {}
        for code, value in items:
            currency = normalize_currency(str(code))
            try:
                rate = Decimal(str(value).strip())
            except InvalidOperation:
                rate = None
            if currency is None or rate is None or not rate.is_finite() or rate <= 0:
                logger.warning(f"Ignoring exchange rate {code}={value}")
                continue
            parsed[currency] = rate
        return parsed


__all__ = ["FinanceSettings"]
