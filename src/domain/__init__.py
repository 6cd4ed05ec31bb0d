"""Domain package: records, metrics and the pure financial metrics engine."""

from .exceptions import FinanceEngineError, UnsupportedCurrencyError
from .models import (
    Account,
    AccountMetrics,
    FinanceOverview,
    Holding,
    InvestmentMetrics,
    Loan,
    LoanMetrics,
    RateZone,
)
from .services import (
    ExchangeRateTable,
    aggregate_accounts,
    aggregate_investments,
    aggregate_loans,
    calculate_zoned_interest,
    to_reporting_currency,
)

__all__ = [
    "FinanceEngineError",
    "UnsupportedCurrencyError",
    "Account",
    "Holding",
    "Loan",
    "RateZone",
    "AccountMetrics",
    "InvestmentMetrics",
    "LoanMetrics",
    "FinanceOverview",
    "ExchangeRateTable",
    "to_reporting_currency",
    "calculate_zoned_interest",
    "aggregate_accounts",
    "aggregate_investments",
    "aggregate_loans",
]
