"""Domain models package."""

from .metrics import (
    AccountMetrics,
    AmortizationRow,
    AmortizationSchedule,
    FinanceOverview,
    HoldingMetrics,
    InvestmentMetrics,
    LoanMetrics,
)
from .records import Account, AccountType, Holding, Loan, RateZone

__all__ = [
    "Account",
    "AccountType",
    "Holding",
    "Loan",
    "RateZone",
    "AccountMetrics",
    "HoldingMetrics",
    "InvestmentMetrics",
    "LoanMetrics",
    "AmortizationRow",
    "AmortizationSchedule",
    "FinanceOverview",
]
