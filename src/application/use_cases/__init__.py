"""Application use cases package."""

from .get_account_metrics import AccountMetrics, GetAccountMetricsUseCase
from .get_finance_overview import FinanceOverview, GetFinanceOverviewUseCase
from .get_investment_metrics import (
    GetInvestmentMetricsUseCase,
    InvestmentMetrics,
)
from .get_loan_metrics import GetLoanMetricsUseCase, LoanMetrics

__all__ = [
    "GetAccountMetricsUseCase",
    "AccountMetrics",
    "GetInvestmentMetricsUseCase",
    "InvestmentMetrics",
    "GetLoanMetricsUseCase",
    "LoanMetrics",
    "GetFinanceOverviewUseCase",
    "FinanceOverview",
]
