"""Domain models for computed financial metrics."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AccountMetrics:
    """Portfolio-level figures for savings and checking accounts.

    Attributes:
        total_balance: Sum of included balances in the reporting currency.
        savings_balance: Included savings balances.
        checking_balance: Included checking balances.
        account_count: Number of accounts in the input, excluded ones too.
        average_interest_rate: Balance-weighted mean rate in percent.
        expected_yearly_interest: Projected yearly interest.
        currency_code: Reporting currency of every amount above.
    """

    total_balance: Decimal
    savings_balance: Decimal
    checking_balance: Decimal
    account_count: int
    average_interest_rate: Decimal
    expected_yearly_interest: Decimal
    currency_code: str


@dataclass(frozen=True)
class HoldingMetrics:
    """Value and gain figures for a single holding."""

    total_cost: Decimal
    market_value: Decimal
    gain_loss: Decimal
    gain_loss_percent: Decimal


@dataclass(frozen=True)
class InvestmentMetrics:
    """Aggregated figures for a set of holdings."""

    total_value: Decimal
    total_cost: Decimal
    total_gain: Decimal
    total_gain_percent: Decimal
    total_dividends: Decimal


@dataclass(frozen=True)
class LoanMetrics:
    """Aggregated figures for a set of loans."""

    total_principal: Decimal
    total_monthly_payment: Decimal
    average_interest_rate: Decimal
    count: int
    currency_code: str


@dataclass(frozen=True)
class AmortizationRow:
    """One payment period of an annuity loan."""

    period_number: int
    year: int
    month: int
    payment: Decimal
    principal_payment: Decimal
    interest_payment: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class AmortizationSchedule:
    """Annuity payment plan with totals."""

    periodic_payment: Decimal
    total_payments: Decimal
    total_interest: Decimal
    rows: list[AmortizationRow]


@dataclass(frozen=True)
class FinanceOverview:
    """Combined account, investment and loan figures."""

    accounts: AccountMetrics
    investments: InvestmentMetrics
    loans: LoanMetrics
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    currency_code: str


__all__ = [
    "AccountMetrics",
    "HoldingMetrics",
    "InvestmentMetrics",
    "LoanMetrics",
    "AmortizationRow",
    "AmortizationSchedule",
    "FinanceOverview",
]
