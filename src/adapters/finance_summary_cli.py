"""CLI adapter printing the finance metrics overview.

This module wires the GetFinanceOverviewUseCase to the configured database
and prints account, investment and loan figures in the reporting currency.
"""

from decimal import Decimal
import sys

from sqlalchemy.exc import SQLAlchemyError

from src.domain.exceptions import FinanceEngineError
from src.infrastructure.container import build_finance_overview_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


CENT = Decimal("0.01")


def _fmt(value: Decimal) -> str:
    return str(value.quantize(CENT))


def main() -> int:
    """Run the overview use case and print the results."""
    logger = get_app_logger()
    get_usage_logger().info("finance_summary_cli invoked")
    try:
        use_case = build_finance_overview_use_case()
        overview = use_case.execute()
    except (RuntimeError, SQLAlchemyError, FinanceEngineError) as exc:
        logger.error(str(exc))
        return 1

    accounts = overview.accounts
    investments = overview.investments
    loans = overview.loans
    currency = overview.currency_code
    print(f"Finance overview ({currency})")
    print(
        f"Accounts: count={accounts.account_count}, "
        f"total={_fmt(accounts.total_balance)}, "
        f"savings={_fmt(accounts.savings_balance)}, "
        f"checking={_fmt(accounts.checking_balance)}, "
        f"avg_rate={_fmt(accounts.average_interest_rate)}%, "
        f"yearly_interest={_fmt(accounts.expected_yearly_interest)}"
    )
    print(
        f"Investments: value={_fmt(investments.total_value)}, "
        f"cost={_fmt(investments.total_cost)}, "
        f"gain={_fmt(investments.total_gain)} "
        f"({_fmt(investments.total_gain_percent)}%), "
        f"dividends={_fmt(investments.total_dividends)}"
    )
    print(
        f"Loans: count={loans.count}, "
        f"principal={_fmt(loans.total_principal)}, "
        f"monthly_payment={_fmt(loans.total_monthly_payment)}, "
        f"avg_rate={_fmt(loans.average_interest_rate)}%"
    )
    print(
        f"Net worth: assets={_fmt(overview.total_assets)}, "
        f"liabilities={_fmt(overview.total_liabilities)}, "
        f"net={_fmt(overview.net_worth)}"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
