"""Domain services package."""

from .accounts import aggregate_accounts
from .change import (
    calculate_allocation_percentage,
    calculate_net_worth,
    calculate_percentage_change,
)
from .fx import (
    ExchangeRateTable,
    convert_between,
    from_reporting_currency,
    to_reporting_currency,
)
from .interest import calculate_effective_rate, calculate_zoned_interest
from .investments import (
    aggregate_investments,
    calculate_annual_yield,
    calculate_holding_metrics,
    find_largest_holding,
    find_top_performer,
)
from .loans import (
    aggregate_loans,
    build_amortization_schedule,
    calculate_annuity_payment,
)
from .normalization import normalize_account_type, normalize_currency

__all__ = [
    "ExchangeRateTable",
    "to_reporting_currency",
    "from_reporting_currency",
    "convert_between",
    "calculate_zoned_interest",
    "calculate_effective_rate",
    "aggregate_accounts",
    "aggregate_investments",
    "calculate_holding_metrics",
    "calculate_annual_yield",
    "find_top_performer",
    "find_largest_holding",
    "aggregate_loans",
    "calculate_annuity_payment",
    "build_amortization_schedule",
    "calculate_percentage_change",
    "calculate_net_worth",
    "calculate_allocation_percentage",
    "normalize_currency",
    "normalize_account_type",
]
