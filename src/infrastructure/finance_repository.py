"""SQLAlchemy-backed repository for finance records."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.records import Account, Holding, Loan, RateZone
from src.domain.services.fx import DEFAULT_REPORTING_CURRENCY
from src.domain.services.normalization import (
    normalize_account_type,
    normalize_currency,
)
from src.utils.decimal_utils import coerce_decimal


SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, name, account_type, currency, balance, interest_rate,
           has_zone_designation, exclude_from_balance
    FROM bank_accounts
    ORDER BY name
    """
)

SELECT_ZONES_SQL = text(
    """
    SELECT from_amount, to_amount, interest_rate
    FROM savings_account_zones
    WHERE savings_account_id = :account_id
    ORDER BY from_amount
    """
)

SELECT_HOLDINGS_SQL = text(
    """
    SELECT si.id, si.ticker, si.quantity, si.average_price,
           sd.original_price AS current_price,
           sd.trailing_dividend_rate AS dividend_yield
    FROM stock_investments si
    LEFT JOIN stock_data sd ON sd.ticker = si.ticker
    ORDER BY si.ticker
    """
)

SELECT_LOANS_SQL = text(
    """
    SELECT id, name, currency, principal, monthly_payment, interest_rate
    FROM loans
    ORDER BY name
    """
)


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository reading the local finance store through SQLAlchemy.

    Numeric columns are stored as text; they are normalized to Decimal and
    missing currencies default to the store's base currency.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        default_currency: str = DEFAULT_REPORTING_CURRENCY,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            default_currency: Currency assumed for rows without one.
        """
        self._db_port = db_port
        self._default_currency = default_currency

    def fetch_accounts(self) -> list[Account]:
        rows = self._fetch_all(SELECT_ACCOUNTS_SQL)
        return [
            Account(
                id=row.id,
                name=row.name or "",
                account_type=normalize_account_type(row.account_type),
                currency=self._currency(row.currency),
                balance=coerce_decimal(row.balance),
                interest_rate=(
                    coerce_decimal(row.interest_rate)
                    if row.interest_rate not in (None, "")
                    else None
                ),
                has_zone_designation=bool(row.has_zone_designation),
                exclude_from_balance=bool(row.exclude_from_balance),
            )
            for row in rows
        ]

    def fetch_account_zones(self, account_id: str) -> list[RateZone]:
        rows = self._fetch_all(SELECT_ZONES_SQL, {"account_id": account_id})
        return [
            RateZone.from_raw(
                lower_bound=coerce_decimal(row.from_amount),
                upper_bound=(
                    coerce_decimal(row.to_amount)
                    if row.to_amount not in (None, "")
                    else None
                ),
                annual_rate_percent=coerce_decimal(row.interest_rate),
            )
            for row in rows
        ]

    def fetch_holdings(self) -> list[Holding]:
        rows = self._fetch_all(SELECT_HOLDINGS_SQL)
        return [
            Holding(
                id=row.id,
                ticker=row.ticker or "",
                quantity=coerce_decimal(row.quantity),
                average_price=coerce_decimal(row.average_price),
                current_price=coerce_decimal(row.current_price),
                dividend_yield=(
                    coerce_decimal(row.dividend_yield)
                    if row.dividend_yield not in (None, "")
                    else None
                ),
            )
            for row in rows
        ]

    def fetch_loans(self) -> list[Loan]:
        rows = self._fetch_all(SELECT_LOANS_SQL)
        return [
            Loan(
                id=row.id,
                name=row.name or "",
                currency=self._currency(row.currency),
                principal=coerce_decimal(row.principal),
                monthly_payment=coerce_decimal(row.monthly_payment),
                interest_rate=coerce_decimal(row.interest_rate),
            )
            for row in rows
        ]

    def _fetch_all(self, query, params: dict | None = None):
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            return conn.execute(query, params or {}).all()

    def _currency(self, raw: str | None) -> str:
        return normalize_currency(raw) or self._default_currency


__all__ = ["SqlAlchemyFinanceRepository"]
