"""Port for reading account, holding and loan snapshots."""

from typing import Protocol

from src.domain.models.records import Account, Holding, Loan, RateZone


class FinanceRepositoryPort(Protocol):
    """Port exposing read access to finance records."""

    def fetch_accounts(self) -> list[Account]:
        """Return savings and checking accounts without zones attached."""

    def fetch_account_zones(self, account_id: str) -> list[RateZone]:
        """Return the rate zones of one account, ordered by lower bound."""

    def fetch_holdings(self) -> list[Holding]:
        """Return investment holdings."""

    def fetch_loans(self) -> list[Loan]:
        """Return loans."""


__all__ = ["FinanceRepositoryPort"]
