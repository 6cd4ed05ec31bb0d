"""Domain exceptions for the finance metrics engine."""


class FinanceEngineError(Exception):
    """Base exception for the domain layer."""


class UnsupportedCurrencyError(FinanceEngineError):
    """Raised when a currency is missing from the exchange rate table.

    Attributes:
        currency: The currency code that could not be converted.
    """

    def __init__(self, currency: str) -> None:
        super().__init__(f"Unsupported currency: {currency}")
        self.currency = currency


__all__ = ["FinanceEngineError", "UnsupportedCurrencyError"]
