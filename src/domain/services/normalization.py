"""Domain normalization helpers."""


def normalize_currency(currency: str | None) -> str | None:
    """Normalize currency codes.

    Args:
        currency: Raw currency code from a record or settings.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else None


def normalize_account_type(account_type: str | None) -> str:
    """Normalize account types, defaulting to checking like the store.

    Args:
        account_type: Raw account type value from a repository.

    Returns:
        str: Lower-cased account type.
    """
    if not account_type or not account_type.strip():
        return "checking"
    return account_type.strip().lower()


__all__ = ["normalize_currency", "normalize_account_type"]
