"""Domain normalization helpers."""


def normalize_currency(currency: str | None) -> str | None:
    """Normalize currency codes.

    Args:
        currency: Raw currency code from a form or document.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else None


def normalize_account_name(name: str | None) -> str:
    """Trim surrounding whitespace from an account name.

    Args:
        name: Raw account name.

    Returns:
        str: Trimmed name, empty when nothing was provided.
    """
    if not name:
        return ""
    return name.strip()


def build_month_key(year: int | str, month: int | str) -> str:
    """Build a ``YYYY-MM`` key from a year and a 1-based month number."""
    return f"{int(year):04d}-{int(month):02d}"


__all__ = [
    "normalize_currency",
    "normalize_account_name",
    "build_month_key",
]
