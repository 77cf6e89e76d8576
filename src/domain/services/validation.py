"""Domain validation helpers."""

import re
from decimal import Decimal, InvalidOperation

from src.domain.constants import SUPPORTED_CURRENCIES
from src.domain.errors import UnsupportedCurrencyError, ValidationError
from src.domain.services.normalization import normalize_currency

_MONTH_KEY = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def validate_month_key(month: str | None) -> str:
    """Return ``month`` when it is a valid ``YYYY-MM`` key.

    Args:
        month: Candidate period key.

    Returns:
        str: The validated key.

    Raises:
        ValidationError: If the key is missing or malformed.
    """
    candidate = (month or "").strip()
    if not _MONTH_KEY.match(candidate):
        raise ValidationError(
            f"Invalid month '{month}'. Expected format YYYY-MM."
        )
    return candidate


def parse_balance(raw_value, label: str) -> Decimal:
    """Parse a balance typed by the user.

    Args:
        raw_value: Raw input (string, int, float, or Decimal).
        label: Field name used in the error message.

    Returns:
        Decimal: Parsed finite balance.

    Raises:
        ValidationError: If the value is missing or non-numeric.
    """
    if raw_value is None or isinstance(raw_value, bool):
        raise ValidationError(f"Please fill in the {label} balance.")
    text = str(raw_value).strip()
    if not text:
        raise ValidationError(f"Please fill in the {label} balance.")
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise ValidationError(
            f"The {label} balance must be a number, got '{text}'."
        ) from exc
    if not value.is_finite():
        raise ValidationError(f"The {label} balance must be a finite number.")
    return value


def validate_currency(currency: str | None) -> str:
    """Return the normalized code when it is supported.

    Raises:
        UnsupportedCurrencyError: If the code is unknown.
    """
    normalized = normalize_currency(currency)
    if normalized not in SUPPORTED_CURRENCIES:
        raise UnsupportedCurrencyError(currency)
    return normalized


__all__ = ["validate_month_key", "parse_balance", "validate_currency"]
