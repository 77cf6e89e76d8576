"""Naming policies for user-defined accounts."""

from collections.abc import Iterable


def account_name_key(name: str | None) -> str:
    """Return the comparison key used for name uniqueness."""
    return (name or "").strip().lower()


def is_valid_account_name(name: str | None) -> bool:
    """Return True when the trimmed name is not empty.

    Args:
        name: Account name to evaluate.

    Returns:
        bool: True when the name can be used for a new account.
    """
    return bool(account_name_key(name))


def is_duplicate_account_name(name: str, existing: Iterable[str]) -> bool:
    """Return True when ``name`` collides case-insensitively with ``existing``."""
    key = account_name_key(name)
    return any(account_name_key(other) == key for other in existing)


__all__ = [
    "account_name_key",
    "is_valid_account_name",
    "is_duplicate_account_name",
]
