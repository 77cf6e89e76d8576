"""Domain policies package."""

from .account_names import (
    account_name_key,
    is_duplicate_account_name,
    is_valid_account_name,
)

__all__ = [
    "account_name_key",
    "is_valid_account_name",
    "is_duplicate_account_name",
]
