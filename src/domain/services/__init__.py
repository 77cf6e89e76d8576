"""Domain services package."""

from .accounts import (
    add_account,
    remove_account,
    upsert_entry,
    upsert_monthly_entry,
    without_account,
)
from .finance import (
    aggregate_wealth,
    collect_months,
    compute_account_performance,
)
from .fx import build_rate_table, conversion_factor, convert_balance
from .normalization import (
    build_month_key,
    normalize_account_name,
    normalize_currency,
)
from .validation import parse_balance, validate_currency, validate_month_key

__all__ = [
    "add_account",
    "remove_account",
    "upsert_entry",
    "upsert_monthly_entry",
    "without_account",
    "aggregate_wealth",
    "collect_months",
    "compute_account_performance",
    "build_rate_table",
    "conversion_factor",
    "convert_balance",
    "build_month_key",
    "normalize_account_name",
    "normalize_currency",
    "parse_balance",
    "validate_currency",
    "validate_month_key",
]
