"""Domain package for business rules and core models."""

from .constants import (
    CURRENCY_SYMBOLS,
    DEFAULT_BASE_CURRENCY,
    MONTH_NAMES,
    SUPPORTED_CURRENCIES,
)
from .errors import (
    DuplicateNameError,
    EmptyNameError,
    UnsupportedCurrencyError,
    ValidationError,
    WealthError,
)
from .models import (
    Account,
    AccountPerformancePoint,
    MonthlyEntry,
    RateTable,
    WealthChart,
    WealthSnapshotRow,
    WealthState,
)
from .policies import is_duplicate_account_name, is_valid_account_name
from .services import (
    add_account,
    aggregate_wealth,
    compute_account_performance,
    convert_balance,
    remove_account,
    upsert_monthly_entry,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "DEFAULT_BASE_CURRENCY",
    "MONTH_NAMES",
    "SUPPORTED_CURRENCIES",
    "DuplicateNameError",
    "EmptyNameError",
    "UnsupportedCurrencyError",
    "ValidationError",
    "WealthError",
    "Account",
    "AccountPerformancePoint",
    "MonthlyEntry",
    "RateTable",
    "WealthChart",
    "WealthSnapshotRow",
    "WealthState",
    "is_duplicate_account_name",
    "is_valid_account_name",
    "add_account",
    "aggregate_wealth",
    "compute_account_performance",
    "convert_balance",
    "remove_account",
    "upsert_monthly_entry",
]
