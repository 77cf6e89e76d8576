"""Domain models package."""

from .accounts import Account, AccountPerformancePoint, MonthlyEntry
from .wealth import RateTable, WealthChart, WealthSnapshotRow, WealthState

__all__ = [
    "Account",
    "AccountPerformancePoint",
    "MonthlyEntry",
    "RateTable",
    "WealthChart",
    "WealthSnapshotRow",
    "WealthState",
]
