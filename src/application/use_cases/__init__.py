"""Application use cases package."""

from .build_wealth_chart import BuildWealthChartUseCase
from .get_account_performance import GetAccountPerformanceUseCase
from .load_rate_table import LoadRateTableUseCase
from .manage_accounts import ManageAccountsUseCase
from .sync_wealth_document import (
    SyncStartResult,
    SyncWealthDocumentUseCase,
    apply_document,
)

__all__ = [
    "BuildWealthChartUseCase",
    "GetAccountPerformanceUseCase",
    "LoadRateTableUseCase",
    "ManageAccountsUseCase",
    "SyncStartResult",
    "SyncWealthDocumentUseCase",
    "apply_document",
]
