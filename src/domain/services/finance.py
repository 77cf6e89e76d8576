"""Domain services for wealth aggregates."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from src.domain.models import (
    Account,
    AccountPerformancePoint,
    RateTable,
    WealthSnapshotRow,
)
from src.domain.services.fx import convert_balance


def collect_months(accounts: Sequence[Account]) -> list[str]:
    """Return the distinct months present in any account, ascending.

    ``YYYY-MM`` keys are fixed width, so string order is chronological.
    """
    months = {
        entry.month
        for account in accounts
        for entry in account.monthly_data
    }
    return sorted(months)


def aggregate_wealth(
    accounts: Sequence[Account],
    base_currency: str,
    rates: RateTable,
    *,
    logger: Logger,
) -> list[WealthSnapshotRow]:
    """Compute the month-by-month, account-by-account wealth matrix.

    An account without an entry for a month contributes exactly 0 to that
    month. Present entries contribute their ending balance converted with
    ``rates[account.currency][base_currency]``, or unconverted when the pair
    is missing from the table.

    Args:
        accounts: Accounts in display order.
        base_currency: Currency every value is converted into.
        rates: Rate table keyed by source then target currency.
        logger: Logger used for warnings.

    Returns:
        list[WealthSnapshotRow]: One row per distinct month, ascending.
    """
    rows: list[WealthSnapshotRow] = []
    for month in collect_months(accounts):
        values: dict[str, Decimal] = {}
        total = Decimal("0")
        for account in accounts:
            entry = account.entry_for(month)
            if entry is None:
                converted = Decimal("0")
            else:
                converted = convert_balance(
                    entry.ending,
                    account.currency,
                    base_currency,
                    rates,
                    logger,
                )
            values[account.name] = converted
            total += converted
        rows.append(WealthSnapshotRow(month=month, values=values, total=total))
    return rows


def compute_account_performance(
    account: Account,
) -> list[AccountPerformancePoint]:
    """Return the ending balance and monthly change series of an account."""
    return [
        AccountPerformancePoint(
            month=entry.month,
            ending=entry.ending,
            change=entry.ending - entry.opening,
        )
        for entry in account.monthly_data
    ]


__all__ = [
    "collect_months",
    "aggregate_wealth",
    "compute_account_performance",
]
