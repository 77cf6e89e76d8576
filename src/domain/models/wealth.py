"""Domain models for consolidated wealth aggregates."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping

from src.domain.constants import DEFAULT_BASE_CURRENCY

from .accounts import Account

RateTable = Mapping[str, Mapping[str, Decimal]]


@dataclass(frozen=True)
class WealthSnapshotRow:
    """One month of converted balances across all accounts.

    Attributes:
        month: Period key in ``YYYY-MM`` form.
        values: Converted ending balance per account name, in account order.
        total: Sum of every converted value in the row.
    """

    month: str
    values: Mapping[str, Decimal]
    total: Decimal

    def as_record(self) -> dict[str, str | Decimal]:
        """Return the flat chart-ready representation of the row."""
        record: dict[str, str | Decimal] = {"month": self.month}
        record.update(self.values)
        record["total"] = self.total
        return record


@dataclass(frozen=True)
class WealthChart:
    """Chart payload for the wealth overview."""

    base_currency: str
    account_names: tuple[str, ...]
    rows: tuple[WealthSnapshotRow, ...]
    is_loading: bool = False

    @property
    def is_empty(self) -> bool:
        """Return True when there is nothing to plot."""
        return not self.rows or not self.account_names


@dataclass(frozen=True)
class WealthState:
    """Immutable snapshot of everything the dashboard shows.

    Attributes:
        accounts: Accounts in display (stacking) order.
        base_currency: Currency every chart total is converted into.
        rates: Rate table, or None while it has not been loaded.
        editing_account: Name of the account whose monthly form is open.
        loaded: True once the stored document has been read.
    """

    accounts: tuple[Account, ...] = ()
    base_currency: str = DEFAULT_BASE_CURRENCY
    rates: RateTable | None = None
    editing_account: str | None = None
    loaded: bool = False

    def find_account(self, name: str) -> Account | None:
        """Return the account with exactly ``name`` if present."""
        for account in self.accounts:
            if account.name == name:
                return account
        return None


__all__ = ["RateTable", "WealthSnapshotRow", "WealthChart", "WealthState"]
