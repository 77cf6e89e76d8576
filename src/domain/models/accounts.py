"""Domain models for tracked accounts and their monthly balances."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class MonthlyEntry:
    """Opening and ending balance of an account for one calendar month.

    Attributes:
        month: Period key in ``YYYY-MM`` form.
        opening: Balance at period start, in the account currency.
        ending: Balance at period end, in the account currency.
    """

    month: str
    opening: Decimal
    ending: Decimal


@dataclass(frozen=True)
class Account:
    """User-defined account holding balances in a single currency.

    Attributes:
        name: Display name, unique case-insensitively within a user's set.
        currency: Supported currency code of the balances.
        monthly_data: Entries sorted ascending by month, one per month.
    """

    name: str
    currency: str
    monthly_data: tuple[MonthlyEntry, ...] = field(default_factory=tuple)

    def entry_for(self, month: str) -> MonthlyEntry | None:
        """Return the entry recorded for ``month`` if any."""
        for entry in self.monthly_data:
            if entry.month == month:
                return entry
        return None


@dataclass(frozen=True)
class AccountPerformancePoint:
    """Ending balance and monthly change of a single account."""

    month: str
    ending: Decimal
    change: Decimal


__all__ = ["MonthlyEntry", "Account", "AccountPerformancePoint"]
