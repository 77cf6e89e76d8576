"""Pure mutations over the account list and monthly entries.

Every function returns new immutable values; inputs are never modified.
"""

from collections.abc import Sequence

from src.domain.errors import DuplicateNameError, EmptyNameError
from src.domain.models import Account, MonthlyEntry, WealthState
from src.domain.policies import (
    is_duplicate_account_name,
    is_valid_account_name,
)
from src.domain.services.normalization import normalize_account_name
from src.domain.services.validation import (
    parse_balance,
    validate_currency,
    validate_month_key,
)


def add_account(
    accounts: Sequence[Account],
    name: str,
    currency: str,
) -> tuple[Account, ...]:
    """Append a new account with no monthly data.

    Raises:
        EmptyNameError: If the trimmed name is empty.
        DuplicateNameError: If the name collides case-insensitively.
        UnsupportedCurrencyError: If the currency is not supported.
    """
    if not is_valid_account_name(name):
        raise EmptyNameError()
    cleaned = normalize_account_name(name)
    if is_duplicate_account_name(cleaned, (acc.name for acc in accounts)):
        raise DuplicateNameError(cleaned)
    account = Account(name=cleaned, currency=validate_currency(currency))
    return (*accounts, account)


def remove_account(
    accounts: Sequence[Account],
    name: str,
) -> tuple[Account, ...]:
    """Return the accounts without the one named exactly ``name``."""
    return tuple(account for account in accounts if account.name != name)


def upsert_entry(
    monthly_data: Sequence[MonthlyEntry],
    entry: MonthlyEntry,
) -> tuple[MonthlyEntry, ...]:
    """Replace the entry for ``entry.month`` or insert it, sorted by month."""
    updated = [
        entry if existing.month == entry.month else existing
        for existing in monthly_data
    ]
    if not any(existing.month == entry.month for existing in monthly_data):
        updated.append(entry)
    return tuple(sorted(updated, key=lambda item: item.month))


def upsert_monthly_entry(
    accounts: Sequence[Account],
    account_name: str,
    month: str,
    opening,
    ending,
) -> tuple[Account, ...]:
    """Record raw opening/ending input for one account and month.

    Raises:
        ValidationError: If either balance is missing or non-numeric, or
            the month key is malformed.
    """
    entry = MonthlyEntry(
        month=validate_month_key(month),
        opening=parse_balance(opening, "opening"),
        ending=parse_balance(ending, "ending"),
    )
    return tuple(
        Account(
            name=account.name,
            currency=account.currency,
            monthly_data=upsert_entry(account.monthly_data, entry),
        )
        if account.name == account_name
        else account
        for account in accounts
    )


def without_account(state: WealthState, name: str) -> WealthState:
    """Return ``state`` minus the named account and its edit session."""
    editing = state.editing_account
    if editing == name:
        editing = None
    return WealthState(
        accounts=remove_account(state.accounts, name),
        base_currency=state.base_currency,
        rates=state.rates,
        editing_account=editing,
        loaded=state.loaded,
    )


__all__ = [
    "add_account",
    "remove_account",
    "upsert_entry",
    "upsert_monthly_entry",
    "without_account",
]
