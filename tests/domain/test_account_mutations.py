"""Tests for account and monthly entry mutations."""

from decimal import Decimal

import pytest

from src.domain.errors import (
    DuplicateNameError,
    EmptyNameError,
    UnsupportedCurrencyError,
    ValidationError,
)
from src.domain.models import Account, MonthlyEntry, WealthState
from src.domain.services.accounts import (
    add_account,
    remove_account,
    upsert_monthly_entry,
    without_account,
)


def _vanguard() -> Account:
    return Account(
        name="vanguard",
        currency="USD",
        monthly_data=(
            MonthlyEntry("2024-01", Decimal("100"), Decimal("110")),
            MonthlyEntry("2024-03", Decimal("120"), Decimal("130")),
        ),
    )


def test_add_account_appends_trimmed_name_with_empty_data() -> None:
    accounts = add_account((), "  eToro ", "eur")

    assert accounts == (Account(name="eToro", currency="EUR"),)


def test_add_account_rejects_case_insensitive_duplicate() -> None:
    """Adding Vanguard when vanguard exists fails and changes nothing."""
    existing = (_vanguard(),)

    with pytest.raises(DuplicateNameError):
        add_account(existing, "Vanguard", "USD")

    assert existing == (_vanguard(),)


def test_add_account_rejects_blank_name() -> None:
    with pytest.raises(EmptyNameError):
        add_account((), "   ", "USD")


def test_add_account_rejects_unknown_currency() -> None:
    with pytest.raises(UnsupportedCurrencyError):
        add_account((), "Wallet", "BTC")


def test_remove_account_matches_exact_name() -> None:
    accounts = (_vanguard(), Account(name="eToro", currency="EUR"))

    assert remove_account(accounts, "eToro") == (_vanguard(),)
    assert remove_account(accounts, "missing") == accounts


def test_without_account_clears_matching_edit_session() -> None:
    state = WealthState(accounts=(_vanguard(),), editing_account="vanguard")

    updated = without_account(state, "vanguard")

    assert updated.accounts == ()
    assert updated.editing_account is None


def test_without_account_keeps_other_edit_session() -> None:
    state = WealthState(
        accounts=(_vanguard(), Account(name="eToro", currency="EUR")),
        editing_account="eToro",
    )

    assert without_account(state, "vanguard").editing_account == "eToro"


def test_upsert_existing_month_replaces_in_place() -> None:
    """Upserting a known month keeps the sequence length."""
    accounts = upsert_monthly_entry(
        (_vanguard(),), "vanguard", "2024-03", "125", "140"
    )

    data = accounts[0].monthly_data
    assert len(data) == 2
    assert data[1] == MonthlyEntry("2024-03", Decimal("125"), Decimal("140"))


def test_upsert_new_month_inserts_and_keeps_order() -> None:
    """Upserting a new month grows the sequence and keeps it sorted."""
    accounts = upsert_monthly_entry(
        (_vanguard(),), "vanguard", "2024-02", "110", "120"
    )

    months = [entry.month for entry in accounts[0].monthly_data]
    assert months == ["2024-01", "2024-02", "2024-03"]


def test_upsert_leaves_other_accounts_untouched() -> None:
    other = Account(name="eToro", currency="EUR")

    accounts = upsert_monthly_entry(
        (_vanguard(), other), "vanguard", "2024-02", "1", "2"
    )

    assert accounts[1] is other


@pytest.mark.parametrize(
    ("opening", "ending"),
    [("", "10"), ("10", None), ("abc", "10"), ("10", "nan")],
)
def test_upsert_rejects_missing_or_non_numeric_balances(opening, ending):
    with pytest.raises(ValidationError):
        upsert_monthly_entry(
            (_vanguard(),), "vanguard", "2024-02", opening, ending
        )


def test_upsert_rejects_malformed_month() -> None:
    with pytest.raises(ValidationError):
        upsert_monthly_entry((_vanguard(),), "vanguard", "2024-13", "1", "2")
