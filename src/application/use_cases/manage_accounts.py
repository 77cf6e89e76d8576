"""Use case applying user edits to accounts and monthly data."""

from dataclasses import replace

from src.application.state_store import WealthStateStore, local_event
from src.domain.models import WealthState
from src.domain.services.accounts import (
    add_account,
    upsert_monthly_entry,
    without_account,
)
from src.domain.services.normalization import normalize_account_name
from src.domain.services.validation import validate_currency
from src.infrastructure.logging.logger import get_usage_logger


class ManageAccountsUseCase:
    """Translate account-management actions into state store events.

    Domain errors raised by the reducers (``EmptyNameError``,
    ``DuplicateNameError``, ``ValidationError``,
    ``UnsupportedCurrencyError``) propagate to the caller and leave the
    state unchanged.
    """

    def __init__(self, store: WealthStateStore, usage_logger=None) -> None:
        """Initialize the use case.

        Args:
            store: State store receiving the events.
            usage_logger: Optional logger recording user actions.
        """
        self._store = store
        self._usage_logger = usage_logger or get_usage_logger()

    def add_account(self, name: str, currency: str) -> None:
        """Append a new account with no monthly data."""

        def _reducer(state: WealthState) -> WealthState:
            return replace(
                state,
                accounts=add_account(state.accounts, name, currency),
            )

        self._store.dispatch(local_event("add account", _reducer))
        self._usage_logger.info(
            f"Account added: {normalize_account_name(name)} ({currency})"
        )

    def remove_account(self, name: str) -> None:
        """Remove the named account and close its edit session."""
        self._store.dispatch(
            local_event(
                "remove account",
                lambda state: without_account(state, name),
            )
        )
        self._usage_logger.info(f"Account removed: {name}")

    def start_editing(self, name: str) -> None:
        """Open the monthly data form for the named account."""

        def _reducer(state: WealthState) -> WealthState:
            if state.find_account(name) is None:
                return state
            return replace(state, editing_account=name)

        self._store.dispatch(local_event("start editing", _reducer))

    def stop_editing(self) -> None:
        """Close the monthly data form."""
        self._store.dispatch(
            local_event(
                "stop editing",
                lambda state: replace(state, editing_account=None),
            )
        )

    def save_monthly_entry(
        self,
        account_name: str,
        month: str,
        opening,
        ending,
    ) -> None:
        """Insert or replace the entry of ``account_name`` for ``month``.

        Args:
            account_name: Exact name of the account to update.
            month: Period key in ``YYYY-MM`` form.
            opening: Raw opening balance input.
            ending: Raw ending balance input.
        """

        def _reducer(state: WealthState) -> WealthState:
            return replace(
                state,
                accounts=upsert_monthly_entry(
                    state.accounts,
                    account_name,
                    month,
                    opening,
                    ending,
                ),
            )

        self._store.dispatch(local_event("save monthly entry", _reducer))
        self._usage_logger.info(
            f"Monthly entry saved: {account_name} {month}"
        )

    def set_base_currency(self, currency: str) -> None:
        """Change the currency every chart is converted into."""

        def _reducer(state: WealthState) -> WealthState:
            return replace(state, base_currency=validate_currency(currency))

        self._store.dispatch(local_event("set base currency", _reducer))
        self._usage_logger.info(f"Base currency changed to {currency}")


__all__ = ["ManageAccountsUseCase"]
