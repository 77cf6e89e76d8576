"""Use case mirroring the dashboard state to the account store.

The sync is a plain subscriber of the state store:

* local changes to accounts or base currency are written to the store once
  the initial document has been read;
* documents pushed by the store are applied as remote events, overwriting
  the local accounts and base currency (last write wins);
* remote events are never written back.

Store failures are logged and dropped; there is no retry.
"""

from dataclasses import dataclass, replace
from typing import Callable

from src.application.ports.account_store import (
    AccountStoreError,
    AccountStorePort,
    StoredDocument,
)
from src.application.state_store import (
    StateEvent,
    WealthStateStore,
    remote_event,
)
from src.domain.models import WealthState
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SyncStartResult:
    """Outcome of the initial document read.

    Attributes:
        found: True when a stored document existed.
        failed: True when the read raised a store error.
    """

    found: bool
    failed: bool = False


def apply_document(
    state: WealthState,
    document: StoredDocument | None,
) -> WealthState:
    """Return ``state`` overwritten by a stored document.

    A missing document keeps the local accounts. The edit session is closed
    when its account no longer exists.
    """
    if document is None:
        return replace(state, loaded=True)
    accounts = document.accounts
    editing = state.editing_account
    if editing is not None and all(acc.name != editing for acc in accounts):
        editing = None
    return replace(
        state,
        accounts=accounts,
        base_currency=document.base_currency or state.base_currency,
        editing_account=editing,
        loaded=True,
    )


class SyncWealthDocumentUseCase:
    """Keep the state store and the account store in step for one user."""

    def __init__(
        self,
        store: WealthStateStore,
        account_store: AccountStorePort,
        user_id: str,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: State store holding the dashboard state.
            account_store: Persistence boundary for the user's document.
            user_id: Identity whose document is synchronized.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._account_store = account_store
        self._user_id = user_id
        self._logger = logger or get_app_logger()
        self._unsubscribers: list[Callable[[], None]] = []

    def start(self) -> SyncStartResult:
        """Read the stored document and start mirroring changes.

        Returns:
            SyncStartResult: Whether a document was found or the read failed.
        """
        self._unsubscribers.append(self._store.subscribe(self._on_state_change))
        try:
            document = self._account_store.load(self._user_id)
        except AccountStoreError as exc:
            self._logger.error(
                f"Error reading wealth document for {self._user_id}: {exc}"
            )
            self._store.dispatch(
                remote_event(
                    "document read failed",
                    lambda state: replace(state, loaded=True),
                )
            )
            return SyncStartResult(found=False, failed=True)

        if document is None:
            self._logger.info(
                f"No wealth data found for {self._user_id}. Starting fresh."
            )
        else:
            self._logger.info(
                f"Loaded {len(document.accounts)} accounts for {self._user_id}"
            )
        self._on_remote_document(document)
        self._unsubscribers.append(
            self._account_store.subscribe(
                self._user_id,
                self._on_remote_document,
            )
        )
        return SyncStartResult(found=document is not None)

    def refresh(self) -> bool:
        """Ask the store to push pending remote changes.

        Returns:
            bool: True when a remote change was applied.
        """
        try:
            return self._account_store.poll(self._user_id)
        except AccountStoreError as exc:
            self._logger.error(
                f"Error polling wealth document for {self._user_id}: {exc}"
            )
            return False

    def stop(self) -> None:
        """Stop mirroring changes in both directions."""
        while self._unsubscribers:
            self._unsubscribers.pop()()

    def _on_remote_document(self, document: StoredDocument | None) -> None:
        self._store.dispatch(
            remote_event(
                "remote document",
                lambda state: apply_document(state, document),
            )
        )

    def _on_state_change(
        self,
        previous: WealthState,
        current: WealthState,
        event: StateEvent,
    ) -> None:
        if event.origin != "local" or not current.loaded:
            return
        if (
            previous.accounts == current.accounts
            and previous.base_currency == current.base_currency
        ):
            return
        document = StoredDocument(
            accounts=current.accounts,
            base_currency=current.base_currency,
        )
        try:
            self._account_store.save(self._user_id, document)
        except AccountStoreError as exc:
            self._logger.error(f"Error saving wealth document: {exc}")
            return
        self._logger.info(
            f"Wealth document saved for {self._user_id} "
            f"({len(current.accounts)} accounts)"
        )


__all__ = [
    "SyncStartResult",
    "SyncWealthDocumentUseCase",
    "apply_document",
]
