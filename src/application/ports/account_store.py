"""Port for persisting a user's accounts and base currency."""

from dataclasses import dataclass
from typing import Callable, Protocol

from src.domain.models import Account


class AccountStoreError(RuntimeError):
    """Raised when the account store cannot be read or written."""


class DocumentDecodeError(AccountStoreError):
    """Raised when a stored document cannot be decoded."""


@dataclass(frozen=True)
class StoredDocument:
    """Decoded content of a user's wealth document.

    Attributes:
        accounts: Stored accounts in display order.
        base_currency: Stored base currency, None when never saved.
    """

    accounts: tuple[Account, ...]
    base_currency: str | None


DocumentListener = Callable[[StoredDocument | None], None]


class AccountStorePort(Protocol):
    """Port exposing read, write and change notification for documents."""

    def load(self, user_id: str) -> StoredDocument | None:
        """Return the user's document, or None when none exists yet."""

    def save(self, user_id: str, document: StoredDocument) -> None:
        """Replace the user's document."""

    def subscribe(
        self,
        user_id: str,
        listener: DocumentListener,
    ) -> Callable[[], None]:
        """Register ``listener`` for remote changes and return an unsubscriber."""

    def poll(self, user_id: str) -> bool:
        """Push pending remote changes to listeners; return True if any."""


__all__ = [
    "AccountStoreError",
    "DocumentDecodeError",
    "StoredDocument",
    "DocumentListener",
    "AccountStorePort",
]
