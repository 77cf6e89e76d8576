"""In-memory account store used for local sessions and tests."""

import threading
from typing import Callable

from src.application.ports.account_store import (
    AccountStorePort,
    DocumentListener,
    StoredDocument,
)
from src.infrastructure.document_codec import decode_document, encode_document
from src.infrastructure.document_listeners import DocumentListenerRegistry


class InMemoryAccountStore(AccountStorePort):
    """Account store keeping encoded documents in a dictionary.

    Every save pushes the new document to the user's listeners, the saver
    included, mirroring document stores with snapshot listeners. Listeners
    are called after the store lock is released.
    """

    def __init__(self) -> None:
        self._documents: dict[str, dict] = {}
        self._listeners = DocumentListenerRegistry()
        self._lock = threading.Lock()

    def load(self, user_id: str) -> StoredDocument | None:
        """Return the user's document, or None when none exists yet."""
        with self._lock:
            payload = self._documents.get(user_id)
        if payload is None:
            return None
        return decode_document(payload)

    def save(self, user_id: str, document: StoredDocument) -> None:
        """Replace the user's document and notify listeners."""
        payload = encode_document(document)
        with self._lock:
            self._documents[user_id] = payload
        decoded = decode_document(payload)
        for listener in self._listeners.live(user_id):
            listener(decoded)

    def subscribe(
        self,
        user_id: str,
        listener: DocumentListener,
    ) -> Callable[[], None]:
        """Register ``listener`` for saves of ``user_id``."""
        return self._listeners.add(user_id, listener)

    def poll(self, user_id: str) -> bool:
        """Saves are pushed immediately, so nothing is ever pending."""
        return False

    def listener_count(self, user_id: str) -> int:
        """Return how many live listeners ``user_id`` has."""
        return self._listeners.count(user_id)


__all__ = ["InMemoryAccountStore"]
