"""Per-user listener registry shared by the account stores.

Bound methods are held through ``weakref.WeakMethod``: a Streamlit session
that ends without calling ``stop()`` is dropped from the registry once its
sync use case is garbage collected. Plain functions are held strongly and
stay registered until unsubscribed.
"""

import inspect
import threading
import weakref
from typing import Callable

from src.application.ports.account_store import DocumentListener

ListenerRef = Callable[[], DocumentListener | None]


def _make_ref(listener: DocumentListener) -> ListenerRef:
    if inspect.ismethod(listener):
        return weakref.WeakMethod(listener)
    return lambda: listener


class DocumentListenerRegistry:
    """Thread-safe mapping of user ids to document listeners."""

    def __init__(self) -> None:
        self._refs: dict[str, list[ListenerRef]] = {}
        self._lock = threading.Lock()

    def add(
        self,
        user_id: str,
        listener: DocumentListener,
    ) -> Callable[[], None]:
        """Register ``listener`` and return a function removing it."""
        ref = _make_ref(listener)
        with self._lock:
            self._refs.setdefault(user_id, []).append(ref)

        def _remove() -> None:
            with self._lock:
                refs = self._refs.get(user_id, [])
                if ref in refs:
                    refs.remove(ref)

        return _remove

    def live(self, user_id: str) -> list[DocumentListener]:
        """Return the live listeners of ``user_id``, pruning dead ones."""
        with self._lock:
            refs = self._refs.get(user_id, [])
            listeners = []
            alive = []
            for ref in refs:
                listener = ref()
                if listener is None:
                    continue
                alive.append(ref)
                listeners.append(listener)
            if refs:
                self._refs[user_id] = alive
        return listeners

    def count(self, user_id: str) -> int:
        """Return how many live listeners ``user_id`` has."""
        return len(self.live(user_id))


__all__ = ["DocumentListenerRegistry"]
