"""Single holder of the dashboard state.

Local mutations and remote document snapshots are both ``StateEvent``
instances feeding one queue. Events are applied in arrival order and each
one replaces the immutable ``WealthState`` wholesale. Remote snapshots simply
overwrite whatever the local state holds: last write wins.
"""

from collections import deque
from dataclasses import dataclass
import threading
from typing import Callable, Literal

from src.domain.errors import WealthError
from src.domain.models import WealthState
from src.infrastructure.logging.logger import get_app_logger

EventOrigin = Literal["local", "remote"]
Reducer = Callable[[WealthState], WealthState]
StateListener = Callable[[WealthState, WealthState, "StateEvent"], None]


@dataclass(frozen=True)
class StateEvent:
    """A state transition waiting in the store queue.

    Attributes:
        origin: ``local`` for user actions, ``remote`` for store pushes.
        description: Short label used in logs.
        reducer: Pure function producing the next state.
    """

    origin: EventOrigin
    description: str
    reducer: Reducer


def local_event(description: str, reducer: Reducer) -> StateEvent:
    """Build an event originating from a user action."""
    return StateEvent(origin="local", description=description, reducer=reducer)


def remote_event(description: str, reducer: Reducer) -> StateEvent:
    """Build an event originating from the account store."""
    return StateEvent(origin="remote", description=description, reducer=reducer)


class WealthStateStore:
    """Apply queued state events and notify subscribers."""

    def __init__(
        self,
        initial_state: WealthState | None = None,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            initial_state: Optional starting state.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._state = initial_state or WealthState()
        self._logger = logger or get_app_logger()
        self._queue: deque[StateEvent] = deque()
        self._listeners: list[StateListener] = []
        self._lock = threading.Lock()
        self._draining = False

    @property
    def state(self) -> WealthState:
        """Return the current state."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with (previous, current, event).

        Returns:
            Callable[[], None]: Function removing the listener.
        """
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def dispatch(self, event: StateEvent) -> None:
        """Queue ``event`` and drain the queue unless already draining.

        Only the queue is touched under the lock. Reducers and listeners run
        outside it, so a listener may push into another store whose own
        drain is pushing back into this one. Events queued by listeners (or
        by other threads) while a drain is in progress are applied by that
        drain, after the current event.

        Raises:
            WealthError: If ``event`` was applied by this call and its
                reducer rejected the transition. The state is unchanged.
        """
        with self._lock:
            self._queue.append(event)
            if self._draining:
                return
            self._draining = True
        own_error: WealthError | None = None
        try:
            while True:
                with self._lock:
                    if not self._queue:
                        self._draining = False
                        break
                    current = self._queue.popleft()
                error = self._apply(current)
                if error is None:
                    continue
                if current is event:
                    own_error = error
                else:
                    self._logger.warning(
                        f"Rejected queued {current.origin} event "
                        f"'{current.description}': {error}"
                    )
        except BaseException:
            with self._lock:
                self._draining = False
            raise
        if own_error is not None:
            raise own_error

    def _apply(self, event: StateEvent) -> WealthError | None:
        previous = self._state
        try:
            updated = event.reducer(previous)
        except WealthError as exc:
            return exc
        self._state = updated
        self._logger.debug(
            f"Applied {event.origin} event '{event.description}'"
        )
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(previous, updated, event)
        return None


__all__ = [
    "StateEvent",
    "WealthStateStore",
    "local_event",
    "remote_event",
]
