"""Tests for the WealthStateStore event queue."""

from dataclasses import replace
import threading
import time
from unittest.mock import MagicMock

import pytest

from src.application.state_store import (
    WealthStateStore,
    local_event,
    remote_event,
)
from src.application.use_cases.manage_accounts import ManageAccountsUseCase
from src.application.use_cases.sync_wealth_document import (
    SyncWealthDocumentUseCase,
)
from src.domain.errors import EmptyNameError
from src.domain.models import Account, WealthState
from src.infrastructure.memory_account_store import InMemoryAccountStore


def _set_currency(code: str):
    return lambda state: replace(state, base_currency=code)


def test_dispatch_replaces_state_and_notifies_listeners() -> None:
    store = WealthStateStore(logger=MagicMock())
    calls = []
    store.subscribe(
        lambda previous, current, event: calls.append(
            (previous.base_currency, current.base_currency, event.origin)
        )
    )

    store.dispatch(local_event("currency", _set_currency("EUR")))

    assert store.state.base_currency == "EUR"
    assert calls == [("USD", "EUR", "local")]


def test_events_queued_by_listeners_apply_in_arrival_order() -> None:
    """A remote push raised during a local event is applied after it."""
    store = WealthStateStore(logger=MagicMock())
    applied = []

    def _listener(previous, current, event):
        applied.append(event.description)
        if event.description == "local":
            store.dispatch(remote_event("remote", _set_currency("GBP")))
            assert store.state.base_currency == "EUR"

    store.subscribe(_listener)

    store.dispatch(local_event("local", _set_currency("EUR")))

    assert applied == ["local", "remote"]
    assert store.state.base_currency == "GBP"


def test_rejected_event_raises_and_keeps_state() -> None:
    store = WealthStateStore(WealthState(base_currency="INR"), logger=MagicMock())
    listener = MagicMock()
    store.subscribe(listener)

    def _reject(state):
        raise EmptyNameError()

    with pytest.raises(EmptyNameError):
        store.dispatch(local_event("reject", _reject))

    assert store.state.base_currency == "INR"
    listener.assert_not_called()


def test_unsubscribe_stops_notifications() -> None:
    store = WealthStateStore(logger=MagicMock())
    listener = MagicMock()
    unsubscribe = store.subscribe(listener)

    unsubscribe()
    store.dispatch(local_event("currency", _set_currency("EUR")))

    listener.assert_not_called()


def test_dispatch_from_many_threads_applies_every_event() -> None:
    store = WealthStateStore(logger=MagicMock())
    barrier = threading.Barrier(8)

    def _worker(worker: int) -> None:
        barrier.wait()
        for index in range(50):
            name = f"acc-{worker}-{index}"
            store.dispatch(
                remote_event(
                    "append",
                    lambda state, name=name: replace(
                        state,
                        accounts=state.accounts + (Account(name, "USD"),),
                    ),
                )
            )

    threads = [
        threading.Thread(target=_worker, args=(worker,), daemon=True)
        for worker in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5)

    assert not any(thread.is_alive() for thread in threads)
    assert len(store.state.accounts) == 400
    assert len({account.name for account in store.state.accounts}) == 400


class _SlowAccountStore(InMemoryAccountStore):
    """Shared store whose writes take long enough for sessions to overlap."""

    def save(self, user_id, document):
        time.sleep(0.2)
        super().save(user_id, document)


def test_two_sessions_saving_at_once_do_not_block_each_other() -> None:
    """Each save pushes into the other session while both are draining."""
    shared = _SlowAccountStore()
    sessions = []
    for _ in range(2):
        store = WealthStateStore(logger=MagicMock())
        sync = SyncWealthDocumentUseCase(
            store,
            shared,
            "user-1",
            logger=MagicMock(),
        )
        sync.start()
        sessions.append(
            (store, sync, ManageAccountsUseCase(store, usage_logger=MagicMock()))
        )
    barrier = threading.Barrier(2)

    def _add(manage: ManageAccountsUseCase, name: str) -> None:
        barrier.wait()
        manage.add_account(name, "USD")

    threads = [
        threading.Thread(target=_add, args=(manage, name), daemon=True)
        for (_, _, manage), name in zip(sessions, ("Monzo", "Vanguard"))
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5)

    assert not any(thread.is_alive() for thread in threads)
    assert shared.load("user-1") is not None
