"""Tests for the per-user document listener registry."""

import gc

from src.infrastructure.document_listeners import DocumentListenerRegistry


class _Session:
    def __init__(self) -> None:
        self.received = []

    def on_document(self, document) -> None:
        self.received.append(document)


def test_bound_methods_are_dropped_with_their_owner() -> None:
    registry = DocumentListenerRegistry()
    session = _Session()
    registry.add("user-1", session.on_document)
    assert registry.count("user-1") == 1

    del session
    gc.collect()

    assert registry.live("user-1") == []


def test_plain_functions_stay_until_removed() -> None:
    registry = DocumentListenerRegistry()
    received = []

    def _listener(document) -> None:
        received.append(document)

    remove = registry.add("user-1", _listener)
    gc.collect()

    for listener in registry.live("user-1"):
        listener("doc")
    remove()

    assert received == ["doc"]
    assert registry.count("user-1") == 0


def test_remove_only_targets_its_own_listener() -> None:
    registry = DocumentListenerRegistry()
    first = _Session()
    second = _Session()
    remove_first = registry.add("user-1", first.on_document)
    registry.add("user-1", second.on_document)
    registry.add("user-2", first.on_document)

    remove_first()

    assert registry.live("user-1") == [second.on_document]
    assert registry.count("user-2") == 1
