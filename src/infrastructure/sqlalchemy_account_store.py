"""SQLAlchemy-backed account store.

Each user owns one row in ``wealth_documents`` holding the JSON document and
a revision counter bumped on every save. Saves made through this store are
pushed to the user's listeners straight away, like the in-memory store.
Writes from other processes are detected by ``poll``: when the stored
revision differs from the last one this store saw, the new document is
pushed to the listeners.
"""

import threading
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.account_store import (
    AccountStoreError,
    AccountStorePort,
    DocumentListener,
    StoredDocument,
)
from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.document_codec import dumps_document, loads_document
from src.infrastructure.document_listeners import DocumentListenerRegistry
from src.infrastructure.logging.logger import get_app_logger

CREATE_DOCUMENTS_SQL = """
CREATE TABLE IF NOT EXISTS wealth_documents (
    user_id TEXT PRIMARY KEY,
    document TEXT NOT NULL,
    revision INTEGER NOT NULL,
    updated_at TEXT NOT NULL
)
"""

SELECT_DOCUMENT_SQL = text(
    """
    SELECT document, revision
    FROM wealth_documents
    WHERE user_id = :user_id
    """
)

SELECT_REVISION_SQL = text(
    """
    SELECT revision
    FROM wealth_documents
    WHERE user_id = :user_id
    """
)

UPDATE_DOCUMENT_SQL = text(
    """
    UPDATE wealth_documents
    SET document = :document,
        revision = revision + 1,
        updated_at = :updated_at
    WHERE user_id = :user_id
    """
)

INSERT_DOCUMENT_SQL = text(
    """
    INSERT INTO wealth_documents (user_id, document, revision, updated_at)
    VALUES (:user_id, :document, 1, :updated_at)
    """
)


class SqlAlchemyAccountStore(AccountStorePort):
    """Account store persisting documents through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the document store engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._listeners = DocumentListenerRegistry()
        self._seen_revisions: dict[str, int | None] = {}
        self._lock = threading.Lock()
        self._table_ready = False

    def load(self, user_id: str) -> StoredDocument | None:
        """Return the user's document, or None when none exists yet.

        Raises:
            AccountStoreError: If the database cannot be read.
            DocumentDecodeError: If the stored document is malformed.
        """
        row = self._fetch_row(user_id)
        if row is None:
            self._remember_revision(user_id, None)
            return None
        self._remember_revision(user_id, row.revision)
        return loads_document(row.document)

    def save(self, user_id: str, document: StoredDocument) -> None:
        """Replace the user's document, bump its revision and notify listeners.

        Raises:
            AccountStoreError: If the database cannot be written.
        """
        params = {
            "user_id": user_id,
            "document": dumps_document(document),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        engine = self._ready_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(UPDATE_DOCUMENT_SQL, params)
                if result.rowcount == 0:
                    conn.execute(INSERT_DOCUMENT_SQL, params)
                revision = conn.execute(
                    SELECT_REVISION_SQL,
                    {"user_id": user_id},
                ).scalar_one()
        except SQLAlchemyError as exc:
            raise AccountStoreError(
                f"Failed to save wealth document for {user_id}"
            ) from exc
        self._remember_revision(user_id, revision)
        self._logger.info(
            f"Stored wealth document for {user_id} at revision {revision}"
        )
        pushed = loads_document(params["document"])
        for listener in self._listeners.live(user_id):
            listener(pushed)

    def subscribe(
        self,
        user_id: str,
        listener: DocumentListener,
    ) -> Callable[[], None]:
        """Register ``listener`` for changes detected by ``poll``."""
        return self._listeners.add(user_id, listener)

    def poll(self, user_id: str) -> bool:
        """Push the stored document when another writer changed it.

        Returns:
            bool: True when listeners were notified.

        Raises:
            AccountStoreError: If the database cannot be read.
        """
        row = self._fetch_row(user_id)
        revision = row.revision if row is not None else None
        with self._lock:
            seen = self._seen_revisions.get(user_id)
        if revision == seen:
            return False
        self._remember_revision(user_id, revision)
        document = loads_document(row.document) if row is not None else None
        self._logger.info(
            f"Remote change detected for {user_id} (revision {revision})"
        )
        for listener in self._listeners.live(user_id):
            listener(document)
        return True

    def _fetch_row(self, user_id: str):
        engine = self._ready_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(
                    SELECT_DOCUMENT_SQL,
                    {"user_id": user_id},
                ).first()
        except SQLAlchemyError as exc:
            raise AccountStoreError(
                f"Failed to read wealth document for {user_id}"
            ) from exc

    def _remember_revision(self, user_id: str, revision: int | None) -> None:
        with self._lock:
            self._seen_revisions[user_id] = revision

    def _ready_engine(self) -> Engine:
        """Return the engine, creating the documents table on first use."""
        engine = self._db_port.get_wealth_engine()
        if self._table_ready:
            return engine
        try:
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_DOCUMENTS_SQL)
        except SQLAlchemyError as exc:
            raise AccountStoreError(
                "Failed to prepare the wealth_documents table"
            ) from exc
        self._table_ready = True
        return engine


__all__ = ["SqlAlchemyAccountStore"]
