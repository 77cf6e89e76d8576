"""Composition root for wiring infrastructure adapters."""

from src.application.ports.account_store import AccountStorePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.rate_provider import RateTableProviderPort
from src.application.state_store import WealthStateStore
from src.application.use_cases.sync_wealth_document import (
    SyncWealthDocumentUseCase,
)
from src.domain.models import WealthState
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_account_store import InMemoryAccountStore
from src.infrastructure.rate_provider import StaticRateTableProvider
from src.infrastructure.settings import WealthSettings
from src.infrastructure.sqlalchemy_account_store import SqlAlchemyAccountStore


def build_database_adapter(
    settings: WealthSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or WealthSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_account_store(
    settings: WealthSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> AccountStorePort:
    """Return the configured account store."""
    resolved = settings or WealthSettings.from_env()
    if resolved.store_backend == "sqlalchemy":
        if resolved.db_url is None and db_port is None:
            raise RuntimeError(
                "SQLAlchemy account store requires a WEALTH_DB_URL value."
            )
        return SqlAlchemyAccountStore(
            db_port or build_database_adapter(resolved),
            logger=get_app_logger(),
        )
    return InMemoryAccountStore()


def build_rate_provider(
    settings: WealthSettings | None = None,
) -> RateTableProviderPort:
    """Return the exchange-rate provider."""
    resolved = settings or WealthSettings.from_env()
    return StaticRateTableProvider(
        delay_seconds=resolved.rates_delay_seconds,
        logger=get_app_logger(),
    )


def build_state_store(
    settings: WealthSettings | None = None,
) -> WealthStateStore:
    """Return an empty state store using the configured base currency."""
    resolved = settings or WealthSettings.from_env()
    return WealthStateStore(
        WealthState(base_currency=resolved.default_base_currency),
        logger=get_app_logger(),
    )


def build_document_sync(
    store: WealthStateStore,
    account_store: AccountStorePort,
    settings: WealthSettings | None = None,
) -> SyncWealthDocumentUseCase:
    """Return the sync use case for the configured user."""
    resolved = settings or WealthSettings.from_env()
    return SyncWealthDocumentUseCase(
        store,
        account_store,
        resolved.user_id,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_account_store",
    "build_rate_provider",
    "build_state_store",
    "build_document_sync",
]
