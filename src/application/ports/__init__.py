"""Application ports package."""

from .account_store import (
    AccountStoreError,
    AccountStorePort,
    DocumentDecodeError,
    DocumentListener,
    StoredDocument,
)
from .database import DatabaseEnginePort
from .rate_provider import RateProviderError, RateTableProviderPort

__all__ = [
    "AccountStoreError",
    "AccountStorePort",
    "DocumentDecodeError",
    "DocumentListener",
    "StoredDocument",
    "DatabaseEnginePort",
    "RateProviderError",
    "RateTableProviderPort",
]
