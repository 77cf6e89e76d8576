"""Encoding of wealth documents for the account store.

Stored shape::

    {
        "accounts": [
            {"name": "Vanguard", "currency": "USD",
             "monthlyData": "[{\"month\": \"2024-01\", ...}]"},
        ],
        "baseCurrency": "USD",
    }

Each account's monthly data crosses the boundary as an opaque JSON string.
Balances are written as decimal strings; numbers are accepted on read.
"""

import json
from decimal import InvalidOperation
from typing import Any

from src.application.ports.account_store import (
    DocumentDecodeError,
    StoredDocument,
)
from src.domain.errors import UnsupportedCurrencyError
from src.domain.models import Account, MonthlyEntry
from src.domain.services.accounts import upsert_entry
from src.domain.services.validation import validate_currency
from src.utils.decimal_utils import coerce_decimal


def encode_monthly_data(entries) -> str:
    """Serialize monthly entries into the opaque blob."""
    return json.dumps(
        [
            {
                "month": entry.month,
                "opening": str(entry.opening),
                "ending": str(entry.ending),
            }
            for entry in entries
        ]
    )


def decode_monthly_data(blob: str | list) -> tuple[MonthlyEntry, ...]:
    """Parse the opaque blob back into sorted, de-duplicated entries.

    Raises:
        DocumentDecodeError: If the blob is not a list of entries.
    """
    try:
        raw_entries = json.loads(blob) if isinstance(blob, str) else blob
    except json.JSONDecodeError as exc:
        raise DocumentDecodeError(f"Invalid monthlyData blob: {exc}") from exc
    if not isinstance(raw_entries, list):
        raise DocumentDecodeError("monthlyData must decode to a list")

    entries: tuple[MonthlyEntry, ...] = ()
    for raw in raw_entries:
        try:
            entry = MonthlyEntry(
                month=str(raw["month"]),
                opening=coerce_decimal(raw.get("opening")),
                ending=coerce_decimal(raw.get("ending")),
            )
        except (KeyError, TypeError, AttributeError, InvalidOperation) as exc:
            raise DocumentDecodeError(
                f"Invalid monthly entry: {raw!r}"
            ) from exc
        entries = upsert_entry(entries, entry)
    return entries


def encode_document(document: StoredDocument) -> dict[str, Any]:
    """Return the store representation of ``document``."""
    return {
        "accounts": [
            {
                "name": account.name,
                "currency": account.currency,
                "monthlyData": encode_monthly_data(account.monthly_data),
            }
            for account in document.accounts
        ],
        "baseCurrency": document.base_currency,
    }


def _decode_currency(raw: Any, field: str) -> str:
    try:
        return validate_currency(str(raw))
    except UnsupportedCurrencyError as exc:
        raise DocumentDecodeError(
            f"Unsupported currency in {field}: {raw!r}"
        ) from exc


def decode_document(payload: dict[str, Any]) -> StoredDocument:
    """Return the document described by a stored payload.

    Currency codes are upper-cased, so ``"usd"`` reads as ``"USD"``.

    Raises:
        DocumentDecodeError: If the payload does not have the stored shape
            or names a currency that is not supported.
    """
    if not isinstance(payload, dict):
        raise DocumentDecodeError("Wealth document must be a mapping")
    raw_accounts = payload.get("accounts") or []
    if not isinstance(raw_accounts, list):
        raise DocumentDecodeError("accounts must be a list")

    accounts = []
    for raw in raw_accounts:
        if not isinstance(raw, dict) or not raw.get("name"):
            raise DocumentDecodeError(f"Invalid account: {raw!r}")
        accounts.append(
            Account(
                name=str(raw["name"]),
                currency=_decode_currency(
                    raw.get("currency") or "USD",
                    f"account {raw['name']!r}",
                ),
                monthly_data=decode_monthly_data(raw.get("monthlyData") or "[]"),
            )
        )
    base_currency = payload.get("baseCurrency")
    return StoredDocument(
        accounts=tuple(accounts),
        base_currency=(
            _decode_currency(base_currency, "baseCurrency")
            if base_currency
            else None
        ),
    )


def dumps_document(document: StoredDocument) -> str:
    """Serialize ``document`` to JSON text."""
    return json.dumps(encode_document(document))


def loads_document(text: str) -> StoredDocument:
    """Deserialize JSON text into a document.

    Raises:
        DocumentDecodeError: If the text is not valid JSON.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentDecodeError(f"Invalid wealth document: {exc}") from exc
    return decode_document(payload)


__all__ = [
    "encode_monthly_data",
    "decode_monthly_data",
    "encode_document",
    "decode_document",
    "dumps_document",
    "loads_document",
]
