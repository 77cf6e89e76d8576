"""Port for retrieving the currency rate table."""

from typing import Protocol

from src.domain.models import RateTable


class RateProviderError(RuntimeError):
    """Raised when the rate table cannot be fetched."""


class RateTableProviderPort(Protocol):
    """Port exposing a complete currency-to-currency rate table."""

    def get_rates(self) -> RateTable:
        """Return factors keyed by source then target currency."""


__all__ = ["RateProviderError", "RateTableProviderPort"]
