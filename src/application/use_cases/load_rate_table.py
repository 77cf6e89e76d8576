"""Use case fetching the rate table once and publishing it to the state."""

from dataclasses import replace
from decimal import InvalidOperation

from src.application.ports.rate_provider import (
    RateProviderError,
    RateTableProviderPort,
)
from src.application.state_store import WealthStateStore, local_event
from src.domain.models import RateTable
from src.domain.services.fx import build_rate_table
from src.infrastructure.logging.logger import get_app_logger


class LoadRateTableUseCase:
    """Fetch rates from the provider and store them in the state."""

    def __init__(
        self,
        provider: RateTableProviderPort,
        store: WealthStateStore,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            provider: Source of the currency rate table.
            store: State store receiving the rate table.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._provider = provider
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> RateTable | None:
        """Fetch and publish the rate table.

        Provider failures and malformed tables are logged and leave the
        state without rates, so the dashboard stays in its loading state.

        Returns:
            RateTable | None: Normalized table, or None when the fetch failed.
        """
        try:
            raw_rates = self._provider.get_rates()
        except RateProviderError as exc:
            self._logger.error(f"Failed to fetch exchange rates: {exc}")
            return None
        try:
            rates = build_rate_table(raw_rates, self._logger)
        except InvalidOperation:
            self._logger.error("Provider returned a non-numeric exchange rate")
            return None
        self._store.dispatch(
            local_event(
                "load rates",
                lambda state: replace(state, rates=rates),
            )
        )
        self._logger.info(f"Loaded exchange rates for {len(rates)} currencies")
        return rates


__all__ = ["LoadRateTableUseCase"]
