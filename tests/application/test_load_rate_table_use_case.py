"""Tests for the LoadRateTableUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.ports.rate_provider import RateProviderError
from src.application.state_store import WealthStateStore
from src.application.use_cases.load_rate_table import LoadRateTableUseCase
from src.infrastructure.rate_provider import StaticRateTableProvider


def test_execute_publishes_rates_to_state() -> None:
    provider = MagicMock()
    provider.get_rates.return_value = {"eur": {"usd": "1.09"}}
    store = WealthStateStore(logger=MagicMock())

    rates = LoadRateTableUseCase(provider, store, logger=MagicMock()).execute()

    assert rates == {"EUR": {"USD": Decimal("1.09")}}
    assert store.state.rates == rates


def test_execute_logs_and_keeps_loading_state_on_failure() -> None:
    provider = MagicMock()
    provider.get_rates.side_effect = RateProviderError("offline")
    store = WealthStateStore(logger=MagicMock())
    logger = MagicMock()

    rates = LoadRateTableUseCase(provider, store, logger=logger).execute()

    assert rates is None
    assert store.state.rates is None
    logger.error.assert_called_once()


def test_execute_keeps_loading_state_on_non_numeric_rates() -> None:
    provider = MagicMock()
    provider.get_rates.return_value = {"EUR": {"USD": "n/a"}}
    store = WealthStateStore(logger=MagicMock())
    logger = MagicMock()

    rates = LoadRateTableUseCase(provider, store, logger=logger).execute()

    assert rates is None
    assert store.state.rates is None
    logger.error.assert_called_once()


def test_execute_degrades_when_static_table_is_malformed() -> None:
    provider = StaticRateTableProvider(
        rates={"USD": {"EUR": "not-a-rate"}},
        logger=MagicMock(),
    )
    store = WealthStateStore(logger=MagicMock())

    rates = LoadRateTableUseCase(provider, store, logger=MagicMock()).execute()

    assert rates is None
    assert store.state.rates is None
