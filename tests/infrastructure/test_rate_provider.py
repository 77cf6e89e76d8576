"""Tests for the mocked rate provider."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.rate_provider import RateProviderError
from src.domain.constants import SUPPORTED_CURRENCIES
from src.infrastructure.rate_provider import MOCK_RATES, StaticRateTableProvider


def test_mock_table_is_square_with_unit_diagonal() -> None:
    assert set(MOCK_RATES) == set(SUPPORTED_CURRENCIES)
    for source, targets in MOCK_RATES.items():
        assert set(targets) == set(SUPPORTED_CURRENCIES)
        assert targets[source] == Decimal("1")


def test_get_rates_returns_a_copy() -> None:
    provider = StaticRateTableProvider(logger=MagicMock())

    rates = provider.get_rates()
    rates["USD"]["EUR"] = Decimal("99")

    assert provider.get_rates()["USD"]["EUR"] == Decimal("0.92")


def test_get_rates_waits_for_configured_delay() -> None:
    sleep = MagicMock()
    provider = StaticRateTableProvider(
        rates={"USD": {"USD": Decimal("1")}},
        delay_seconds=1.0,
        sleep=sleep,
        logger=MagicMock(),
    )

    assert provider.get_rates() == {"USD": {"USD": Decimal("1")}}
    sleep.assert_called_once_with(1.0)


def test_get_rates_skips_sleep_without_delay() -> None:
    sleep = MagicMock()

    StaticRateTableProvider(sleep=sleep, logger=MagicMock()).get_rates()

    sleep.assert_not_called()


def test_get_rates_rejects_non_numeric_factors() -> None:
    provider = StaticRateTableProvider(
        rates={"USD": {"USD": "1", "EUR": "abc"}},
        logger=MagicMock(),
    )

    with pytest.raises(RateProviderError):
        provider.get_rates()


def test_get_rates_coerces_configured_factors() -> None:
    provider = StaticRateTableProvider(
        rates={"USD": {"EUR": "0.92", "GBP": 0.79}},
        logger=MagicMock(),
    )

    assert provider.get_rates() == {
        "USD": {"EUR": Decimal("0.92"), "GBP": Decimal("0.79")},
    }
