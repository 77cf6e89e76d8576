"""Tests for the FX helpers."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.services.fx import (
    FALLBACK_RATE,
    build_rate_table,
    conversion_factor,
    convert_balance,
)


def test_build_rate_table_normalizes_codes_and_values() -> None:
    logger = MagicMock()

    table = build_rate_table(
        {"usd": {"eur": 0.92, "USD": "1.0", "GBP": 0}},
        logger,
    )

    assert table == {"USD": {"EUR": Decimal("0.92"), "USD": Decimal("1.0")}}
    logger.warning.assert_called_once()


def test_conversion_factor_returns_known_rate() -> None:
    rates = {"EUR": {"USD": Decimal("1.09")}}

    assert conversion_factor(rates, "EUR", "USD", MagicMock()) == Decimal("1.09")


def test_conversion_factor_falls_back_to_one() -> None:
    logger = MagicMock()

    factor = conversion_factor({}, "EUR", "USD", logger)

    assert factor == FALLBACK_RATE == Decimal("1.0")
    logger.warning.assert_called_once()


def test_convert_balance_multiplies_by_factor() -> None:
    rates = {"GBP": {"EUR": Decimal("1.16")}}

    converted = convert_balance(
        Decimal("100"), "GBP", "EUR", rates, MagicMock()
    )

    assert converted == Decimal("116")
