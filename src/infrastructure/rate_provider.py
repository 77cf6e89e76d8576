"""Mocked exchange-rate provider."""

import time
from decimal import Decimal, InvalidOperation
from typing import Callable, Mapping

from src.application.ports.rate_provider import (
    RateProviderError,
    RateTableProviderPort,
)
from src.domain.models import RateTable
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

MOCK_RATES: dict[str, dict[str, Decimal]] = {
    "USD": {
        "USD": Decimal("1.0"),
        "EUR": Decimal("0.92"),
        "GBP": Decimal("0.79"),
        "JPY": Decimal("150.0"),
        "INR": Decimal("83.0"),
    },
    "EUR": {
        "USD": Decimal("1.09"),
        "EUR": Decimal("1.0"),
        "GBP": Decimal("0.86"),
        "JPY": Decimal("163.0"),
        "INR": Decimal("90.0"),
    },
    "GBP": {
        "USD": Decimal("1.27"),
        "EUR": Decimal("1.16"),
        "GBP": Decimal("1.0"),
        "JPY": Decimal("190.0"),
        "INR": Decimal("105.0"),
    },
    "JPY": {
        "USD": Decimal("0.0067"),
        "EUR": Decimal("0.0061"),
        "GBP": Decimal("0.0053"),
        "JPY": Decimal("1.0"),
        "INR": Decimal("0.55"),
    },
    "INR": {
        "USD": Decimal("0.012"),
        "EUR": Decimal("0.011"),
        "GBP": Decimal("0.0095"),
        "JPY": Decimal("1.8"),
        "INR": Decimal("1.0"),
    },
}


class StaticRateTableProvider(RateTableProviderPort):
    """Rate provider returning a fixed table after a simulated delay."""

    def __init__(
        self,
        rates: Mapping[str, Mapping[str, object]] | None = None,
        delay_seconds: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
        logger=None,
    ) -> None:
        """Initialize the provider.

        Args:
            rates: Optional table overriding the mocked rates.
            delay_seconds: Simulated API latency.
            sleep: Function used to wait, replaceable in tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._rates = rates if rates is not None else MOCK_RATES
        self._delay_seconds = delay_seconds
        self._sleep = sleep
        self._logger = logger or get_app_logger()

    def get_rates(self) -> RateTable:
        """Return a Decimal copy of the rate table.

        Raises:
            RateProviderError: If a configured factor is not a number.
        """
        if self._delay_seconds > 0:
            self._sleep(self._delay_seconds)
        table: dict[str, dict[str, Decimal]] = {}
        for source, targets in self._rates.items():
            row = table.setdefault(source, {})
            for target, factor in targets.items():
                try:
                    row[target] = coerce_decimal(factor)
                except InvalidOperation as exc:
                    raise RateProviderError(
                        f"Invalid FX rate {source}->{target}: {factor!r}"
                    ) from exc
        self._logger.debug("Serving mocked exchange rates")
        return table


__all__ = ["MOCK_RATES", "StaticRateTableProvider"]
