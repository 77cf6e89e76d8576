"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_BASE_CURRENCY, SUPPORTED_CURRENCIES
from src.infrastructure.logging.logger import get_app_logger

STORE_BACKENDS = ("memory", "sqlalchemy")


@dataclass(frozen=True)
class WealthSettings:
    """Settings for wiring the wealth dashboard.

    Attributes:
        user_id: Identity whose document is loaded and saved.
        store_backend: Account store identifier (memory or sqlalchemy).
        db_url: Database URL for the sqlalchemy store.
        rates_delay_seconds: Simulated latency of the rate provider.
        default_base_currency: Base currency used before a document loads.
    """

    user_id: str = "local-user"
    store_backend: str = "memory"
    db_url: Optional[str] = None
    rates_delay_seconds: float = 0.0
    default_base_currency: str = DEFAULT_BASE_CURRENCY

    @classmethod
    def from_env(cls) -> "WealthSettings":
        """Build settings from environment variables.

        Returns:
            WealthSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If the store backend is unknown.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("WEALTH_STORE_BACKEND", "memory").strip().lower()
        if backend not in STORE_BACKENDS:
            raise ValueError(
                "Unsupported account store backend: "
                f"{backend}. Expected memory or sqlalchemy."
            )
        user_id = os.getenv("WEALTH_USER_ID", "").strip() or "local-user"
        db_url = os.getenv("WEALTH_DB_URL") or None
        return cls(
            user_id=user_id,
            store_backend=backend,
            db_url=db_url,
            rates_delay_seconds=cls._parse_delay(
                os.getenv("WEALTH_RATES_DELAY_SECONDS"),
                logger=logger,
            ),
            default_base_currency=cls._parse_currency(
                os.getenv("WEALTH_DEFAULT_BASE_CURRENCY"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_delay(raw_value: str | None, logger) -> float:
        """Parse the simulated rate provider delay.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Non-negative delay in seconds.
        """
        if not raw_value:
            return 0.0
        try:
            delay = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid WEALTH_RATES_DELAY_SECONDS '{raw_value}'; using 0"
            )
            return 0.0
        return max(delay, 0.0)

    @staticmethod
    def _parse_currency(raw_value: str | None, logger) -> str:
        if not raw_value:
            return DEFAULT_BASE_CURRENCY
        code = raw_value.strip().upper()
        if code not in SUPPORTED_CURRENCIES:
            logger.warning(
                f"Unsupported WEALTH_DEFAULT_BASE_CURRENCY '{raw_value}'; "
                f"using {DEFAULT_BASE_CURRENCY}"
            )
            return DEFAULT_BASE_CURRENCY
        return code


__all__ = ["WealthSettings", "STORE_BACKENDS"]
