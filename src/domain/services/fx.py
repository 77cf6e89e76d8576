"""Currency conversion helpers over an in-memory rate table."""

from collections.abc import Mapping
from decimal import Decimal
from logging import Logger

from src.domain.models import RateTable
from src.utils.decimal_utils import coerce_decimal

FALLBACK_RATE = Decimal("1.0")


def build_rate_table(
    raw_rates: Mapping[str, Mapping[str, object]],
    logger: Logger,
) -> dict[str, dict[str, Decimal]]:
    """Normalize a raw rate mapping into a Decimal rate table.

    Args:
        raw_rates: Mapping of source code to target code to factor.
        logger: Logger used for warnings.

    Returns:
        dict[str, dict[str, Decimal]]: Table with upper-cased codes and
        positive Decimal factors. Non-positive factors are dropped.
    """
    table: dict[str, dict[str, Decimal]] = {}
    for source, targets in raw_rates.items():
        source_code = str(source).strip().upper()
        row = table.setdefault(source_code, {})
        for target, raw_factor in targets.items():
            target_code = str(target).strip().upper()
            factor = coerce_decimal(raw_factor)
            if factor <= 0:
                logger.warning(
                    f"Skipping non-positive FX rate {source_code}->{target_code}"
                )
                continue
            row[target_code] = factor
    return table


def conversion_factor(
    rates: RateTable,
    source_currency: str,
    target_currency: str,
    logger: Logger,
) -> Decimal:
    """Return the factor converting one unit of source into target.

    Missing pairs fall back to a factor of 1.0 so a gap in the table never
    fails the whole aggregation.

    Args:
        rates: Rate table keyed by source then target currency.
        source_currency: Currency of the balance.
        target_currency: Currency to convert into.
        logger: Logger used for warnings.

    Returns:
        Decimal: Multiplicative conversion factor.
    """
    factor = rates.get(source_currency, {}).get(target_currency)
    if factor is None:
        logger.warning(
            f"Missing FX rate for {source_currency} to {target_currency}; "
            "using 1.0"
        )
        return FALLBACK_RATE
    return coerce_decimal(factor)


def convert_balance(
    balance: Decimal,
    source_currency: str,
    target_currency: str,
    rates: RateTable,
    logger: Logger,
) -> Decimal:
    """Convert a balance into the target currency.

    Args:
        balance: Balance in the source currency.
        source_currency: Currency of the balance.
        target_currency: Currency to convert into.
        rates: Rate table keyed by source then target currency.
        logger: Logger used for warnings.

    Returns:
        Decimal: Converted balance.
    """
    return balance * conversion_factor(
        rates,
        source_currency,
        target_currency,
        logger,
    )


__all__ = [
    "FALLBACK_RATE",
    "build_rate_table",
    "conversion_factor",
    "convert_balance",
]
