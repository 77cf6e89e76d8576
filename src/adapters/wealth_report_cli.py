"""CLI adapter printing the consolidated wealth table of a user.

This module wires the sync, rate and chart use cases to the configured
infrastructure and prints one line per month.
"""

from src.application.use_cases.build_wealth_chart import (
    BuildWealthChartUseCase,
)
from src.application.use_cases.load_rate_table import LoadRateTableUseCase
from src.infrastructure.container import (
    build_account_store,
    build_document_sync,
    build_rate_provider,
    build_state_store,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import WealthSettings


def main() -> None:
    """Print the wealth snapshot of the configured user."""
    logger = get_app_logger()
    settings = WealthSettings.from_env()
    store = build_state_store(settings)
    sync = build_document_sync(store, build_account_store(settings), settings)
    sync.start()
    sync.stop()
    LoadRateTableUseCase(
        build_rate_provider(settings),
        store,
        logger=logger,
    ).execute()

    chart = BuildWealthChartUseCase(logger=logger).execute(store.state)
    if chart.is_loading:
        print("Exchange rates are unavailable.")
        return
    if chart.is_empty:
        print(f"No monthly data recorded for {settings.user_id}.")
        return

    print(
        f"Wealth for {settings.user_id} in {chart.base_currency} "
        f"({len(chart.account_names)} accounts)"
    )
    for row in chart.rows:
        parts = ", ".join(
            f"{name}={row.values[name]:,.2f}" for name in chart.account_names
        )
        print(f"{row.month}: {parts} | total={row.total:,.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
