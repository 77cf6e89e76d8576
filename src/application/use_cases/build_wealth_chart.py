"""Use case producing the consolidated wealth chart payload."""

from src.domain.models import WealthChart, WealthState
from src.domain.services.finance import aggregate_wealth
from src.infrastructure.logging.logger import get_app_logger


class BuildWealthChartUseCase:
    """Aggregate the current state into chart-ready rows."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, state: WealthState) -> WealthChart:
        """Return the wealth chart for ``state``.

        While the rate table has not been loaded the chart is empty and
        flagged as loading.

        Args:
            state: Current dashboard state.

        Returns:
            WealthChart: Rows ordered by month, accounts in display order.
        """
        account_names = tuple(account.name for account in state.accounts)
        if state.rates is None:
            return WealthChart(
                base_currency=state.base_currency,
                account_names=account_names,
                rows=(),
                is_loading=True,
            )
        rows = aggregate_wealth(
            state.accounts,
            state.base_currency,
            state.rates,
            logger=self._logger,
        )
        return WealthChart(
            base_currency=state.base_currency,
            account_names=account_names,
            rows=tuple(rows),
        )


__all__ = ["BuildWealthChartUseCase"]
