"""Use case returning the performance series of a single account."""

from src.domain.models import AccountPerformancePoint, WealthState
from src.domain.services.finance import compute_account_performance
from src.infrastructure.logging.logger import get_app_logger


class GetAccountPerformanceUseCase:
    """Compute ending balances and monthly changes for one account."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        state: WealthState,
        account_name: str,
    ) -> list[AccountPerformancePoint]:
        """Return the series for ``account_name``, empty when unknown."""
        account = state.find_account(account_name)
        if account is None:
            self._logger.warning(f"Unknown account requested: {account_name}")
            return []
        return compute_account_performance(account)


__all__ = ["GetAccountPerformanceUseCase"]
