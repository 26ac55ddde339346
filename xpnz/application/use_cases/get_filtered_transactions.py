"""Use case returning a time frame's transactions for a category tab."""

from xpnz.application.ports.spend_repository import SpendDataPort
from xpnz.domain.models.spend import Transaction, TransactionCategory
from xpnz.domain.models.time_frame import TimeFrame
from xpnz.domain.services.category_filter import filter_transactions
from xpnz.infrastructure.logging.logger import get_app_logger


class GetFilteredTransactionsUseCase:
    """Load transactions for a time frame and apply a category filter."""

    def __init__(self, spend_repository: SpendDataPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            spend_repository: Port providing transactions per time frame.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._spend_repository = spend_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        time_frame: TimeFrame,
        category: TransactionCategory = TransactionCategory.ALL,
    ) -> list[Transaction]:
        """Return the filtered transactions.

        Args:
            time_frame: Period whose transactions are listed.
            category: Selected category tab.

        Returns:
            list[Transaction]: Transactions in display order.
        """
        transactions = self._spend_repository.fetch_transactions(time_frame)
        filtered = filter_transactions(transactions, category)
        self._logger.debug(
            f"Filtered {len(transactions)} {time_frame.value} transactions "
            f"to {len(filtered)} for {category.value}"
        )
        return filtered


__all__ = ["GetFilteredTransactionsUseCase"]
