"""Use case assembling the save-to-spend screen for a period."""

from xpnz.application.ports.balance_repository import BalanceDataPort
from xpnz.domain.constants import DEFAULT_STAGGER_DELAY
from xpnz.domain.models.balance import (
    BalancePeriod,
    BalanceSnapshot,
    SaveToSpendView,
)
from xpnz.domain.services.digit_roll import build_digit_cells
from xpnz.infrastructure.logging.logger import get_app_logger

POSITIVE_INSIGHT = (
    "You saved more than you spent today, which means your money is moving "
    "in a healthy direction. Your saving rate is stronger than your weekly "
    "average, showing consistent discipline. Small decisions compound over "
    "time."
)
NEGATIVE_INSIGHT = (
    "You spent more than you saved this period. Consider reviewing your top "
    "expenses and identifying areas where you can reduce spending. Small "
    "adjustments in daily habits can lead to significant improvements over "
    "time."
)


def insight_for(snapshot: BalanceSnapshot) -> str:
    """Return the insight paragraph matching the balance direction."""
    return POSITIVE_INSIGHT if snapshot.is_positive else NEGATIVE_INSIGHT


class GetSaveToSpendUseCase:
    """Build the save-to-spend view model for a balance period."""

    def __init__(
        self,
        balance_repository: BalanceDataPort,
        logger=None,
        stagger_delay: float = DEFAULT_STAGGER_DELAY,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_repository: Port providing balances and stats.
            logger: Optional logger compatible with logging.Logger-like API.
            stagger_delay: Seconds between neighbouring digit rolls.
        """
        self._balance_repository = balance_repository
        self._logger = logger or get_app_logger()
        self._stagger_delay = stagger_delay

    def execute(
        self,
        period: BalancePeriod = BalancePeriod.TODAY,
    ) -> SaveToSpendView:
        """Return the balance, odometer cells, insight and stats."""
        snapshot = self._balance_repository.fetch_balance(period)
        stats = self._balance_repository.fetch_stats(period)
        self._logger.info(
            f"Save-to-spend {period.value}: {snapshot.amount} "
            f"({snapshot.percentage})"
        )
        return SaveToSpendView(
            period=period,
            snapshot=snapshot,
            digit_cells=build_digit_cells(
                snapshot.amount,
                self._stagger_delay,
            ),
            insight=insight_for(snapshot),
            stats=stats,
        )


__all__ = [
    "GetSaveToSpendUseCase",
    "insight_for",
    "POSITIVE_INSIGHT",
    "NEGATIVE_INSIGHT",
]
