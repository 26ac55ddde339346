"""Application port for save-to-spend balance data."""

from datetime import date
from typing import Protocol

from xpnz.domain.models.balance import (
    BalancePeriod,
    BalanceSnapshot,
    DayMetrics,
    StatRow,
)


class BalanceDataPort(Protocol):
    """Port exposing net balances and the figures that shaped them."""

    def fetch_balance(self, period: BalancePeriod) -> BalanceSnapshot:
        """Return the net balance snapshot for a period."""

    def fetch_stats(self, period: BalancePeriod) -> list[StatRow]:
        """Return the "What shaped your balance" rows for a period."""

    def fetch_day_metrics(self, day: date) -> DayMetrics:
        """Return the calendar pop-up metrics for a day."""


__all__ = ["BalanceDataPort"]
