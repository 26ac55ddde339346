"""In-memory save-to-spend balances used until a real source exists."""

from datetime import date

from xpnz.domain.models.balance import (
    BalancePeriod,
    BalanceSnapshot,
    DayMetrics,
    StatRow,
)

BALANCES: dict[BalancePeriod, BalanceSnapshot] = {
    BalancePeriod.TODAY: BalanceSnapshot("+$428", "+18%", True),
    BalancePeriod.WEEKLY: BalanceSnapshot("-$85", "-5%", False),
    BalancePeriod.MONTHLY: BalanceSnapshot("+$1,247", "+23%", True),
    BalancePeriod.YEARLY: BalanceSnapshot("+$8,935", "+42%", True),
    BalancePeriod.CUSTOM: BalanceSnapshot("-$312", "-12%", False),
}

STATS: list[StatRow] = [
    StatRow("arrow.up.circle", "Top spending", "$132", True),
    StatRow("arrow.down.circle", "Top saving", "$250", False),
    StatRow("dollarsign.circle", "Largest expense", "$199", True),
    StatRow("hands.sparkles", "Best saving move", "$48", False),
]

DAY_METRICS = DayMetrics(
    todays_spending="$428",
    top_saving="$250",
    largest_expense="$48",
)


class MockBalanceRepository:
    """Balance data port serving fixed snapshots.

    Stats and day metrics are the same for every period and day.
    """

    def fetch_balance(self, period: BalancePeriod) -> BalanceSnapshot:
        return BALANCES[period]

    def fetch_stats(self, period: BalancePeriod) -> list[StatRow]:
        _ = period
        return list(STATS)

    def fetch_day_metrics(self, day: date) -> DayMetrics:
        _ = day
        return DAY_METRICS


__all__ = ["MockBalanceRepository", "BALANCES", "STATS", "DAY_METRICS"]
