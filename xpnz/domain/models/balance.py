"""Save-to-spend balance models."""

from dataclasses import dataclass
from enum import Enum

from .digits import DigitCell


class BalancePeriod(str, Enum):
    """Period selector options on the save-to-spend screen."""

    TODAY = "Today"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class BalanceSnapshot:
    """Net balance shown by the odometer for a period.

    Attributes:
        amount: Signed, formatted amount such as ``"+$1,247"``.
        percentage: Signed change badge such as ``"+23%"``.
        is_positive: Whether the balance moved toward saving.
        description: Caption shown next to the badge.
    """

    amount: str
    percentage: str
    is_positive: bool
    description: str = "toward saving"


@dataclass(frozen=True)
class StatRow:
    """Single "What shaped your balance" entry."""

    icon: str
    label: str
    value: str
    has_background: bool


@dataclass(frozen=True)
class SaveToSpendView:
    """Everything the save-to-spend screen renders for a period."""

    period: BalancePeriod
    snapshot: BalanceSnapshot
    digit_cells: list[DigitCell]
    insight: str
    stats: list[StatRow]


@dataclass(frozen=True)
class DayMetrics:
    """Metrics shown in the calendar pop-up for the selected day."""

    todays_spending: str
    top_saving: str
    largest_expense: str


__all__ = [
    "BalancePeriod",
    "BalanceSnapshot",
    "StatRow",
    "SaveToSpendView",
    "DayMetrics",
]
