"""Domain models package."""

from .balance import (
    BalancePeriod,
    BalanceSnapshot,
    DayMetrics,
    SaveToSpendView,
    StatRow,
)
from .currency import Currency
from .digits import DigitCell
from .spend import (
    SpendRecord,
    Transaction,
    TransactionCategory,
    TransactionType,
)
from .time_frame import (
    TimeFrame,
    TimeFrameMetadata,
    ordered_time_frames,
    spending_label,
    time_frame_metadata,
)
from .visibility import DEFAULT_ENABLED_TIME_FRAMES, RowStyle, VisibilityState

__all__ = [
    "BalancePeriod",
    "BalanceSnapshot",
    "DayMetrics",
    "SaveToSpendView",
    "StatRow",
    "Currency",
    "DigitCell",
    "SpendRecord",
    "Transaction",
    "TransactionCategory",
    "TransactionType",
    "TimeFrame",
    "TimeFrameMetadata",
    "ordered_time_frames",
    "spending_label",
    "time_frame_metadata",
    "DEFAULT_ENABLED_TIME_FRAMES",
    "RowStyle",
    "VisibilityState",
]
