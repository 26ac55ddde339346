"""Domain package for display rules and core models."""

from .errors import InvalidStateError
from .models import (
    BalancePeriod,
    BalanceSnapshot,
    Currency,
    DigitCell,
    RowStyle,
    SpendRecord,
    TimeFrame,
    Transaction,
    TransactionCategory,
    TransactionType,
    VisibilityState,
)
from .services import (
    DigitRollSequencer,
    build_digit_cells,
    filter_transactions,
    format_currency,
)

__all__ = [
    "InvalidStateError",
    "BalancePeriod",
    "BalanceSnapshot",
    "Currency",
    "DigitCell",
    "RowStyle",
    "SpendRecord",
    "TimeFrame",
    "Transaction",
    "TransactionCategory",
    "TransactionType",
    "VisibilityState",
    "DigitRollSequencer",
    "build_digit_cells",
    "filter_transactions",
    "format_currency",
]
