"""Domain services package."""

from .animation import AnimationGuard, AnimationHandle, SpringAnimation
from .calendar_labels import date_label, month_year_label, ordinal_suffix
from .category_filter import filter_transactions, recurring, top_spends
from .digit_roll import DigitRollSequencer, build_digit_cells
from .formatting import (
    format_amount,
    format_currency,
    format_transaction_amount,
)

__all__ = [
    "AnimationGuard",
    "AnimationHandle",
    "SpringAnimation",
    "date_label",
    "month_year_label",
    "ordinal_suffix",
    "filter_transactions",
    "recurring",
    "top_spends",
    "DigitRollSequencer",
    "build_digit_cells",
    "format_amount",
    "format_currency",
    "format_transaction_amount",
]
