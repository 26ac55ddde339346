"""Domain models for spend totals and transactions."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .time_frame import TimeFrame


@dataclass(frozen=True)
class SpendRecord:
    """Amount spent over a time frame.

    Attributes:
        time_frame: Period the amount covers.
        amount: Non-negative spend total.
    """

    time_frame: TimeFrame
    amount: Decimal

    @property
    def formatted_amount(self) -> str:
        """Amount without currency symbol, e.g. ``"7,354.80"``."""
        # Deferred: the formatting service imports the models package.
        from xpnz.domain.services.formatting import format_amount

        return format_amount(self.amount)


class TransactionType(str, Enum):
    """Type tag shown under a transaction name."""

    MONEY_TRANSFER = "Money Transfer"
    CARD = "Card"
    MONEY_ADDED = "Money added"
    SUBSCRIPTION = "Subscription"
    PURCHASE = "Purchase"


class TransactionCategory(str, Enum):
    """Filter tabs above the transaction list, in display order."""

    ALL = "All"
    BY_CATEGORY = "By Category"
    TOP_SPENDS = "Top Spends"
    BY_DAY = "By Day"
    RECURRING = "Recurring"


@dataclass(frozen=True)
class Transaction:
    """Single read-only transaction entry."""

    name: str
    transaction_type: TransactionType
    amount: Decimal
    is_incoming: bool
    icon_name: str = ""

    @property
    def formatted_amount(self) -> str:
        """Unsigned whole-unit amount with symbol, e.g. ``"$14"``."""
        from xpnz.domain.services.formatting import format_transaction_amount

        return format_transaction_amount(self.amount)


__all__ = [
    "SpendRecord",
    "TransactionType",
    "TransactionCategory",
    "Transaction",
]
