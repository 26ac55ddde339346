"""Application ports package."""

from .balance_repository import BalanceDataPort
from .spend_repository import SpendDataPort

__all__ = ["BalanceDataPort", "SpendDataPort"]
