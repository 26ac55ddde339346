"""Application use cases package."""

from .calendar_navigator import CalendarNavigator
from .get_filtered_transactions import GetFilteredTransactionsUseCase
from .get_save_to_spend import GetSaveToSpendUseCase, SaveToSpendView
from .visibility_controller import VisibilityController

__all__ = [
    "CalendarNavigator",
    "GetFilteredTransactionsUseCase",
    "GetSaveToSpendUseCase",
    "SaveToSpendView",
    "VisibilityController",
]
