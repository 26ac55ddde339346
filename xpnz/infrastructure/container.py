"""Composition root for wiring infrastructure adapters."""

from datetime import date

from xpnz.application.ports.balance_repository import BalanceDataPort
from xpnz.application.ports.spend_repository import SpendDataPort
from xpnz.application.use_cases.calendar_navigator import CalendarNavigator
from xpnz.application.use_cases.get_filtered_transactions import (
    GetFilteredTransactionsUseCase,
)
from xpnz.application.use_cases.get_save_to_spend import (
    GetSaveToSpendUseCase,
)
from xpnz.application.use_cases.visibility_controller import (
    VisibilityController,
)
from xpnz.domain.models.visibility import VisibilityState
from xpnz.domain.services.animation import SpringAnimation
from xpnz.domain.services.digit_roll import DigitRollSequencer
from xpnz.infrastructure.logging.logger import get_app_logger
from xpnz.infrastructure.mock_balance_repository import MockBalanceRepository
from xpnz.infrastructure.mock_spend_repository import MockSpendRepository
from xpnz.infrastructure.settings import AppSettings


def build_settings() -> AppSettings:
    """Return settings sourced from the environment."""
    return AppSettings.from_env()


def build_spend_repository() -> SpendDataPort:
    """Return the spend data adapter."""
    return MockSpendRepository()


def build_balance_repository() -> BalanceDataPort:
    """Return the balance data adapter."""
    return MockBalanceRepository()


def build_visibility_state(
    settings: AppSettings | None = None,
) -> VisibilityState:
    """Return a fresh screen state with the configured default frames."""
    resolved = settings or build_settings()
    return VisibilityState(
        enabled_time_frames=set(resolved.default_time_frames)
    )


def build_visibility_controller(
    state: VisibilityState,
    settings: AppSettings | None = None,
    spend_repository: SpendDataPort | None = None,
) -> VisibilityController:
    """Return a controller bound to a screen-owned state."""
    resolved = settings or build_settings()
    return VisibilityController(
        state,
        spend_repository or build_spend_repository(),
        logger=get_app_logger(),
        strict=resolved.strict_expansion,
    )


def build_filtered_transactions_use_case(
    spend_repository: SpendDataPort | None = None,
) -> GetFilteredTransactionsUseCase:
    """Return the transaction listing use case."""
    return GetFilteredTransactionsUseCase(
        spend_repository or build_spend_repository(),
        logger=get_app_logger(),
    )


def build_save_to_spend_use_case(
    settings: AppSettings | None = None,
) -> GetSaveToSpendUseCase:
    """Return the save-to-spend use case."""
    resolved = settings or build_settings()
    return GetSaveToSpendUseCase(
        build_balance_repository(),
        logger=get_app_logger(),
        stagger_delay=resolved.stagger_delay,
    )


def build_digit_roll_sequencer(
    settings: AppSettings | None = None,
) -> DigitRollSequencer:
    """Return a sequencer for one odometer display."""
    resolved = settings or build_settings()
    return DigitRollSequencer(
        stagger_delay=resolved.stagger_delay,
        spring=SpringAnimation(
            response=resolved.spring_response,
            damping_fraction=resolved.spring_damping,
        ),
        blur_duration=resolved.digit_animation_duration,
    )


def build_calendar_navigator(today: date | None = None) -> CalendarNavigator:
    """Return a calendar navigator starting on ``today``."""
    return CalendarNavigator(
        today or date.today(),
        build_balance_repository(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_spend_repository",
    "build_balance_repository",
    "build_visibility_state",
    "build_visibility_controller",
    "build_filtered_transactions_use_case",
    "build_save_to_spend_use_case",
    "build_digit_roll_sequencer",
    "build_calendar_navigator",
]
