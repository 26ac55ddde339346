"""Day-by-day navigation for the calendar pop-up."""

from datetime import date, timedelta

from xpnz.application.ports.balance_repository import BalanceDataPort
from xpnz.domain.constants import CALENDAR_TRANSITION_DURATION
from xpnz.domain.models.balance import DayMetrics
from xpnz.domain.services.animation import AnimationGuard, AnimationHandle
from xpnz.domain.services.calendar_labels import (
    date_label,
    month_year_label,
    ordinal_suffix,
)
from xpnz.infrastructure.logging.logger import get_app_logger

_ONE_DAY = timedelta(days=1)


class CalendarNavigator:
    """Move the selected day back and forth, never past today.

    Each move starts a transition on the guard. Moves requested while a
    transition is still running are dropped. The UI calls
    ``finish_transition`` when its animation completes; a stale handle
    cannot end a newer transition.
    """

    def __init__(
        self,
        today: date,
        balance_repository: BalanceDataPort,
        guard: AnimationGuard | None = None,
        transition_duration: float = CALENDAR_TRANSITION_DURATION,
        logger=None,
    ) -> None:
        self._today = today
        self._selected = today
        self._balance_repository = balance_repository
        self._guard = guard or AnimationGuard()
        self._transition_duration = transition_duration
        self._logger = logger or get_app_logger()

    @property
    def selected_date(self) -> date:
        return self._selected

    @property
    def is_today(self) -> bool:
        return self._selected == self._today

    @property
    def can_go_forward(self) -> bool:
        return self._selected < self._today

    @property
    def month_year_label(self) -> str:
        return month_year_label(self._selected)

    @property
    def day_number(self) -> int:
        return self._selected.day

    @property
    def ordinal_suffix(self) -> str:
        return ordinal_suffix(self._selected.day)

    @property
    def previous_label(self) -> str:
        return date_label(self._selected - _ONE_DAY)

    @property
    def next_label(self) -> str:
        return date_label(self._selected + _ONE_DAY)

    def go_previous(self) -> AnimationHandle | None:
        """Select the previous day.

        Returns:
            AnimationHandle | None: Handle of the started transition, or
            None when the request was debounced.
        """
        return self._move(-_ONE_DAY)

    def go_next(self) -> AnimationHandle | None:
        """Select the next day unless today is already selected."""
        if not self.can_go_forward:
            return None
        return self._move(_ONE_DAY)

    def finish_transition(self, handle: AnimationHandle) -> bool:
        """Signal that the transition for ``handle`` has completed."""
        return self._guard.release(handle)

    def day_metrics(self) -> DayMetrics:
        return self._balance_repository.fetch_day_metrics(self._selected)

    def _move(self, step: timedelta) -> AnimationHandle | None:
        handle = self._guard.try_acquire(self._transition_duration)
        if handle is None:
            self._logger.debug(
                "Ignored calendar navigation during a running transition"
            )
            return None
        self._selected = self._selected + step
        return handle


__all__ = ["CalendarNavigator"]
