"""Controller for which spend rows are shown and which one is expanded."""

from xpnz.application.ports.spend_repository import SpendDataPort
from xpnz.domain.constants import (
    DIMMED_ROW_ALPHA,
    SECONDARY_FONT_SCALE,
    SUFFIX_OPACITY_FACTOR,
    SYMBOL_OPACITY_FACTOR,
    UNDIMMED_ROW_ALPHA,
    YEAR_FOCUSED_OPACITY,
    YEAR_UNFOCUSED_OPACITY,
)
from xpnz.domain.errors import InvalidStateError
from xpnz.domain.models.spend import SpendRecord
from xpnz.domain.models.time_frame import (
    TimeFrame,
    display_order,
    ordered_time_frames,
    time_frame_metadata,
)
from xpnz.domain.models.visibility import RowStyle, VisibilityState
from xpnz.infrastructure.logging.logger import get_app_logger


class VisibilityController:
    """Apply user toggles to a ``VisibilityState`` and derive emphasis."""

    def __init__(
        self,
        state: VisibilityState,
        spend_repository: SpendDataPort,
        logger=None,
        strict: bool = False,
    ) -> None:
        """Initialize the controller.

        Args:
            state: Screen-owned state mutated by the toggle actions.
            spend_repository: Port providing spend totals per time frame.
            logger: Optional logger compatible with logging.Logger-like API.
            strict: Raise ``InvalidStateError`` on precondition violations
                instead of ignoring them.
        """
        self._state = state
        self._spend_repository = spend_repository
        self._logger = logger or get_app_logger()
        self._strict = strict

    @property
    def state(self) -> VisibilityState:
        return self._state

    @property
    def expanded_time_frame(self) -> TimeFrame | None:
        return self._state.expanded_time_frame

    def is_enabled(self, time_frame: TimeFrame) -> bool:
        return time_frame in self._state.enabled_time_frames

    def is_expanded(self, time_frame: TimeFrame) -> bool:
        return self._state.expanded_time_frame == time_frame

    def toggle_enabled(self, time_frame: TimeFrame) -> None:
        """Show or hide a time frame.

        Hiding the expanded frame collapses it as well.
        """
        enabled = self._state.enabled_time_frames
        if time_frame in enabled:
            enabled.discard(time_frame)
            if self._state.expanded_time_frame == time_frame:
                self._state.expanded_time_frame = None
            self._logger.info(f"Disabled time frame {time_frame.value}")
        else:
            enabled.add(time_frame)
            self._logger.info(f"Enabled time frame {time_frame.value}")

    def set_enabled(self, time_frame: TimeFrame, enabled: bool) -> None:
        """Force a time frame on or off, as a switch binding does."""
        if self.is_enabled(time_frame) != enabled:
            self.toggle_enabled(time_frame)

    def toggle_expanded(self, time_frame: TimeFrame) -> None:
        """Open a time frame's detail card, or close it when already open.

        Opening a frame closes any other one.

        Raises:
            InvalidStateError: If ``strict`` and the frame is not enabled.
        """
        if not self.is_enabled(time_frame):
            message = (
                f"Cannot expand disabled time frame {time_frame.value}"
            )
            if self._strict:
                raise InvalidStateError(message)
            self._logger.warning(message)
            return
        if self._state.expanded_time_frame == time_frame:
            self._state.expanded_time_frame = None
        else:
            self._state.expanded_time_frame = time_frame

    def collapse(self) -> None:
        self._state.expanded_time_frame = None

    def visible_records(self) -> list[SpendRecord]:
        """Return spend records of enabled frames, Year first, Day last."""
        ordered = sorted(self._state.enabled_time_frames, key=display_order)
        return [
            self._spend_repository.fetch_spend_record(time_frame)
            for time_frame in ordered
        ]

    def expanded_record(self) -> SpendRecord | None:
        expanded = self._state.expanded_time_frame
        if expanded is None:
            return None
        return self._spend_repository.fetch_spend_record(expanded)

    def emphasis_for(self, time_frame: TimeFrame) -> float:
        """Return the text opacity of a time frame.

        Year reads as an ambient metric: it is only strong while nothing is
        expanded or while Year itself is expanded. Other frames keep their
        static base opacity.
        """
        if time_frame == TimeFrame.YEAR:
            expanded = self._state.expanded_time_frame
            if expanded is None or expanded == TimeFrame.YEAR:
                return YEAR_FOCUSED_OPACITY
            return YEAR_UNFOCUSED_OPACITY
        return time_frame_metadata(time_frame).base_opacity

    def row_alpha(self, time_frame: TimeFrame) -> float:
        """Return the whole-row dimming multiplier for a time frame."""
        expanded = self._state.expanded_time_frame
        if expanded is not None and expanded != time_frame:
            return DIMMED_ROW_ALPHA
        return UNDIMMED_ROW_ALPHA

    def row_style(self, time_frame: TimeFrame) -> RowStyle:
        """Bundle every derived emphasis value for a spend row."""
        emphasis = self.emphasis_for(time_frame)
        font_size = time_frame_metadata(time_frame).font_size
        return RowStyle(
            amount_opacity=emphasis,
            symbol_opacity=emphasis * SYMBOL_OPACITY_FACTOR,
            suffix_opacity=emphasis * SUFFIX_OPACITY_FACTOR,
            row_alpha=self.row_alpha(time_frame),
            font_size=font_size,
            secondary_font_size=font_size * SECONDARY_FONT_SCALE,
        )

    def time_frame_toggles(self) -> list[tuple[TimeFrame, bool]]:
        """Return ``(frame, enabled)`` pairs for the toggle sheet."""
        return [
            (time_frame, self.is_enabled(time_frame))
            for time_frame in ordered_time_frames()
        ]


__all__ = ["VisibilityController"]
