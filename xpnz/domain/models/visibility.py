"""Visibility and expansion state of the home screen spend rows."""

from dataclasses import dataclass, field

from .time_frame import TimeFrame

DEFAULT_ENABLED_TIME_FRAMES = frozenset(
    {TimeFrame.DAY, TimeFrame.WEEK, TimeFrame.MONTH}
)


@dataclass
class VisibilityState:
    """Which time frames are shown and which one is expanded.

    The expanded frame, when set, is always one of the enabled frames.
    The enabled set is allowed to become empty.

    Attributes:
        enabled_time_frames: Frames currently shown.
        expanded_time_frame: Frame whose detail card is open, if any.
    """

    enabled_time_frames: set[TimeFrame] = field(
        default_factory=lambda: set(DEFAULT_ENABLED_TIME_FRAMES)
    )
    expanded_time_frame: TimeFrame | None = None


@dataclass(frozen=True)
class RowStyle:
    """Derived emphasis values for a single spend row.

    Attributes:
        amount_opacity: Opacity of the amount text.
        symbol_opacity: Opacity of the currency symbol.
        suffix_opacity: Opacity of the time frame suffix.
        row_alpha: Whole-row multiplier applied on top of the above.
        font_size: Amount font size.
        secondary_font_size: Symbol and suffix font size.
    """

    amount_opacity: float
    symbol_opacity: float
    suffix_opacity: float
    row_alpha: float
    font_size: float
    secondary_font_size: float


__all__ = ["DEFAULT_ENABLED_TIME_FRAMES", "VisibilityState", "RowStyle"]
