"""Time frame registry and its display metadata."""

from dataclasses import dataclass
from enum import Enum


class TimeFrame(str, Enum):
    """Fixed reporting periods shown on the home screen."""

    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"


@dataclass(frozen=True)
class TimeFrameMetadata:
    """Static display metadata for a time frame.

    Attributes:
        display_order: Sort key, lower values are shown first (Year=0).
        suffix: Single-letter label shown after the amount.
        base_opacity: Visual weight when the frame is not focused.
        font_size: Point size of the amount text.
    """

    display_order: int
    suffix: str
    base_opacity: float
    font_size: int


_METADATA: dict[TimeFrame, TimeFrameMetadata] = {
    TimeFrame.YEAR: TimeFrameMetadata(
        display_order=0, suffix="y", base_opacity=0.4, font_size=52
    ),
    TimeFrame.MONTH: TimeFrameMetadata(
        display_order=1, suffix="m", base_opacity=0.7, font_size=52
    ),
    TimeFrame.WEEK: TimeFrameMetadata(
        display_order=2, suffix="w", base_opacity=0.5, font_size=44
    ),
    TimeFrame.DAY: TimeFrameMetadata(
        display_order=3, suffix="d", base_opacity=0.4, font_size=40
    ),
}


def time_frame_metadata(time_frame: TimeFrame) -> TimeFrameMetadata:
    """Return the display metadata for a time frame."""
    return _METADATA[time_frame]


def display_order(time_frame: TimeFrame) -> int:
    return _METADATA[time_frame].display_order


def spending_label(time_frame: TimeFrame) -> str:
    """Return the label used by the time frame toggle sheet."""
    return f"{time_frame.value} Spending"


def ordered_time_frames() -> list[TimeFrame]:
    """Return every time frame sorted Year, Month, Week, Day."""
    return sorted(TimeFrame, key=display_order)


def parse_time_frame(raw: str) -> TimeFrame | None:
    """Parse a time frame name case-insensitively.

    Args:
        raw: Name such as ``"day"`` or ``"Month"``.

    Returns:
        TimeFrame | None: Matching frame, or None when unknown.
    """
    candidate = raw.strip().lower()
    for time_frame in TimeFrame:
        if time_frame.value.lower() == candidate:
            return time_frame
    return None


__all__ = [
    "TimeFrame",
    "TimeFrameMetadata",
    "time_frame_metadata",
    "display_order",
    "spending_label",
    "ordered_time_frames",
    "parse_time_frame",
]
