"""Tests for the time frame registry."""

from xpnz.domain.models.time_frame import (
    TimeFrame,
    ordered_time_frames,
    parse_time_frame,
    spending_label,
    time_frame_metadata,
)


def test_ordered_time_frames_runs_year_to_day() -> None:
    assert ordered_time_frames() == [
        TimeFrame.YEAR,
        TimeFrame.MONTH,
        TimeFrame.WEEK,
        TimeFrame.DAY,
    ]


def test_metadata_table_matches_display_hierarchy() -> None:
    """Each frame exposes its suffix, order, opacity and font size."""
    year = time_frame_metadata(TimeFrame.YEAR)
    month = time_frame_metadata(TimeFrame.MONTH)
    week = time_frame_metadata(TimeFrame.WEEK)
    day = time_frame_metadata(TimeFrame.DAY)

    assert [year.suffix, month.suffix, week.suffix, day.suffix] == [
        "y",
        "m",
        "w",
        "d",
    ]
    assert [m.base_opacity for m in (year, month, week, day)] == [
        0.4,
        0.7,
        0.5,
        0.4,
    ]
    assert [m.font_size for m in (year, month, week, day)] == [52, 52, 44, 40]


def test_spending_label_and_parse() -> None:
    assert spending_label(TimeFrame.YEAR) == "Year Spending"
    assert parse_time_frame(" month ") is TimeFrame.MONTH
    assert parse_time_frame("fortnight") is None
