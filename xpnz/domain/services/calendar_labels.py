"""Date labels used by the calendar pop-up."""

from datetime import date


def ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix for a day of month."""
    if day in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def month_year_label(value: date) -> str:
    """Return e.g. ``"October 2026"``."""
    return value.strftime("%B %Y")


def date_label(value: date) -> str:
    """Return e.g. ``"17th October"``."""
    return f"{value.day}{ordinal_suffix(value.day)} {value.strftime('%B')}"


__all__ = ["ordinal_suffix", "month_year_label", "date_label"]
