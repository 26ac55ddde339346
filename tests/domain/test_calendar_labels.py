"""Tests for calendar date labels."""

from datetime import date

import pytest

from xpnz.domain.services.calendar_labels import (
    date_label,
    month_year_label,
    ordinal_suffix,
)


@pytest.mark.parametrize(
    ("day", "suffix"),
    [
        (1, "st"),
        (2, "nd"),
        (3, "rd"),
        (4, "th"),
        (11, "th"),
        (12, "th"),
        (13, "th"),
        (21, "st"),
        (22, "nd"),
        (23, "rd"),
        (31, "st"),
    ],
)
def test_ordinal_suffix(day: int, suffix: str) -> None:
    assert ordinal_suffix(day) == suffix


def test_labels() -> None:
    assert month_year_label(date(2026, 10, 18)) == "October 2026"
    assert date_label(date(2026, 10, 17)) == "17th October"
    assert date_label(date(2026, 3, 2)) == "2nd March"
