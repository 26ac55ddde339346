"""Tests for the odometer presentation module."""

from xpnz.adapters.interface.streamlit.odometer import (
    ODOMETER_CSS,
    build_badge_markup,
    build_odometer_markup,
    digit_offset,
)
from xpnz.domain.models.balance import BalanceSnapshot
from xpnz.domain.services.digit_roll import build_digit_cells


def test_digit_offset_scrolls_one_clip_per_digit():
    assert digit_offset(0) == 0
    assert digit_offset(3, clip_height=10) == -30


def test_markup_keeps_static_glyphs_and_delays_digits():
    cells = build_digit_cells("+$1,247", stagger_delay=0.06)

    markup = build_odometer_markup(cells)

    assert markup.count('class="xpnz-digit"') == 4
    assert "<span>+</span>" in markup
    assert "<span>$</span>" in markup
    assert "<span>,</span>" in markup
    assert "0.18s both" in markup
    assert "0.00s both" in markup
    assert "xpnz-blur" not in markup


def test_markup_uses_start_values_and_blur_flags():
    cells = build_digit_cells("$9", stagger_delay=0.06)

    markup = build_odometer_markup(
        cells,
        start_values=[None, 4.0],
        blurred=[False, True],
    )

    assert "--xpnz-from: -312.0px" in markup
    assert "translateY(-702.0px)" in markup
    assert "xpnz-digit-strip xpnz-blur" in markup


def test_markup_escapes_unknown_glyphs():
    cells = build_digit_cells("<1>", stagger_delay=0.0)

    markup = build_odometer_markup(cells)

    assert "&lt;" in markup
    assert "&gt;" in markup


def test_badge_colour_follows_direction():
    positive = build_badge_markup(BalanceSnapshot("+$428", "+18%", True))
    negative = build_badge_markup(
        BalanceSnapshot("-$85", "-5%", False, "toward spending")
    )

    assert "52, 199, 89" in positive
    assert "+18%" in positive
    assert "255, 59, 48" in negative
    assert "toward spending" in negative
    assert "@keyframes xpnz-roll" in ODOMETER_CSS
