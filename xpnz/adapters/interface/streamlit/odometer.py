"""Odometer balance presentation logic for the Streamlit UI.

This module turns ``DigitCell`` sequences into HTML/CSS. It performs no IO
and holds no state; the UI owns the ``DigitRollSequencer`` and passes the
start values of the current rolls in.

Each digit is a clipped column holding the glyphs 0-9. The column is
translated to its target digit and a keyframe animation rolls it there from
its start value, delayed by the cell's ``animation_delay`` so the rightmost
digit moves first.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from xpnz.domain.models.balance import BalanceSnapshot
from xpnz.domain.models.digits import DigitCell

AMOUNT_FONT_SIZE = 65
DIGIT_WIDTH_RATIO = 0.62
CLIP_HEIGHT = 78
ROLL_DURATION = 0.5
ROLL_EASING = "cubic-bezier(0.25, 1.2, 0.5, 1)"
BADGE_BACKGROUND_OPACITY = 0.15

POSITIVE_COLOR = "52, 199, 89"
NEGATIVE_COLOR = "255, 59, 48"

ODOMETER_CSS = f"""
<style>
@keyframes xpnz-roll {{
  from {{ transform: translateY(var(--xpnz-from)); }}
}}
.xpnz-odometer {{
  display: flex;
  justify-content: center;
  font-size: {AMOUNT_FONT_SIZE}px;
  font-weight: 700;
  line-height: {CLIP_HEIGHT}px;
}}
.xpnz-digit {{
  height: {CLIP_HEIGHT}px;
  overflow: hidden;
  text-align: center;
}}
.xpnz-digit-strip {{
  display: flex;
  flex-direction: column;
}}
.xpnz-digit-strip span {{
  height: {CLIP_HEIGHT}px;
}}
.xpnz-blur {{
  filter: blur(1.5px);
}}
</style>
"""


def digit_offset(value: float, clip_height: int = CLIP_HEIGHT) -> float:
    """Return the vertical strip offset in pixels showing ``value``."""
    return -value * clip_height


def _digit_markup(
    cell: DigitCell,
    start_value: float | None,
    blurred: bool,
    roll_duration: float,
) -> str:
    width = AMOUNT_FONT_SIZE * DIGIT_WIDTH_RATIO
    target = float(cell.target_value or 0)
    start = target if start_value is None else start_value
    glyphs = "".join(f"<span>{number}</span>" for number in range(10))
    classes = "xpnz-digit-strip xpnz-blur" if blurred else "xpnz-digit-strip"
    style = (
        f"--xpnz-from: {digit_offset(start):.1f}px; "
        f"transform: translateY({digit_offset(target):.1f}px); "
        f"animation: xpnz-roll {roll_duration}s {ROLL_EASING} "
        f"{cell.animation_delay:.2f}s both;"
    )
    return (
        f'<div class="xpnz-digit" style="width: {width:.1f}px;">'
        f'<div class="{classes}" style="{style}">{glyphs}</div>'
        "</div>"
    )


def build_odometer_markup(
    cells: Sequence[DigitCell],
    start_values: Sequence[float | None] | None = None,
    blurred: Sequence[bool] | None = None,
    roll_duration: float = ROLL_DURATION,
) -> str:
    """Render odometer cells as HTML.

    Args:
        cells: Cells of the formatted amount, left to right.
        start_values: Per-cell roll start values; digits roll from 0 when
            omitted.
        blurred: Per-cell motion-blur flags.
        roll_duration: Seconds each digit takes to reach its target.

    Returns:
        HTML snippet for ``st.markdown(..., unsafe_allow_html=True)``.
    """
    parts: list[str] = []
    for index, cell in enumerate(cells):
        if not cell.is_numeric:
            parts.append(f"<span>{escape(cell.character)}</span>")
            continue
        start = start_values[index] if start_values is not None else 0.0
        is_blurred = bool(blurred[index]) if blurred is not None else False
        parts.append(_digit_markup(cell, start, is_blurred, roll_duration))
    return f'<div class="xpnz-odometer">{"".join(parts)}</div>'


def build_badge_markup(snapshot: BalanceSnapshot) -> str:
    """Render the percentage badge and its caption."""
    color = POSITIVE_COLOR if snapshot.is_positive else NEGATIVE_COLOR
    badge_style = (
        f"color: rgb({color}); "
        f"background: rgba({color}, {BADGE_BACKGROUND_OPACITY}); "
        "border-radius: 999px; padding: 4px 8px; font-weight: 600;"
    )
    return (
        '<div style="text-align: center; font-size: 17px;">'
        f'<span style="{badge_style}">{escape(snapshot.percentage)}</span> '
        f'<span style="opacity: 0.6;">{escape(snapshot.description)}</span>'
        "</div>"
    )


__all__ = [
    "ODOMETER_CSS",
    "digit_offset",
    "build_odometer_markup",
    "build_badge_markup",
]
