"""Models for the odometer digit display."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DigitCell:
    """One character slot of an odometer balance.

    Attributes:
        character: Literal glyph from the formatted amount.
        is_numeric: True when the glyph rolls through 0-9.
        target_value: Digit the slot rolls to; None for static glyphs.
        animation_delay: Seconds before the roll starts.
    """

    character: str
    is_numeric: bool
    target_value: int | None
    animation_delay: float


__all__ = ["DigitCell"]
