"""Domain constants for the save-to-spend display core."""

YEAR_FOCUSED_OPACITY = 0.8
YEAR_UNFOCUSED_OPACITY = 0.35
DIMMED_ROW_ALPHA = 0.35
UNDIMMED_ROW_ALPHA = 1.0
SYMBOL_OPACITY_FACTOR = 0.7
SUFFIX_OPACITY_FACTOR = 0.6
SECONDARY_FONT_SCALE = 0.5

TOP_SPENDS_LIMIT = 5

DEFAULT_STAGGER_DELAY = 0.06
DEFAULT_DIGIT_ANIMATION_DURATION = 0.5
DEFAULT_SPRING_RESPONSE = 0.5
DEFAULT_SPRING_DAMPING = 0.82
CALENDAR_TRANSITION_DURATION = 0.25


__all__ = [
    "YEAR_FOCUSED_OPACITY",
    "YEAR_UNFOCUSED_OPACITY",
    "DIMMED_ROW_ALPHA",
    "UNDIMMED_ROW_ALPHA",
    "SYMBOL_OPACITY_FACTOR",
    "SUFFIX_OPACITY_FACTOR",
    "SECONDARY_FONT_SCALE",
    "TOP_SPENDS_LIMIT",
    "DEFAULT_STAGGER_DELAY",
    "DEFAULT_DIGIT_ANIMATION_DURATION",
    "DEFAULT_SPRING_RESPONSE",
    "DEFAULT_SPRING_DAMPING",
    "CALENDAR_TRANSITION_DURATION",
]
