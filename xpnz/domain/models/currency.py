"""Currency representation."""

from enum import Enum


class Currency(str, Enum):
    """Supported display currencies."""

    USD = "USD"

    @property
    def symbol(self) -> str:
        """Return the glyph printed before amounts."""
        return _SYMBOLS[self]


_SYMBOLS = {Currency.USD: "$"}


__all__ = ["Currency"]
