"""Odometer digit roll sequencing.

A formatted amount such as ``"+$1,247"`` is split into one cell per
character. Decimal digits roll independently toward their value; every
other glyph is drawn as-is. Rolls are staggered so the rightmost character
starts first and each character to its left starts ``stagger_delay`` later.
"""

from dataclasses import dataclass
import time

from xpnz.domain.constants import (
    DEFAULT_DIGIT_ANIMATION_DURATION,
    DEFAULT_STAGGER_DELAY,
)
from xpnz.domain.models.digits import DigitCell
from xpnz.domain.services.animation import (
    AnimationHandle,
    Clock,
    SpringAnimation,
)


def build_digit_cells(
    amount: str,
    stagger_delay: float = DEFAULT_STAGGER_DELAY,
) -> list[DigitCell]:
    """Decompose a formatted amount into odometer cells.

    Args:
        amount: Formatted amount string; unknown glyphs pass through.
        stagger_delay: Seconds between neighbouring character starts.

    Returns:
        list[DigitCell]: One cell per character, left to right.
    """
    length = len(amount)
    cells: list[DigitCell] = []
    for index, character in enumerate(amount):
        if character.isdecimal():
            cells.append(
                DigitCell(
                    character=character,
                    is_numeric=True,
                    target_value=int(character),
                    animation_delay=stagger_delay * (length - 1 - index),
                )
            )
        else:
            cells.append(
                DigitCell(
                    character=character,
                    is_numeric=False,
                    target_value=None,
                    animation_delay=0.0,
                )
            )
    return cells


@dataclass
class _DigitSlot:
    """Animation bookkeeping for one character position."""

    cell: DigitCell
    start_value: float
    started_at: float
    blur: AnimationHandle | None


class DigitRollSequencer:
    """Drive the digit rolls of a single balance display.

    Slots are keyed by character position. When the amount changes, a slot
    that was already rolling a digit restarts from the value it currently
    shows; a slot that was static, or did not exist, starts from zero.
    """

    def __init__(
        self,
        stagger_delay: float = DEFAULT_STAGGER_DELAY,
        spring: SpringAnimation | None = None,
        blur_duration: float = DEFAULT_DIGIT_ANIMATION_DURATION,
        clock: Clock = time.monotonic,
    ) -> None:
        self._stagger_delay = stagger_delay
        self._spring = spring or SpringAnimation()
        self._blur_duration = blur_duration
        self._clock = clock
        self._amount: str | None = None
        self._slots: list[_DigitSlot] = []
        self._last_token = 0

    @property
    def amount(self) -> str | None:
        return self._amount

    @property
    def cells(self) -> list[DigitCell]:
        return [slot.cell for slot in self._slots]

    def update(self, amount: str) -> list[DigitCell]:
        """Point the display at a new amount string.

        Args:
            amount: Formatted amount to show.

        Returns:
            list[DigitCell]: Cells for the new amount.
        """
        if amount == self._amount:
            return self.cells
        now = self._clock()
        cells = build_digit_cells(amount, self._stagger_delay)
        slots: list[_DigitSlot] = []
        for index, cell in enumerate(cells):
            previous = self._slots[index] if index < len(self._slots) else None
            slots.append(self._next_slot(previous, cell, now))
        self._amount = amount
        self._slots = slots
        return cells

    def _next_slot(
        self,
        previous: _DigitSlot | None,
        cell: DigitCell,
        now: float,
    ) -> _DigitSlot:
        if not cell.is_numeric:
            return _DigitSlot(cell, 0.0, now, None)
        rolling = previous is not None and previous.cell.is_numeric
        if rolling and previous.cell.target_value == cell.target_value:
            # Same digit in the same place: keep the roll in flight.
            return _DigitSlot(
                cell,
                previous.start_value,
                previous.started_at,
                previous.blur,
            )
        start_value = self._value_of(previous, now) if rolling else 0.0
        started_at = now + cell.animation_delay
        self._last_token += 1
        blur = AnimationHandle(
            token=self._last_token,
            started_at=started_at,
            duration=self._blur_duration,
        )
        return _DigitSlot(cell, start_value, started_at, blur)

    def _value_of(self, slot: _DigitSlot, now: float) -> float:
        return self._spring.value_at(
            slot.start_value,
            float(slot.cell.target_value),
            now - slot.started_at,
        )

    def start_value(self, index: int) -> float | None:
        """Return the value the slot's current roll started from."""
        slot = self._slots[index]
        if not slot.cell.is_numeric:
            return None
        return slot.start_value

    def displayed_value(self, index: int) -> float | None:
        """Return the value the slot currently shows; None for glyphs."""
        slot = self._slots[index]
        if not slot.cell.is_numeric:
            return None
        return self._value_of(slot, self._clock())

    def is_complete(self, index: int) -> bool:
        """Return True once the slot's spring has settled on its target."""
        slot = self._slots[index]
        if not slot.cell.is_numeric:
            return True
        elapsed = self._clock() - slot.started_at
        # A roll that starts on its target still waits out its delay.
        if elapsed < 0:
            return False
        if slot.start_value == slot.cell.target_value:
            return True
        return elapsed >= self._spring.settle_duration()

    def is_blurred(self, index: int) -> bool:
        """Return the cosmetic motion-blur flag of a slot.

        The flag follows a fixed time window from the roll start and says
        nothing about whether the spring has settled.
        """
        blur = self._slots[index].blur
        return blur is not None and blur.is_active(self._clock())


__all__ = ["build_digit_cells", "DigitRollSequencer"]
