"""Explicit animation handles replacing fixed-duration flag timers.

A handle identifies one in-flight transition. Guards hand out handles and
only the current handle may release them, so a completion arriving for an
older transition cannot clear the flag of a newer one.
"""

from dataclasses import dataclass
import math
import time
from typing import Callable

Clock = Callable[[], float]


@dataclass(frozen=True)
class AnimationHandle:
    """Identity and time window of one transition.

    Attributes:
        token: Monotonic identifier issued by the owner.
        started_at: Clock time at which the transition starts.
        duration: Length of the window in seconds.
    """

    token: int
    started_at: float
    duration: float

    @property
    def ends_at(self) -> float:
        return self.started_at + self.duration

    def is_active(self, now: float) -> bool:
        """Return True while ``now`` falls inside the handle window."""
        return self.started_at <= now < self.ends_at


class AnimationGuard:
    """Re-entrancy guard for transitions that must not overlap."""

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._current: AnimationHandle | None = None
        self._last_token = 0

    @property
    def current(self) -> AnimationHandle | None:
        return self._current

    def is_busy(self) -> bool:
        """Return True while the current handle window is open."""
        if self._current is None:
            return False
        return self._current.is_active(self._clock())

    def try_acquire(self, duration: float) -> AnimationHandle | None:
        """Start a transition unless another one is still in flight.

        Args:
            duration: Window length of the new transition in seconds.

        Returns:
            AnimationHandle | None: New handle, or None when busy.
        """
        if self.is_busy():
            return None
        return self.supersede(duration)

    def supersede(self, duration: float) -> AnimationHandle:
        """Start a transition, replacing whatever is in flight."""
        self._last_token += 1
        self._current = AnimationHandle(
            token=self._last_token,
            started_at=self._clock(),
            duration=duration,
        )
        return self._current

    def release(self, handle: AnimationHandle) -> bool:
        """Finish ``handle`` if it is still the current transition.

        Returns:
            bool: True when the guard was cleared.
        """
        if self._current is None or self._current.token != handle.token:
            return False
        self._current = None
        return True


@dataclass(frozen=True)
class SpringAnimation:
    """Damped spring parameterised like UI toolkit springs.

    Attributes:
        response: Period of the undamped oscillation in seconds.
        damping_fraction: Damping ratio; below 1 the spring overshoots.
    """

    response: float = 0.5
    damping_fraction: float = 0.82

    @property
    def angular_frequency(self) -> float:
        return 2 * math.pi / self.response

    def value_at(self, start: float, target: float, elapsed: float) -> float:
        """Return the spring position ``elapsed`` seconds after release.

        The spring starts at rest at ``start`` and settles on ``target``.
        """
        if elapsed <= 0:
            return start
        displacement = start - target
        omega = self.angular_frequency
        zeta = self.damping_fraction
        if zeta < 1:
            damped = omega * math.sqrt(1 - zeta * zeta)
            envelope = math.exp(-zeta * omega * elapsed)
            offset = envelope * (
                displacement * math.cos(damped * elapsed)
                + (zeta * omega * displacement / damped)
                * math.sin(damped * elapsed)
            )
        elif zeta == 1:
            offset = (
                displacement
                * (1 + omega * elapsed)
                * math.exp(-omega * elapsed)
            )
        else:
            root = math.sqrt(zeta * zeta - 1)
            fast = -omega * (zeta + root)
            slow = -omega * (zeta - root)
            slow_weight = -fast * displacement / (slow - fast)
            fast_weight = slow * displacement / (slow - fast)
            offset = slow_weight * math.exp(slow * elapsed) + (
                fast_weight * math.exp(fast * elapsed)
            )
        return target + offset

    def settle_duration(self, tolerance: float = 1e-3) -> float:
        """Return the time after which the envelope drops below tolerance."""
        omega = self.angular_frequency
        zeta = self.damping_fraction
        if zeta < 1:
            decay = zeta * omega
        else:
            decay = omega * (zeta - math.sqrt(zeta * zeta - 1))
        return -math.log(tolerance) / decay


__all__ = [
    "Clock",
    "AnimationHandle",
    "AnimationGuard",
    "SpringAnimation",
]
