"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from xpnz.domain.constants import (
    DEFAULT_DIGIT_ANIMATION_DURATION,
    DEFAULT_SPRING_DAMPING,
    DEFAULT_SPRING_RESPONSE,
    DEFAULT_STAGGER_DELAY,
)
from xpnz.domain.models.currency import Currency
from xpnz.domain.models.time_frame import TimeFrame, parse_time_frame
from xpnz.domain.models.visibility import DEFAULT_ENABLED_TIME_FRAMES
from xpnz.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppSettings:
    """Display settings for the XPNZ app.

    Attributes:
        currency: Currency used by every formatted amount.
        stagger_delay: Seconds between neighbouring odometer digit rolls.
        digit_animation_duration: Motion-blur window per digit in seconds.
        spring_response: Period of the digit roll spring in seconds.
        spring_damping: Damping ratio of the digit roll spring.
        default_time_frames: Frames enabled when a screen is mounted.
        strict_expansion: Raise on expanding a disabled time frame.
    """

    currency: Currency = Currency.USD
    stagger_delay: float = DEFAULT_STAGGER_DELAY
    digit_animation_duration: float = DEFAULT_DIGIT_ANIMATION_DURATION
    spring_response: float = DEFAULT_SPRING_RESPONSE
    spring_damping: float = DEFAULT_SPRING_DAMPING
    default_time_frames: frozenset[TimeFrame] = DEFAULT_ENABLED_TIME_FRAMES
    strict_expansion: bool = False

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables and a ``.env`` file.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            currency=cls._parse_currency(
                os.getenv("XPNZ_CURRENCY", "USD"),
                logger=logger,
            ),
            stagger_delay=cls._parse_float(
                "XPNZ_STAGGER_DELAY",
                DEFAULT_STAGGER_DELAY,
                logger=logger,
            ),
            digit_animation_duration=cls._parse_float(
                "XPNZ_DIGIT_ANIMATION_DURATION",
                DEFAULT_DIGIT_ANIMATION_DURATION,
                logger=logger,
            ),
            spring_response=cls._parse_float(
                "XPNZ_SPRING_RESPONSE",
                DEFAULT_SPRING_RESPONSE,
                logger=logger,
                positive=True,
            ),
            spring_damping=cls._parse_float(
                "XPNZ_SPRING_DAMPING",
                DEFAULT_SPRING_DAMPING,
                logger=logger,
                positive=True,
            ),
            default_time_frames=cls._parse_time_frames(
                os.getenv("XPNZ_DEFAULT_TIME_FRAMES"),
                logger=logger,
            ),
            strict_expansion=(
                os.getenv("XPNZ_STRICT_EXPANSION", "false").strip().lower()
                in _TRUE_VALUES
            ),
        )

    @staticmethod
    def _parse_currency(raw: str, logger) -> Currency:
        """Parse a currency code, falling back to USD.

        Args:
            raw: Currency code such as ``"usd"``.
            logger: Logger used for warnings.

        Returns:
            Currency: Parsed currency.
        """
        try:
            return Currency(raw.strip().upper())
        except ValueError:
            logger.warning(f"Unsupported currency '{raw}', using USD")
            return Currency.USD

    @staticmethod
    def _parse_float(
        name: str,
        default: float,
        logger,
        positive: bool = False,
    ) -> float:
        """Read a float variable, falling back to ``default`` on bad input.

        Negative values are always rejected. With ``positive`` set, zero is
        rejected as well.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid {name}='{raw}', using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative {name}='{raw}', using {default}")
            return default
        if positive and value == 0:
            logger.warning(f"Zero {name} is not allowed, using {default}")
            return default
        return value

    @staticmethod
    def _parse_time_frames(
        raw: str | None,
        logger,
    ) -> frozenset[TimeFrame]:
        """Parse a comma separated list of time frame names.

        Unknown names are skipped with a warning. An unset variable gives
        the default set; an empty value gives an empty set.
        """
        if raw is None:
            return DEFAULT_ENABLED_TIME_FRAMES
        parsed: set[TimeFrame] = set()
        for name in raw.split(","):
            if not name.strip():
                continue
            time_frame = parse_time_frame(name)
            if time_frame is None:
                logger.warning(f"Unknown time frame '{name.strip()}' ignored")
                continue
            parsed.add(time_frame)
        return frozenset(parsed)


__all__ = ["AppSettings"]
