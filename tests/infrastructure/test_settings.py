"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from xpnz.domain.models.currency import Currency
from xpnz.domain.models.time_frame import TimeFrame
from xpnz.domain.services.animation import SpringAnimation
from xpnz.domain.services.digit_roll import DigitRollSequencer
from xpnz.infrastructure import settings as settings_module
from xpnz.infrastructure.settings import AppSettings

_ENV_NAMES = [
    "XPNZ_CURRENCY",
    "XPNZ_STAGGER_DELAY",
    "XPNZ_DIGIT_ANIMATION_DURATION",
    "XPNZ_SPRING_RESPONSE",
    "XPNZ_SPRING_DAMPING",
    "XPNZ_DEFAULT_TIME_FRAMES",
    "XPNZ_STRICT_EXPANSION",
]


@pytest.fixture
def logger(monkeypatch) -> MagicMock:
    """Isolate settings from .env files and the real logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return fake_logger


def test_from_env_defaults(logger) -> None:
    settings = AppSettings.from_env()

    assert settings == AppSettings()
    assert settings.currency is Currency.USD
    assert settings.stagger_delay == 0.06
    assert settings.default_time_frames == frozenset(
        {TimeFrame.DAY, TimeFrame.WEEK, TimeFrame.MONTH}
    )
    assert settings.strict_expansion is False
    logger.warning.assert_not_called()


def test_from_env_reads_overrides(monkeypatch, logger) -> None:
    monkeypatch.setenv("XPNZ_CURRENCY", "usd")
    monkeypatch.setenv("XPNZ_STAGGER_DELAY", "0.1")
    monkeypatch.setenv("XPNZ_SPRING_DAMPING", "1.0")
    monkeypatch.setenv("XPNZ_DEFAULT_TIME_FRAMES", "year, day")
    monkeypatch.setenv("XPNZ_STRICT_EXPANSION", "yes")

    settings = AppSettings.from_env()

    assert settings.stagger_delay == 0.1
    assert settings.spring_damping == 1.0
    assert settings.default_time_frames == frozenset(
        {TimeFrame.YEAR, TimeFrame.DAY}
    )
    assert settings.strict_expansion is True


def test_invalid_values_fall_back_with_warning(monkeypatch, logger) -> None:
    monkeypatch.setenv("XPNZ_CURRENCY", "EUR")
    monkeypatch.setenv("XPNZ_STAGGER_DELAY", "fast")
    monkeypatch.setenv("XPNZ_DIGIT_ANIMATION_DURATION", "-1")
    monkeypatch.setenv("XPNZ_DEFAULT_TIME_FRAMES", "day,decade")

    settings = AppSettings.from_env()

    assert settings.currency is Currency.USD
    assert settings.stagger_delay == 0.06
    assert settings.digit_animation_duration == 0.5
    assert settings.default_time_frames == frozenset({TimeFrame.DAY})
    assert logger.warning.call_count == 4


def test_empty_time_frame_list_gives_empty_set(monkeypatch, logger) -> None:
    monkeypatch.setenv("XPNZ_DEFAULT_TIME_FRAMES", "")

    settings = AppSettings.from_env()

    assert settings.default_time_frames == frozenset()


def test_zero_spring_values_fall_back_with_warning(
    monkeypatch,
    logger,
) -> None:
    monkeypatch.setenv("XPNZ_SPRING_RESPONSE", "0")
    monkeypatch.setenv("XPNZ_SPRING_DAMPING", "0.0")
    monkeypatch.setenv("XPNZ_STAGGER_DELAY", "0")

    settings = AppSettings.from_env()

    assert settings.spring_response == 0.5
    assert settings.spring_damping == 0.82
    assert settings.stagger_delay == 0.0
    assert logger.warning.call_count == 2


def test_zero_spring_settings_keep_digit_rolls_running(
    monkeypatch,
    logger,
) -> None:
    monkeypatch.setenv("XPNZ_SPRING_RESPONSE", "0")
    monkeypatch.setenv("XPNZ_SPRING_DAMPING", "0")
    now = [0.0]
    settings = AppSettings.from_env()
    sequencer = DigitRollSequencer(
        stagger_delay=settings.stagger_delay,
        spring=SpringAnimation(
            response=settings.spring_response,
            damping_fraction=settings.spring_damping,
        ),
        blur_duration=settings.digit_animation_duration,
        clock=lambda: now[0],
    )

    sequencer.update("+$428")
    now[0] = 0.1
    cells = sequencer.update("-$85")
    now[0] = 5.0

    assert [cell.character for cell in cells] == list("-$85")
    assert all(sequencer.is_complete(i) for i in range(len(cells)))
