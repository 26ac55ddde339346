"""Tests for the spend_summary_cli adapter."""

from unittest.mock import MagicMock

from xpnz.adapters import spend_summary_cli
from xpnz.domain.models.balance import BalancePeriod
from xpnz.infrastructure.settings import AppSettings


def _patch(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(spend_summary_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        spend_summary_cli,
        "build_settings",
        lambda: AppSettings(),
    )
    return logger


def test_main_prints_rows_and_schedule(monkeypatch, capsys) -> None:
    _patch(monkeypatch)
    monkeypatch.delenv("XPNZ_EXPANDED", raising=False)
    monkeypatch.setenv("XPNZ_BALANCE_PERIOD", "monthly")

    spend_summary_cli.main()

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "Spending"
    assert lines[1].startswith("$612.90m")
    assert lines[2].startswith("$143.20w")
    assert lines[3].startswith("$18.75d")
    assert "Save-to-spend Monthly: +$1,247 +23%" in out
    assert "  7 rolls after 0.00s" in out
    assert "  1 rolls after 0.18s" in out
    assert "  , static" in out


def test_main_expands_requested_frame(monkeypatch, capsys) -> None:
    _patch(monkeypatch)
    monkeypatch.setenv("XPNZ_EXPANDED", "week")
    monkeypatch.delenv("XPNZ_BALANCE_PERIOD", raising=False)

    spend_summary_cli.main()

    out = capsys.readouterr().out
    assert "$612.90m (opacity=0.70, alpha=0.35)" in out
    assert "$143.20w (opacity=0.50, alpha=1.00)" in out
    assert "Save-to-spend Today" in out


def test_unknown_inputs_are_warned(monkeypatch, capsys) -> None:
    logger = _patch(monkeypatch)
    monkeypatch.setenv("XPNZ_EXPANDED", "decade")
    monkeypatch.setenv("XPNZ_BALANCE_PERIOD", "someday")

    spend_summary_cli.main()

    assert logger.warning.call_count == 2
    assert "Save-to-spend Today" in capsys.readouterr().out


def test_parse_period() -> None:
    logger = MagicMock()

    assert spend_summary_cli._parse_period(None, logger) is BalancePeriod.TODAY
    assert (
        spend_summary_cli._parse_period(" Yearly ", logger)
        is BalancePeriod.YEARLY
    )
    logger.warning.assert_not_called()
