"""Tests for the in-memory repositories."""

from datetime import date
from decimal import Decimal

from xpnz.domain.models.balance import BalancePeriod
from xpnz.domain.models.time_frame import TimeFrame
from xpnz.domain.services.formatting import format_currency
from xpnz.infrastructure.mock_balance_repository import MockBalanceRepository
from xpnz.infrastructure.mock_spend_repository import (
    TRANSACTIONS,
    MockSpendRepository,
)


def test_spend_records_cover_every_frame() -> None:
    repository = MockSpendRepository()

    amounts = {
        frame: repository.fetch_spend_record(frame).amount
        for frame in TimeFrame
    }

    assert amounts == {
        TimeFrame.DAY: Decimal("18.75"),
        TimeFrame.WEEK: Decimal("143.20"),
        TimeFrame.MONTH: Decimal("612.90"),
        TimeFrame.YEAR: Decimal("7354.80"),
    }
    assert format_currency(amounts[TimeFrame.DAY]) == "$18.75"
    assert format_currency(amounts[TimeFrame.YEAR]) == "$7,354.80"


def test_fetch_transactions_returns_copies() -> None:
    repository = MockSpendRepository()

    fetched = repository.fetch_transactions(TimeFrame.DAY)
    fetched.clear()

    assert len(repository.fetch_transactions(TimeFrame.DAY)) == 2
    assert len(TRANSACTIONS[TimeFrame.MONTH]) == 10


def test_balance_repository_serves_every_period() -> None:
    repository = MockBalanceRepository()

    amounts = [repository.fetch_balance(p).amount for p in BalancePeriod]

    assert amounts == ["+$428", "-$85", "+$1,247", "+$8,935", "-$312"]
    assert len(repository.fetch_stats(BalancePeriod.TODAY)) == 4
    metrics = repository.fetch_day_metrics(date(2026, 10, 18))
    assert metrics.largest_expense == "$48"
