"""Tests for the GetFilteredTransactionsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from xpnz.application.use_cases.get_filtered_transactions import (
    GetFilteredTransactionsUseCase,
)
from xpnz.domain.models.spend import (
    Transaction,
    TransactionCategory,
    TransactionType,
)
from xpnz.domain.models.time_frame import TimeFrame


def test_execute_fetches_frame_and_applies_category() -> None:
    rows = [
        Transaction(
            name="Salary",
            transaction_type=TransactionType.MONEY_ADDED,
            amount=Decimal("100"),
            is_incoming=True,
        ),
        Transaction(
            name="Gym",
            transaction_type=TransactionType.SUBSCRIPTION,
            amount=Decimal("30"),
            is_incoming=False,
        ),
    ]
    repository = MagicMock()
    repository.fetch_transactions.return_value = rows

    use_case = GetFilteredTransactionsUseCase(
        spend_repository=repository,
        logger=MagicMock(),
    )
    result = use_case.execute(TimeFrame.WEEK, TransactionCategory.RECURRING)

    assert [item.name for item in result] == ["Gym"]
    repository.fetch_transactions.assert_called_once_with(TimeFrame.WEEK)


def test_execute_defaults_to_all() -> None:
    repository = MagicMock()
    repository.fetch_transactions.return_value = []

    use_case = GetFilteredTransactionsUseCase(repository, logger=MagicMock())

    assert use_case.execute(TimeFrame.DAY) == []
