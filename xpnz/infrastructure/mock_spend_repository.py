"""In-memory spend repository backed by the app's fixed sample data."""

from decimal import Decimal

from xpnz.domain.models.spend import SpendRecord, Transaction, TransactionType
from xpnz.domain.models.time_frame import TimeFrame


def _tx(
    name: str,
    transaction_type: TransactionType,
    amount: str,
    is_incoming: bool,
    icon_name: str,
) -> Transaction:
    return Transaction(
        name=name,
        transaction_type=transaction_type,
        amount=Decimal(amount),
        is_incoming=is_incoming,
        icon_name=icon_name,
    )


SPEND_AMOUNTS: dict[TimeFrame, Decimal] = {
    TimeFrame.DAY: Decimal("18.75"),
    TimeFrame.WEEK: Decimal("143.20"),
    TimeFrame.MONTH: Decimal("612.90"),
    TimeFrame.YEAR: Decimal("7354.80"),
}

_TRANSFER = TransactionType.MONEY_TRANSFER
_CARD = TransactionType.CARD
_ADDED = TransactionType.MONEY_ADDED
_SUBSCRIPTION = TransactionType.SUBSCRIPTION
_PURCHASE = TransactionType.PURCHASE

TRANSACTIONS: dict[TimeFrame, list[Transaction]] = {
    TimeFrame.MONTH: [
        _tx("From Ale Gonzales", _TRANSFER, "1000", True, "arrow.up.circle"),
        _tx("From Ale Gonzales", _TRANSFER, "2000", True, "arrow.up.circle"),
        _tx("To Ale Gonzales", _TRANSFER, "240", False, "paperplane"),
        _tx("Wallgreens", _CARD, "13.80", False, "creditcard"),
        _tx("CITIZE CK WEBXFR", _ADDED, "1000", True, "arrow.down.circle"),
        _tx("Netflix", _SUBSCRIPTION, "15.99", False, "play.rectangle"),
        _tx("Spotify", _SUBSCRIPTION, "9.99", False, "music.note"),
        _tx("Amazon", _PURCHASE, "89.50", False, "bag"),
        _tx("Target", _CARD, "156.32", False, "creditcard"),
        _tx("From John Smith", _TRANSFER, "500", True, "arrow.up.circle"),
    ],
    TimeFrame.WEEK: [
        _tx("Starbucks", _CARD, "6.50", False, "cup.and.saucer"),
        _tx("Uber", _CARD, "24.80", False, "car"),
        _tx("From Mom", _TRANSFER, "100", True, "arrow.up.circle"),
        _tx("Whole Foods", _CARD, "78.45", False, "cart"),
        _tx("Gas Station", _CARD, "45.00", False, "fuelpump"),
    ],
    TimeFrame.DAY: [
        _tx("Coffee Shop", _CARD, "5.25", False, "cup.and.saucer"),
        _tx("Lunch", _CARD, "13.50", False, "fork.knife"),
    ],
    TimeFrame.YEAR: [
        _tx("Salary Deposit", _ADDED, "45000", True, "building.columns"),
        _tx("Rent Payments", _TRANSFER, "24000", False, "house"),
        _tx("Insurance", _SUBSCRIPTION, "2400", False, "shield"),
        _tx(
            "Investments",
            _TRANSFER,
            "12000",
            False,
            "chart.line.uptrend.xyaxis",
        ),
    ],
}


class MockSpendRepository:
    """Spend data port serving fixed totals and transaction lists."""

    def fetch_spend_record(self, time_frame: TimeFrame) -> SpendRecord:
        return SpendRecord(
            time_frame=time_frame,
            amount=SPEND_AMOUNTS[time_frame],
        )

    def fetch_transactions(self, time_frame: TimeFrame) -> list[Transaction]:
        return list(TRANSACTIONS[time_frame])


__all__ = ["MockSpendRepository", "SPEND_AMOUNTS", "TRANSACTIONS"]
